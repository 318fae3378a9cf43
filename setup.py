from setuptools import setup, find_packages

setup(
    name="exactmatrix",
    version="1.0",
    description="Exact linear algebra over arbitrary-precision rational numbers",
    long_description=("Immutable fractions and matrices with exact arithmetic, two independent determinant "
                      "algorithms (row elimination and cofactor expansion) and adjugate-based inversion"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["exactmatrix", "exactmatrix.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "matrix", "determinant", "exact arithmetic"],
    zip_safe=False,
)
