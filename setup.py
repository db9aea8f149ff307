"""
Setup script for sparsela

Pure-Python package in a src/ layout:
1. Version is read from src/sparsela/__init__.py
2. numpy is the only runtime dependency
3. scipy interop and the test suite are optional extras
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/sparsela/__init__.py
def get_version():
    version_file = Path("src/sparsela/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="sparsela",
    version=get_version(),
    description="Sparse matrix algebra: CSR, DOK and LIL formats with a sparse vector primitive",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "scipy": ["scipy>=1.7"],
        "test": ["pytest>=7.0", "scipy>=1.7"],
    },
    zip_safe=True,
)
