"""
Setup script for gutility.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies (pytest)
"""

from setuptools import find_packages, setup


setup(
    name="gutility",
    version="0.1.0",
    description="Point containment, polygon triangulation and line/plane intersection",
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"dev": ["pytest"]},
    packages=find_packages("src"),
    package_dir={'': 'src'},
    zip_safe=False,
)
