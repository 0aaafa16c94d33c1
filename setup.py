"""Setup script for gbm-path-simulator package."""

from setuptools import setup, find_packages

setup(
    name="gbm-path-simulator",
    version="1.0.0",
    description="Monte Carlo sample paths of Geometric Brownian Motion",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="GBM Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
        "matplotlib>=3.3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
