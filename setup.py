# setup.py
from setuptools import setup, find_packages

setup(
    name="vecmat",
    version="1.0.0",
    description="Small generic 2D/3D vector and 3x3 matrix library",
    packages=find_packages(include=["vecmat", "vecmat.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
