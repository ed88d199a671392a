# setup.py
from setuptools import setup, find_packages

setup(
    name="gmath",
    version="0.1.0",
    description="Generic 2D/3D vector algebra over numpy scalars",
    packages=find_packages(include=["gmath", "gmath.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
