# setup.py
from setuptools import setup, find_packages

setup(
    name="objscope",
    version="1.0.0",
    description="Wavefront OBJ loader and 3D math kernel",
    packages=find_packages(include=["objscope", "objscope.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["objscope=objscope.cli:main"],
    },
)
