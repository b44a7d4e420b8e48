#!/usr/bin/env python3

"""Setup script for the steric overlap detection package."""

from setuptools import setup, find_packages

setup(
    name="stericoverlap",
    version="1.0.0",
    description="Grid accelerated detection of steric clashes between two molecules",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "biopython>=1.79",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "steric-overlap=stericoverlap.presentation.cli.detect_clashes:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
