#!/usr/bin/env python3
"""
seqscan - zero-copy FASTA/FASTQ parsing
"""

from setuptools import setup, find_packages

# Read version number
def get_version():
    with open("seqscan/__init__.py", "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"

# Read long description
def get_long_description():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Zero-copy FASTA/FASTQ parsing over memory-mapped files"

setup(
    name="seqscanpy",
    version=get_version(),
    author="seqscan developers",
    author_email="",
    description="Zero-copy FASTA/FASTQ parsing over memory-mapped files",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "biopython>=1.79",
        "pandas>=1.3.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "isort>=5.0",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "seqscan=seqscan.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    package_data={"seqscan.config": ["data/*.json"]},
)
