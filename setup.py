#!/usr/bin/env python3
"""Setup script for steamer-plugin"""
from setuptools import setup, find_packages

setup(
    name="steamer-plugin",
    version="0.1.0",
    description="Config and console helpers for steamer scaffolding plugins",
    author="Steamer Team",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "click>=8.1.0,<8.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "steamer-plugin=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Code Generators",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
