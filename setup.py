# setup.py
from setuptools import setup, find_packages

setup(
    name="lisn",
    version="1.0.0",
    description="LISN: an S-expression data interchange notation (parse, evaluate, generate)",
    packages=find_packages(include=["lisn", "lisn.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
