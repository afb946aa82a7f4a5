# setup.py
from setuptools import setup, find_packages

setup(
    name="sable",
    version="0.1.0",
    description="Evaluation core of a small Scheme interpreter with proper tail calls",
    packages=find_packages(include=["sable", "sable.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sable=sable.__main__:main"],
    },
    zip_safe=False,
)
