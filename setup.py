# setup.py
from setuptools import setup, find_packages

setup(
    name="bsl",
    version="0.3.0",
    description="Live-feedback interpreter for the Beginning Student Language",
    packages=find_packages(include=["bsl", "bsl.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["bsl=bsl.__main__:main"],
    },
    zip_safe=False,
)
