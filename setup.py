# setup.py
from setuptools import setup, find_packages

setup(
    name="qbscript",
    version="0.1.0",
    description="Interpreter for Qb Script, a minimal LISP-family language",
    packages=find_packages(include=["qbscript", "qbscript.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
