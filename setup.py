# setup.py
from setuptools import setup, find_packages

setup(
    name="nora",
    version="0.1.0",
    description="Nora Lisp: a minimal S-expression reader, evaluator and REPL",
    packages=find_packages(include=["nora", "nora.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["nora = nora.repl:main"],
    },
    zip_safe=False,
)
