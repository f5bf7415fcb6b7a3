# setup.py
from setuptools import setup, find_packages

setup(
    name="tulip",
    version="0.1.0",
    description="A small homoiconic Lisp: lexer, recursive-descent parser and evaluator",
    packages=find_packages(include=("tulip", "tulip.*")),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tulip = tulip.__main__:main"],
    },
    zip_safe=False,
)
