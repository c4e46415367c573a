# setup.py
from setuptools import setup, find_packages

setup(
    name="sublisp",
    version="0.1.0",
    description="A small Lisp evaluated by substituting arguments into procedure bodies",
    packages=find_packages(include=["sublisp", "sublisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sublisp = sublisp.__main__:main"],
    },
    zip_safe=False,
)
