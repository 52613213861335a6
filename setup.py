# setup.py
from setuptools import setup, find_packages

setup(
    name="lisple",
    version="0.1.0",
    description="A small tree-walking evaluator for a Lisp-like expression language",
    packages=find_packages(include=["lisple", "lisple.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lisple=lisple.__main__:main"],
    },
    zip_safe=False,
)
