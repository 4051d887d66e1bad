# setup.py
from setuptools import setup, find_packages

setup(
    name="twik",
    version="0.1.0",
    description="Embeddable evaluator for a small Lisp-like language with exact rational arithmetic",
    packages=find_packages(include=["twik", "twik.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
