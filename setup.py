# setup.py
from setuptools import setup, find_packages

setup(
    name="lishp",
    version="0.1.0",
    description="Evaluation core of a small Lisp: values, environments, evaluator and primitives",
    packages=find_packages(include=["lishp", "lishp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
