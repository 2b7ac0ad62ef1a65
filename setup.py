"""
fixpoint: Fixed-Point Combinators for Python

Recursion without self-reference:
1. U combinator (self-application)
2. Z combinator (strict fixed point)
3. Y combinator with explicit call-by-need thunks
4. Mutual recursion and open-recursion transformers (memoise, trace, step limit)
5. Bounded evaluation and equivalence checking harnesses
"""

from setuptools import setup, find_packages

setup(
    name="fixpoint",
    version="1.0.0",
    description="Fixed-point combinators (Y, Z, U) for Python with verification harnesses",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    author="fixpoint contributors",
    python_requires=">=3.10",
    packages=find_packages(include=["fixpoint", "fixpoint.*"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-benchmark>=4.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Software Development :: Libraries",
    ],
)
