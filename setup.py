# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A small Lisp with S-Expressions, Q-Expressions and curried lambdas",
    packages=find_packages(include=["lispy", "lispy.*"]),
    package_data={"lispy": ["prelude/*.lspy"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.cli:main"],
    },
    zip_safe=False,
)
