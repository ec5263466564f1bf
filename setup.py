"""
setup.py

Установка Peg Thing.

Использование:
    pip install -e .            # игра и JSON API
    pip install -e .[test]      # + pytest
    peg-thing --rows 5          # консольная игра
"""

from setuptools import setup, find_packages

setup(
    name="peg_thing",
    version="1.0.0",
    description="Peg Thing: triangular peg solitaire in the terminal",
    packages=find_packages(include=["core", "peg_io", "solutions", "utils", "web"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-thing=main:main",
        ],
    },
    zip_safe=False,
)
