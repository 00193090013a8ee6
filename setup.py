from setuptools import setup, find_packages

setup(
    name="hashspell",
    version="0.1.0",
    description="Batch spell checker over an open-addressing hash table",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hashspell=hashspell.main:main",
        ],
    },
)
