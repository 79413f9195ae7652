from setuptools import setup

setup(
    name="treebench",
    version="0.0.1",
    description="bst vs avl insertion and search timing",
    author="thejchap",
    packages=["treebench"],
    install_requires=[
        "structlog",
        "colorama>=0.4.6",
    ],
    extras_require={
        "dev": [
            "black",
            "pylint",
            "flake8",
            "mypy",
            "pytest",
        ],
        "plot": ["matplotlib"],
    },
    entry_points={"console_scripts": ["treebench=treebench.cli:main"]},
)
