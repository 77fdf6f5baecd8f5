from setuptools import setup, find_packages

setup(
    name="mergeview",
    version="0.1.0",
    description="Render line diffs & resolve merge conflicts from the terminal",
    packages=find_packages(include=["mergeview", "mergeview.*"]),
    install_requires=[
        "typer<0.26",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "mergeview=mergeview.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
