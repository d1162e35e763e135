from setuptools import find_packages, setup

setup(
    name="linklore",
    version="0.1.0",
    description="Convert [[wikilinks]] into markdown links resolved against a local file index",
    packages=find_packages(include=["linklore", "linklore.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ no longer builds on Click)
        "click>=8.0",  # Active CLI context lookup
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
        "python-dotenv",  # .env configuration file
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "linklore=linklore.cli:main",
        ],
    },
)
