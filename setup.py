from setuptools import find_packages, setup

setup(
    name="mdref",
    version="0.1.0",
    description="Cursor-aware wiki/markdown reference query parsing for note autocompletion",
    packages=find_packages(include=["mdref", "mdref.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",  # Config and command output models
        "typer",  # CLI
        "click",  # CLI context (typer's foundation)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mdrefc=mdref.cli:main",
        ],
    },
)
