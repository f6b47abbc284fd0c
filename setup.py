from setuptools import find_packages, setup

setup(
    name="docshot",
    version="0.1.0",
    description="Operaton documentation screenshot toolkit - image reference analysis and engine checks",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "jinja2",  # Replacement plan rendering
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on a TTY
        "requests",  # Engine REST API
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "docshot=docshot.cli:main",
        ],
    },
)
