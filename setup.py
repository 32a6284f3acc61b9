from setuptools import find_packages, setup

setup(
    name="autosymlink",
    version="0.3.0",
    description="autosymlink - declarative symlink manager driven by a JSON config file",
    packages=find_packages(include=["autosymlink", "autosymlink.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework; 0.26+ bundles its own click, breaking the direct click imports
        "click>=8.2",  # Used directly for context and exception handling under typer
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schema validation
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-timeout>=2.1",
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "autosymlink=autosymlink.cli:main",
        ],
    },
)
