from setuptools import find_packages, setup

setup(
    name="docstore",
    version="0.1.0",
    description="Single-field equality facade over a MongoDB-compatible document store",
    packages=find_packages(include=["docstore", "docstore.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymongo>=4.2",  # MongoDB driver (pymongo.timeout)
        "mongomock",  # In-memory MongoDB backend
        "pydantic>=2.0",  # Store configuration models
        "typer",  # CLI
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "docstore=docstore.cli:main",
        ],
    },
)
