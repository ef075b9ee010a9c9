from setuptools import setup, find_packages

setup(
    name="inkwell",
    version="0.1.0",
    description="Review AI rewrites of a text selection in a split view, accepting or rejecting each edit",
    packages=find_packages(include=["inkwell", "inkwell.*"]),
    install_requires=[
        "typer",
        "rich",
        "readchar",
        "python-docx",
        "openai",
        "anthropic",
        "python-dotenv",
        "diff-match-patch",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "inkwell=inkwell.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
