"""
setup.py

Packaging metadata and CLI entry point for slidedeck-mcp.

Version: 1.0.0 — MCP server and CLI that turn free-form text or a
YouTube URL into a generated slide deck.
"""
from setuptools import setup, find_packages

setup(
    name="slidedeck-mcp",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests",
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
        "mcp>=1.2,<2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "slidedeck=cli:cli",
            "slidedeck-mcp=mcp_server.server:main",
        ],
    },
    python_requires=">=3.10",
)
