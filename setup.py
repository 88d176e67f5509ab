from setuptools import setup, find_packages

setup(
    name="gh-git-data",
    version="0.1.0",
    description="Typed async client for GitHub git references and tags",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
        "httpx>=0.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "gh-git-data=gh_git_data.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
