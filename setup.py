"""Setup script for hashcorpus."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Return the long description, if a README is present."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="hashcorpus",
    version="0.1.0",
    description="Deterministic digest fixtures for validating SHA-1/SHA-2 implementations",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["hashcorpus", "hashcorpus.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "hashcorpus=hashcorpus.__main__:main",
            "hashcorpus-blobs=hashcorpus.cli.commands.blobs:blobs",
            "hashcorpus-words=hashcorpus.cli.commands.words:words",
        ],
    },
)
