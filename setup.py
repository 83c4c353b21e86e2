"""Setup script for hotpatch-check."""
from setuptools import setup, find_packages

setup(
    name="hotpatch-check",
    version="0.1.0",
    description="Post-upgrade verification of fleet hotpatch logs",
    packages=find_packages(include=["hotpatch_check", "hotpatch_check.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "hotpatch-check=hotpatch_check.cli:main",
        ],
    },
)
