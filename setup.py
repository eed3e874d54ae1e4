import os

from setuptools import find_packages, setup

setup(
    name="negation",
    version="0.1.0",
    packages=find_packages(include=["negation", "negation.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    author="Negation Contributors",
    description="Validation by declaring what values must not be, in fail-fast or collect-all mode",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
