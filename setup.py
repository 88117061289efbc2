import os
from setuptools import setup, find_packages

setup(
    name="hwgate",
    version="1.0.0",
    description="hwgate: check a machine against minimum hardware requirements over HTTP",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="hwgate",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "psutil>=5.9.0",
        "click>=8.0.0",
        "fastapi>=0.100.0",
        "uvicorn[standard]>=0.20.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.24.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.24.0",
            "ruff>=0.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hwgate=hwgate.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
