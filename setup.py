from setuptools import setup, find_packages

setup(
    name="walletcore",
    version="0.1.0",
    packages=find_packages(include=["walletcore", "walletcore.*"]),
    install_requires=[
        # Ethereum hashing utilities (keccak for checksums)
        "eth-utils>=2.0.0",
        "eth-hash[pycryptodome]>=0.5.0",
        # Data validation and configuration
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        # CLI and UI
        "click>=8.1.3",
        "rich>=13.0.0",
        # Logging
        "coloredlogs>=15.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "eth-account>=0.8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "walletcore=walletcore.cli.main:main",
        ],
    },
    description="Address handling core for wallet clients: checksums, display formats, ENS name syntax and key import",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
