"""
Test configuration and fixtures for walletcore tests
"""

import asyncio
import os

import pytest

# EIP-55 reference vectors (already checksummed)
CHECKSUMMED_ADDRESSES = [
    # All caps
    "0x52908400098527886E0F7030069857D2E4169EE7",
    "0x8617E340B3D01FA5F11F306F4090FD50E238070D",
    # All lower
    "0xde709f2102306220921060314715629080e2fb77",
    "0x27b1fdb04752bbc536007a920d24acb045561c26",
    # Mixed
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]

# Test private keys (for testing only - never use in production)
TEST_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
TEST_PRIVATE_KEY_ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"


@pytest.fixture
def checksummed_address():
    """A checksummed address with mixed casing."""
    return "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


@pytest.fixture
def lowercase_address(checksummed_address):
    return checksummed_address.lower()


# Mark all async tests
def pytest_collection_modifyitems(config, items):
    """Automatically mark async tests"""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


# Setup test environment
def pytest_configure(config):
    """Configure test environment"""
    os.environ["WALLETCORE_LOG_LEVEL"] = "DEBUG"
    os.environ["WALLETCORE_LOCALE"] = "en"

    config.addinivalue_line("markers", "unit: mark test as unit test")
