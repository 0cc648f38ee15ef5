import logging
from typing import Any, List

import pytest
from eth_account import Account

from walletcore.address.checksum import is_valid_checksum_address
from walletcore.keymanager.import_bridge import (
    PRIVATE_KEY_STRATEGY,
    KeyringService,
    import_account_from_private_key,
    normalize_private_key,
)
from tests.conftest import TEST_PRIVATE_KEY, TEST_PRIVATE_KEY_ADDRESS

RAW_KEY = "11" * 32


class KeyringError(Exception):
    pass


class RecordingKeyring:
    """Keyring double that records every import request."""

    def __init__(self, result: Any = "imported"):
        self.calls: List[tuple] = []
        self.result = result

    async def import_account_with_strategy(self, strategy: str, args: List[Any]) -> Any:
        self.calls.append((strategy, list(args)))
        return self.result


class FailingKeyring:
    def __init__(self, error: Exception):
        self.error = error

    async def import_account_with_strategy(self, strategy: str, args: List[Any]) -> Any:
        raise self.error


class EthAccountKeyring:
    """In-memory keyring deriving accounts with eth-account."""

    def __init__(self):
        self.accounts = {}

    async def import_account_with_strategy(self, strategy: str, args: List[Any]) -> Any:
        if strategy != PRIVATE_KEY_STRATEGY:
            raise KeyringError(f"Unsupported strategy: {strategy}")
        account = Account.from_key(args[0])
        self.accounts[account.address] = account
        return account.address


@pytest.fixture
def keyring():
    return RecordingKeyring()


# -------------------------------------------------------------------
# normalize_private_key
# -------------------------------------------------------------------


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0x" + RAW_KEY, RAW_KEY),
        (RAW_KEY, RAW_KEY),
        ("0X" + RAW_KEY, "0X" + RAW_KEY),
        ("0x" + RAW_KEY[:-1], "0x" + RAW_KEY[:-1]),
        ("0x" + RAW_KEY + "1", "0x" + RAW_KEY + "1"),
        ("0x" + "zz" * 32, "zz" * 32),
        ("", ""),
    ],
)
def test_normalize_private_key(raw, expected):
    assert normalize_private_key(raw) == expected


# -------------------------------------------------------------------
# import_account_from_private_key
# -------------------------------------------------------------------


@pytest.mark.asyncio
async def test_prefixed_key_is_forwarded_without_prefix(keyring):
    result = await import_account_from_private_key("0x" + RAW_KEY, keyring)

    assert result == "imported"
    assert keyring.calls == [(PRIVATE_KEY_STRATEGY, [RAW_KEY])]


@pytest.mark.asyncio
async def test_unprefixed_key_is_forwarded_unchanged(keyring):
    await import_account_from_private_key(RAW_KEY, keyring)
    assert keyring.calls == [("privateKey", [RAW_KEY])]


@pytest.mark.asyncio
async def test_malformed_key_is_passed_through(keyring):
    await import_account_from_private_key("not-a-key", keyring)
    assert keyring.calls == [("privateKey", ["not-a-key"])]


@pytest.mark.asyncio
async def test_keyring_failure_propagates_unchanged(caplog):
    error = KeyringError("invalid key")
    caplog.set_level(logging.DEBUG, logger="walletcore")

    with pytest.raises(KeyringError) as exc_info:
        await import_account_from_private_key("0x" + RAW_KEY, FailingKeyring(error))

    assert exc_info.value is error
    assert "KeyringError" in caplog.text
    assert RAW_KEY not in caplog.text


@pytest.mark.asyncio
async def test_key_material_is_not_logged_on_success(keyring, caplog):
    caplog.set_level(logging.DEBUG, logger="walletcore")
    await import_account_from_private_key("0x" + RAW_KEY, keyring)
    assert RAW_KEY not in caplog.text


@pytest.mark.asyncio
async def test_import_with_eth_account_keyring():
    keyring = EthAccountKeyring()

    address = await import_account_from_private_key(TEST_PRIVATE_KEY, keyring)

    assert address == TEST_PRIVATE_KEY_ADDRESS
    assert is_valid_checksum_address(address)
    assert list(keyring.accounts) == [TEST_PRIVATE_KEY_ADDRESS]


@pytest.mark.asyncio
async def test_eth_account_keyring_rejects_malformed_key():
    # binascii.Error, raised by older hexbytes releases, subclasses ValueError
    with pytest.raises(ValueError):
        await import_account_from_private_key("0x" + "zz" * 32, EthAccountKeyring())


def test_keyring_doubles_satisfy_protocol():
    assert isinstance(RecordingKeyring(), KeyringService)
    assert isinstance(EthAccountKeyring(), KeyringService)
