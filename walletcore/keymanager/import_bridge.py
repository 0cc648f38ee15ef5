# walletcore/keymanager/import_bridge.py

import logging
from typing import Any, List, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

PRIVATE_KEY_STRATEGY = "privateKey"
PREFIXED_PRIVATE_KEY_LENGTH = 66


@runtime_checkable
class KeyringService(Protocol):
    """
    Account-management service that owns key storage.

    ``import_account_with_strategy`` takes a strategy tag and the arguments
    for that strategy, and resolves to the service's import result.
    """

    async def import_account_with_strategy(self, strategy: str, args: List[Any]) -> Any:
        ...


def normalize_private_key(private_key: str) -> str:
    """
    Strip the 0x prefix from a 0x-prefixed 64 hex character key.

    Any other input, including wrong-length or non-hex keys, is returned
    unchanged for the keyring to accept or reject.
    """
    if len(private_key) == PREFIXED_PRIVATE_KEY_LENGTH and private_key[:2] == "0x":
        return private_key[2:]
    return private_key


async def import_account_from_private_key(private_key: str, keyring: KeyringService) -> Any:
    """
    Imports an account from a private key through the given keyring.

    Args:
        private_key (str): Hex private key, optionally 0x-prefixed.
        keyring (KeyringService): Service performing the actual import.

    Returns:
        Any: Whatever the keyring's import resolves to.

    Raises:
        Exception: Any failure raised by the keyring, unchanged.
    """
    pkey = normalize_private_key(private_key)
    logger.debug(f"Importing account via '{PRIVATE_KEY_STRATEGY}' strategy")
    try:
        return await keyring.import_account_with_strategy(PRIVATE_KEY_STRATEGY, [pkey])
    except Exception as e:
        # Never include the key material in the record
        logger.error(f"Keyring rejected '{PRIVATE_KEY_STRATEGY}' import: {type(e).__name__}")
        raise
