"""
Checksum encoding for 20-byte account addresses.

Implements EIP-55 mixed-case checksums and the chain-aware EIP-1191 variant.
The casing is derived from the Keccak-256 digest of the lower-case hex text
(not of the binary address), so checksumming only ever changes letter case.
"""

import re
from typing import Optional

from eth_utils import keccak

HEX_PREFIX = "0x"
ADDRESS_LENGTH = len(HEX_PREFIX) + 20 * 2

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}\Z")


def _strip_hex_prefix(value: str) -> str:
    if value.startswith(HEX_PREFIX):
        return value[len(HEX_PREFIX):]
    return value


def to_checksum_address(address: str, chain_id: Optional[int] = None) -> str:
    """
    Return the checksummed form of an address.

    Args:
        address (str): 0x-prefixed (or bare) 40 hex character address, any case.
        chain_id (Optional[int]): When given, the EIP-1191 chain id mixed into the hash.

    Returns:
        str: The address with letters upper-cased where the digest nibble is >= 8.
    """
    hex_body = _strip_hex_prefix(address).lower()
    prefix = f"{chain_id}{HEX_PREFIX}" if chain_id is not None else ""
    digest = keccak(text=prefix + hex_body).hex()

    # Characters past the 64 digest nibbles are left lower-case
    checksummed = []
    for i, char in enumerate(hex_body):
        if char in "abcdef" and i < len(digest) and int(digest[i], 16) >= 8:
            checksummed.append(char.upper())
        else:
            checksummed.append(char)
    return HEX_PREFIX + "".join(checksummed)


def safe_to_checksum_address(address: Optional[str]) -> Optional[str]:
    """Checksum an address, passing absent input through as None."""
    if not address:
        return None
    return to_checksum_address(address)


def resembles_address(address: str) -> bool:
    """True when the string has the length of a 0x-prefixed 20-byte address."""
    return len(address) == ADDRESS_LENGTH


def is_valid_address(address: Optional[str]) -> bool:
    """True for 0x followed by exactly 40 hex characters, in any casing."""
    return bool(address) and _ADDRESS_RE.match(address) is not None


def is_valid_checksum_address(address: Optional[str], chain_id: Optional[int] = None) -> bool:
    # All-lower or all-upper input is only accepted if it is its own checksum
    return is_valid_address(address) and to_checksum_address(address, chain_id) == address
