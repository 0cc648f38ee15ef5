"""
Resolve addresses to locally known account names.

Identity maps are keyed by checksummed address. Lookups checksum the queried
address and then match keys exactly, so a map stored under lower-case keys
will not resolve; build such maps through ``checksum_identities``.
"""

from typing import Any, Dict, Mapping, Optional

from .checksum import safe_to_checksum_address, to_checksum_address
from .display import render_short_address


def _identity_name(record: Any) -> str:
    if isinstance(record, Mapping):
        return record["name"]
    return record.name


def checksum_identities(identities: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``identities`` keyed by checksummed address.

    Records are shared, not copied. When two keys differ only in casing the
    later one wins.
    """
    return {to_checksum_address(address): record for address, record in identities.items()}


def render_account_name(
    address: Optional[str], identities: Optional[Mapping[str, Any]] = None
) -> Optional[str]:
    """
    Returns the account name if the address is a known identity.

    Args:
        address (Optional[str]): Address in any casing.
        identities (Optional[Mapping[str, Any]]): Checksummed address -> record
            with a ``name`` (mapping key or attribute).

    Returns:
        Optional[str]: The identity name, otherwise the short address format
        (None when the address is absent).
    """
    address = safe_to_checksum_address(address)
    if identities and address and address in identities:
        return _identity_name(identities[address])
    return render_short_address(address)
