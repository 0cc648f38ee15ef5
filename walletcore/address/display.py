"""
Display strings for account addresses.

All renderers checksum first, so the visible characters always carry the
EIP-55 casing.
"""

from typing import Optional

from walletcore.locales.i18n import TX_DETAILS_NOT_AVAILABLE, Translator, strings
from .checksum import to_checksum_address

ELLIPSIS = "..."


def _truncate(checksummed: str, head: int, chars: int) -> str:
    # A negative head window yields an empty head, like a substring length
    return f"{checksummed[:max(head, 0)]}{ELLIPSIS}{checksummed[-chars:]}"


def render_full_address(address: Optional[str], translate: Translator = strings) -> str:
    """
    Returns the full checksummed address.

    Args:
        address (Optional[str]): Address to render.
        translate (Translator): Keyed string lookup used for the placeholder.

    Returns:
        str: The checksummed address, or the localized
        "transaction details not available" placeholder when absent.
    """
    if not address:
        return translate(TX_DETAILS_NOT_AVAILABLE)
    return to_checksum_address(address)


def render_short_address(address: Optional[str], chars: int = 4) -> Optional[str]:
    """
    Returns the short address format, e.g. ``0x5aAe...eAed``.

    Args:
        address (Optional[str]): Address to render. Falsy values are returned as-is.
        chars (int): Number of hex characters kept after the prefix and at the end.
    """
    if not address:
        return address
    checksummed = to_checksum_address(address)
    return _truncate(checksummed, chars + 2, chars)


def render_slightly_long_address(address: Optional[str], chars: int = 4) -> Optional[str]:
    """Like render_short_address, with a head window of ``chars + 20``."""
    if not address:
        return address
    checksummed = to_checksum_address(address)
    return _truncate(checksummed, chars + 20, chars)
