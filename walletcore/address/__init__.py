"""
Address handling: checksums, display strings, identity names and ENS syntax.
"""

from .checksum import (
    is_valid_address,
    is_valid_checksum_address,
    resembles_address,
    safe_to_checksum_address,
    to_checksum_address,
)
from .display import (
    render_full_address,
    render_short_address,
    render_slightly_long_address,
)
from .ens import is_valid_ens_name
from .identity import checksum_identities, render_account_name

__all__ = [
    "to_checksum_address",
    "safe_to_checksum_address",
    "resembles_address",
    "is_valid_address",
    "is_valid_checksum_address",
    "render_full_address",
    "render_short_address",
    "render_slightly_long_address",
    "render_account_name",
    "checksum_identities",
    "is_valid_ens_name",
]
