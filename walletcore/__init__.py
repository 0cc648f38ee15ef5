"""
walletcore - address handling core for wallet clients.
"""

from .address import (
    checksum_identities,
    is_valid_address,
    is_valid_checksum_address,
    is_valid_ens_name,
    render_account_name,
    render_full_address,
    render_short_address,
    render_slightly_long_address,
    resembles_address,
    safe_to_checksum_address,
    to_checksum_address,
)
from .keymanager import (
    PRIVATE_KEY_STRATEGY,
    KeyringService,
    import_account_from_private_key,
)

__version__ = "0.1.0"

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
    "PRIVATE_KEY_STRATEGY",
    "KeyringService",
    "import_account_from_private_key",
]
