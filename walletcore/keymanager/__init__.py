from .import_bridge import (
    PRIVATE_KEY_STRATEGY,
    KeyringService,
    import_account_from_private_key,
    normalize_private_key,
)

__all__ = [
    "PRIVATE_KEY_STRATEGY",
    "KeyringService",
    "import_account_from_private_key",
    "normalize_private_key",
]
