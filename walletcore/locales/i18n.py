"""
Minimal keyed string lookup for the few user-facing strings the core emits.

Callers that own a full translation catalog pass their own lookup function
wherever a ``translate`` argument is accepted; ``strings`` is the default.
"""

import logging
from typing import Callable, Dict, Optional

from walletcore.config.settings import settings

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]

TX_DETAILS_NOT_AVAILABLE = "transactions.tx_details_not_available"

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        TX_DETAILS_NOT_AVAILABLE: "Transaction details not available",
    },
    "es": {
        TX_DETAILS_NOT_AVAILABLE: "Detalles de la transacción no disponibles",
    },
    "vi": {
        TX_DETAILS_NOT_AVAILABLE: "Không có chi tiết giao dịch",
    },
}

DEFAULT_LOCALE = "en"


def strings(key: str, locale: Optional[str] = None) -> str:
    """
    Look up a message by key.

    Falls back to the default locale, then to the key itself when no catalog
    has an entry.
    """
    active_locale = locale or settings.LOCALE
    catalog = CATALOGS.get(active_locale)
    if catalog is None:
        logger.debug(f"No catalog for locale '{active_locale}', using '{DEFAULT_LOCALE}'")
        catalog = CATALOGS[DEFAULT_LOCALE]
    if key in catalog:
        return catalog[key]
    if key in CATALOGS[DEFAULT_LOCALE]:
        return CATALOGS[DEFAULT_LOCALE][key]
    logger.warning(f"Missing translation for key '{key}'")
    return key
