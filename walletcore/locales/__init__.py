from .i18n import CATALOGS, TX_DETAILS_NOT_AVAILABLE, Translator, strings

__all__ = ["CATALOGS", "TX_DETAILS_NOT_AVAILABLE", "Translator", "strings"]
