# walletcore/config/settings.py

import logging
import re
import coloredlogs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ANSI color codes
YELLOW = "\033[93m"
RESET = "\033[0m"

# Whole 0x-prefixed 20-byte addresses, any casing
ADDRESS_REGEX = re.compile(r"(\b0x[a-fA-F0-9]{40}\b)")

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class HighlightFormatter(coloredlogs.ColoredFormatter):
    """Custom formatter to highlight account addresses in log lines."""

    def format(self, record):
        # Level colors come from the base class
        formatted_message = super().format(record)
        try:
            formatted_message = ADDRESS_REGEX.sub(
                lambda match: f"{YELLOW}{match.group(1)}{RESET}", formatted_message
            )
        except Exception as format_err:
            # Root logger, so a broken formatter does not loop on itself
            logging.getLogger().exception(f"Error in HighlightFormatter: {format_err}")
        return formatted_message


class Settings(BaseSettings):
    """
    Central configuration for walletcore, loaded from environment variables
    (prefixed with WALLETCORE_) or from a .env file.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WALLETCORE_",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOCALE: str = Field(
        default="en",
        description="Locale used to look up user-facing placeholder strings",
    )

    @field_validator("LOCALE", mode="before")
    def normalize_locale(cls, value):
        if value is None:
            return "en"
        value_str = str(value).strip()
        if not value_str:
            return "en"
        # en-US / en_US -> en
        return re.split(r"[-_]", value_str)[0].lower()


def resolve_log_level(level_name: str) -> int:
    """Map a level name onto a logging constant, falling back to INFO."""
    try:
        level_str = str(level_name).upper()
        if level_str not in VALID_LOG_LEVELS:
            level_str = "INFO"
        return getattr(logging, level_str)
    except Exception as log_e:
        print(f"Warning: Error processing LOG_LEVEL setting: {log_e}. Defaulting to INFO.")
        return logging.INFO


DEFAULT_LEVEL_STYLES = {
    "debug": {"color": "green"},
    "info": {"color": "cyan"},
    "warning": {"color": "yellow"},
    "error": {"color": "red"},
    "critical": {"bold": True, "color": "red"},
}
DEFAULT_FIELD_STYLES = {
    "asctime": {"color": "magenta"},
    "levelname": {"bold": True, "color": "blue"},
    "name": {"color": "white"},
}
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int) -> logging.Logger:
    """Install coloredlogs on the walletcore logger with the highlight formatter."""
    package_logger = logging.getLogger("walletcore")
    coloredlogs.install(
        level=level,
        logger=package_logger,
        fmt=DEFAULT_FMT,
        level_styles=DEFAULT_LEVEL_STYLES,
        field_styles=DEFAULT_FIELD_STYLES,
        reconfigure=True,
    )
    # coloredlogs builds its own formatter; swap in the highlighting one
    highlight_formatter = HighlightFormatter(
        fmt=DEFAULT_FMT,
        level_styles=DEFAULT_LEVEL_STYLES,
        field_styles=DEFAULT_FIELD_STYLES,
    )
    for handler in package_logger.handlers:
        handler.setFormatter(highlight_formatter)
    return package_logger


# --- Shared instance ---
try:
    settings = Settings()  # type: ignore
except Exception as e:
    print(f"CRITICAL: Error loading settings: {e}. Using default values where possible.")
    settings = Settings.model_construct()

LOG_LEVEL_CONFIG = resolve_log_level(settings.LOG_LEVEL)
setup_logging(LOG_LEVEL_CONFIG)

logger = logging.getLogger(__name__)
logger.debug(f"Settings loaded. Log level set to {logging.getLevelName(LOG_LEVEL_CONFIG)}.")
