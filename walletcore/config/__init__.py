from .settings import Settings, settings, logger

__all__ = ["Settings", "settings", "logger"]
