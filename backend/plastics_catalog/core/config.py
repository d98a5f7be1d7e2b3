"""
Configuration settings for the Plastics Catalog

Thin re-export so modules can import settings from one stable place.
The actual settings implementation is in settings.py using pydantic-settings.

Usage:
    from plastics_catalog.core.config import settings
    # or
    from plastics_catalog.core.settings import get_settings
    settings = get_settings()
"""
from plastics_catalog.core.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
