"""Configuration module for E-Pay Pro."""

from epay_pro.config.logging import configure_logging
from epay_pro.config.settings import FlatSettings, get_settings

__all__ = ["FlatSettings", "get_settings", "configure_logging"]
