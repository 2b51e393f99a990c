"""Configuration for i18n-parity."""

from .loader import load_config, load_config_file
from .settings import Settings

__all__ = ["Settings", "load_config", "load_config_file"]
