"""Configuration adapter - the tool's own layered configuration.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Resolved option display in human/JSON formats
"""

from __future__ import annotations

from .display import display_options
from .loader import get_config, get_default_config_path, transporter_executable

__all__ = [
    "display_options",
    "get_config",
    "get_default_config_path",
    "transporter_executable",
]
