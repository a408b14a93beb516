"""Settings adapter - the user's ``~/.itms`` YAML document.

Contents:
    * :func:`.store.load_settings` - Load the settings document (PyYAML)
    * :func:`.store.settings_path` - Resolve ``<home>/.itms``
"""

from __future__ import annotations

from .store import load_settings, parse_settings, settings_path

__all__ = [
    "load_settings",
    "parse_settings",
    "settings_path",
]
