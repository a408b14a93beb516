"""Public package surface: settings resolution, overlay, and configuration.

Routes imports through the architectural layers:
- Domain exports: settings merge and command-line overlay
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config, load_settings

# Domain exports
from .domain.options import EffectiveOptions, EmailSettings, resolve
from .domain.overlay import overlay

__all__ = [
    "EffectiveOptions",
    "EmailSettings",
    "get_config",
    "load_settings",
    "overlay",
    "print_info",
    "resolve",
]
