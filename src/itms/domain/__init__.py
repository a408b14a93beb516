"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.options` - Settings document merge (global, command, email layers)
    * :mod:`.overlay` - Command-line ``--key=value`` overlay
    * :mod:`.notification` - Notification template rendering
    * :mod:`.enums` - Domain enumerations (Outcome, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import Outcome, OutputFormat
from .errors import (
    ConfigParseError,
    DeliveryError,
    EmailError,
    ExecutionError,
    TransporterError,
    UnknownCommandError,
)
from .notification import NotificationMessage, build_message
from .options import EffectiveOptions, EmailSettings, resolve
from .overlay import overlay

__all__ = [
    # Options
    "EffectiveOptions",
    "EmailSettings",
    "resolve",
    "overlay",
    # Notification
    "NotificationMessage",
    "build_message",
    # Enums
    "Outcome",
    "OutputFormat",
    # Errors
    "ConfigParseError",
    "DeliveryError",
    "EmailError",
    "ExecutionError",
    "TransporterError",
    "UnknownCommandError",
]
