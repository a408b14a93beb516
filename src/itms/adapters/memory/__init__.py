"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports: no home directory,
no subprocess, no SMTP, no logging framework.

Contents:
    * :mod:`.settings` - Settings document and configuration adapters
    * :mod:`.transporter` - Transporter stub recording invocations
    * :mod:`.email` - Notification spy
    * :mod:`.logging` - No-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .email import NotificationSpy
from .logging import init_logging_in_memory
from .settings import (
    display_options_in_memory,
    get_config_in_memory,
    load_settings_in_memory,
    settings_loader_in_memory,
)
from .transporter import TransporterCall, TransporterStub

# Static conformance assertions
if TYPE_CHECKING:
    from itms.application.ports import DisplayOptions, GetConfig, InitLogging, LoadSettings

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_load_settings: LoadSettings = load_settings_in_memory
    _assert_display_options: DisplayOptions = display_options_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "NotificationSpy",
    "TransporterCall",
    "TransporterStub",
    "display_options_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_settings_in_memory",
    "settings_loader_in_memory",
]
