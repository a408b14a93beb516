"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.notifier` - Outcome notification use case
"""

from __future__ import annotations

from .notifier import build_params, current_user, notify, notify_outcome
from .ports import (
    DisplayOptions,
    GetConfig,
    InitLogging,
    LoadSettings,
    RunTransporter,
    SendNotification,
)

__all__ = [
    "DisplayOptions",
    "GetConfig",
    "InitLogging",
    "LoadSettings",
    "RunTransporter",
    "SendNotification",
    "build_params",
    "current_user",
    "notify",
    "notify_outcome",
]
