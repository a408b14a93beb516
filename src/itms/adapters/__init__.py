"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.settings` - The user's ``~/.itms`` settings document
    * :mod:`.config` - Application configuration loading and option display
    * :mod:`.transporter` - iTMSTransporter command registry and runner
    * :mod:`.email` - Notification delivery via SMTP
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
