"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the corresponding adapter function, so
module-level functions satisfy them structurally (PEP 544).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.notification import NotificationMessage
from ..domain.options import EffectiveOptions

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load the application's layered configuration."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class LoadSettings(Protocol):
    """Load the user's settings document."""

    def __call__(self, path: Path | None = ...) -> dict[str, Any]: ...


class RunTransporter(Protocol):
    """Run one transporter command and return the text to display."""

    def __call__(
        self,
        command: str,
        options: Mapping[str, Any],
        args: Sequence[str],
        *,
        executable: str = ...,
    ) -> str: ...


class SendNotification(Protocol):
    """Deliver a rendered notification."""

    def __call__(self, message: NotificationMessage) -> bool: ...


class DisplayOptions(Protocol):
    """Display the options resolved for a command."""

    def __call__(
        self,
        command: str,
        effective: EffectiveOptions,
        *,
        output_format: OutputFormat = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayOptions",
    "GetConfig",
    "InitLogging",
    "LoadSettings",
    "RunTransporter",
    "SendNotification",
]
