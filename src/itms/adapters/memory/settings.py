"""In-memory settings and configuration adapters for testing."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ...domain.options import EffectiveOptions
from ..settings.store import parse_settings


def settings_loader_in_memory(
    document: Mapping[str, Any] | str | None = None,
) -> Callable[..., dict[str, Any]]:
    """Return a LoadSettings implementation serving a fixed document.

    A string is parsed like a settings file, so malformed text raises
    ConfigParseError when the loader is called.

    Example:
        >>> load = settings_loader_in_memory({"upload": {"rate": 10}})
        >>> load()
        {'upload': {'rate': 10}}
    """

    def _load(path: Path | None = None) -> dict[str, Any]:
        if document is None:
            return {}
        if isinstance(document, str):
            return parse_settings(document, source="<memory>")
        return dict(document)

    return _load


def load_settings_in_memory(path: Path | None = None) -> dict[str, Any]:
    """Return an empty settings document."""
    return {}


def get_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_options_in_memory(
    command: str,
    effective: EffectiveOptions,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
) -> None:
    """No-op display -- satisfies the DisplayOptions protocol."""


__all__ = [
    "display_options_in_memory",
    "get_config_in_memory",
    "load_settings_in_memory",
    "settings_loader_in_memory",
]
