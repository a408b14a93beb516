"""Load the user's ``~/.itms`` settings document.

The settings file is optional. A missing home directory, a missing file, or
an unreadable file all produce an empty document; only a file that exists
and cannot be parsed is an error.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from itms.domain.errors import ConfigParseError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".itms"

#: Environment variables consulted, in order, for the home directory.
HOME_VARIABLES: tuple[str, ...] = ("HOME", "USERPROFILE")


def home_directory(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the user's home directory from the environment, if any.

    Example:
        >>> home_directory({"HOME": "/home/jdoe"})
        PosixPath('/home/jdoe')
        >>> home_directory({}) is None
        True
    """
    env = os.environ if environ is None else environ
    for variable in HOME_VARIABLES:
        value = env.get(variable)
        if value:
            return Path(value)
    return None


def settings_path(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return ``<home>/.itms``, or None when no home directory is known."""
    home = home_directory(environ)
    return home / SETTINGS_FILENAME if home is not None else None


def parse_settings(content: str, source: str = "<string>") -> dict[str, Any]:
    """Parse settings text into a document.

    Args:
        content: YAML text.
        source: Name used in error messages.

    Returns:
        The document; an empty file yields an empty dict.

    Raises:
        ConfigParseError: Invalid YAML, or a top level that is not a mapping.

    Example:
        >>> parse_settings("username: jdoe\\nupload:\\n  rate: 100\\n")
        {'username': 'jdoe', 'upload': {'rate': 100}}
        >>> parse_settings("")
        {}
    """
    try:
        doc = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Error loading settings from {source}: {exc}") from exc

    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise ConfigParseError(f"Error loading settings from {source}: Expected mapping, got {type(doc).__name__}")
    return doc


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Load the settings document.

    Args:
        path: Explicit settings file. Defaults to :func:`settings_path`.

    Returns:
        The parsed document, or an empty dict when there is nothing to read.

    Raises:
        ConfigParseError: The file exists but is not UTF-8 or not a YAML mapping.
    """
    target = path if path is not None else settings_path()
    if target is None:
        logger.debug("No home directory found; using empty settings")
        return {}

    try:
        content = target.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Settings file not found", extra={"path": str(target)})
        return {}
    except UnicodeDecodeError as exc:
        detail = f"not valid UTF-8 ({exc.reason} at byte {exc.start})"
        raise ConfigParseError(f"Error loading settings from {target}: {detail}") from exc
    except OSError as exc:
        logger.warning("Settings file unreadable; using empty settings", extra={"path": str(target), "error": str(exc)})
        return {}

    document = parse_settings(content, source=str(target))
    logger.debug("Loaded settings", extra={"path": str(target), "keys": sorted(str(key) for key in document)})
    return document


__all__ = [
    "HOME_VARIABLES",
    "SETTINGS_FILENAME",
    "home_directory",
    "load_settings",
    "parse_settings",
    "settings_path",
]
