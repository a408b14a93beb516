"""Application configuration loader (logging and transporter defaults).

This is the tool's own layered configuration, not the user's ``~/.itms``
settings document. It is read with lib_layered_config in precedence order:
defaults -> app -> host -> user -> dotenv -> env.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config

from itms import __init__conf__

DEFAULT_EXECUTABLE = "iTMSTransporter"


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled default configuration file.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Loaded once per start_dir and kept for the process lifetime.
@lru_cache(maxsize=4)
def get_config(*, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    The vendor, app, and slug identifiers determine platform-specific paths
    (XDG directories on Linux, Application Support on macOS, AppData on
    Windows).

    Args:
        start_dir: Directory that seeds .env discovery. Defaults to the current
            working directory when None.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("transporter.executable", default="iTMSTransporter")
        'iTMSTransporter'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def transporter_executable(config: Config) -> str:
    """Return the configured transporter executable.

    Example:
        >>> transporter_executable(Config({}, {}))
        'iTMSTransporter'
        >>> transporter_executable(Config({"transporter": {"executable": "/opt/itms/bin/iTMSTransporter"}}, {}))
        '/opt/itms/bin/iTMSTransporter'
    """
    value = config.get("transporter.executable", default=DEFAULT_EXECUTABLE)
    return str(value) if value else DEFAULT_EXECUTABLE


__all__ = [
    "DEFAULT_EXECUTABLE",
    "get_config",
    "get_default_config_path",
    "transporter_executable",
]
