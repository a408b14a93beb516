"""Static package metadata surfaced to the CLI and configuration loader.

Values here are kept in sync with ``pyproject.toml`` by the release tooling.

Contents:
    * Distribution identifiers (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config for path discovery.
    * :func:`print_info` - Render the metadata block for ``itms info``.
"""

from __future__ import annotations

name = "itms"
title = "Run iTMSTransporter commands with per-command defaults and email notifications"
version = "1.2.0"
homepage = "https://github.com/itms-tools/itms"
author = "itms contributors"
author_email = "itms@users.noreply.github.com"
shell_command = "itms"

#: Vendor, application, and slug identifiers for lib_layered_config.
LAYEREDCONF_VENDOR = "itms-tools"
LAYEREDCONF_APP = "itms"
LAYEREDCONF_SLUG = "itms"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for itms:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
