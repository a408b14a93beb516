"""Display the options resolved for a command.

Flushes pending log output first so log lines do not interleave with the
display.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click

from itms.domain.enums import Outcome, OutputFormat
from itms.domain.options import EffectiveOptions

_MASK = "********"
_SECRET_KEYS = frozenset({"password"})


def _masked(values: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``values`` with secret entries masked.

    Example:
        >>> _masked({"username": "jdoe", "password": "hunter2"})
        {'username': 'jdoe', 'password': '********'}
    """
    return {key: (_MASK if key in _SECRET_KEYS and value else value) for key, value in values.items()}


def options_as_dict(command: str, effective: EffectiveOptions) -> dict[str, Any]:
    """Return a JSON-ready view of resolved options and email settings."""
    return {
        "command": command,
        "options": _masked(effective.options),
        "email": {outcome.value: effective.email.for_outcome(outcome) for outcome in Outcome},
    }


def _format_value(value: Any) -> str:
    """Render a value in TOML-like notation.

    Example:
        >>> _format_value(True), _format_value(25), _format_value("x"), _format_value(None)
        ('true', '25', '"x"', 'null')
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    return orjson.dumps(str(value)).decode()


def render_human(command: str, effective: EffectiveOptions) -> str:
    """Render resolved options as TOML-like text."""
    lines = [f"[{command}]"]
    lines.extend(f"{key} = {_format_value(value)}" for key, value in _masked(effective.options).items())
    for outcome in Outcome:
        config = effective.email.for_outcome(outcome)
        lines.append("")
        lines.append(f"[{command}.email.{outcome.value}]")
        if config is None:
            lines.append("# not configured")
            continue
        lines.extend(f"{key} = {_format_value(value)}" for key, value in config.items())
    return "\n".join(lines)


def display_options(
    command: str,
    effective: EffectiveOptions,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
) -> None:
    """Write the resolved options for ``command`` to stdout.

    Args:
        command: Command whose options were resolved.
        effective: Resolved options and email settings.
        output_format: OutputFormat.HUMAN for TOML-like text, OutputFormat.JSON
            for JSON.

    Side Effects:
        Flushes pending log messages before display.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    if output_format is OutputFormat.JSON:
        click.echo(orjson.dumps(options_as_dict(command, effective), option=orjson.OPT_INDENT_2).decode())
    else:
        click.echo(render_human(command, effective))


__all__ = [
    "display_options",
    "options_as_dict",
    "render_human",
]
