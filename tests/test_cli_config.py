"""``itms config`` shows what a command would run with."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner

from itms.adapters.cli import cli
from itms.adapters.cli.exit_codes import ExitCode
from itms.adapters.config.display import options_as_dict, render_human
from itms.domain.options import resolve

DOCUMENT: dict[str, Any] = {
    "username": "jdoe",
    "password": "hunter2",
    "email": {"host": "mail.x"},
    "upload": {"rate": 100, "delete": True, "email": {"success": {"to": "ops@x"}}},
}


@pytest.mark.os_agnostic
def test_config_shows_resolved_options_in_human_format(
    cli_runner: CliRunner,
    itms_cli_context: Callable[..., Any],
    strip_ansi: Callable[[str], str],
) -> None:
    """Merged options and email settings are listed per section."""
    ctx = itms_cli_context(DOCUMENT, display=True)

    result = cli_runner.invoke(cli, ["config", "upload"], obj=ctx.factory)

    plain = strip_ansi(result.stdout)
    assert result.exit_code == 0
    assert "[upload]" in plain
    assert 'username = "jdoe"' in plain
    assert "rate = 100" in plain
    assert "delete = true" in plain
    assert "[upload.email.success]" in plain
    assert 'to = "ops@x"' in plain
    assert 'host = "mail.x"' in plain
    assert "[upload.email.failure]\n# not configured" in plain
    assert ctx.transporter.calls == []


@pytest.mark.os_agnostic
def test_config_masks_the_password(
    cli_runner: CliRunner,
    itms_cli_context: Callable[..., Any],
) -> None:
    """The account password is never printed."""
    ctx = itms_cli_context(DOCUMENT, display=True)

    result = cli_runner.invoke(cli, ["config", "upload"], obj=ctx.factory)

    assert "hunter2" not in result.output
    assert 'password = "********"' in result.stdout


@pytest.mark.os_agnostic
def test_config_json_format_is_parseable(
    cli_runner: CliRunner,
    itms_cli_context: Callable[..., Any],
) -> None:
    """JSON output carries options and both email outcomes."""
    ctx = itms_cli_context(DOCUMENT, display=True)

    result = cli_runner.invoke(cli, ["config", "upload", "--format", "json"], obj=ctx.factory)

    assert result.exit_code == 0
    payload = orjson.loads(result.stdout)
    assert payload["command"] == "upload"
    assert payload["options"]["rate"] == 100
    assert payload["options"]["password"] == "********"
    assert payload["email"]["success"] == {"to": "ops@x", "host": "mail.x"}
    assert payload["email"]["failure"] is None


@pytest.mark.os_agnostic
def test_config_rejects_unknown_command(
    cli_runner: CliRunner,
    itms_cli_context: Callable[..., Any],
) -> None:
    """Only registered commands can be inspected."""
    ctx = itms_cli_context(DOCUMENT, display=True)

    result = cli_runner.invoke(cli, ["config", "frobnicate"], obj=ctx.factory)

    assert result.exit_code == 2
    assert "frobnicate" in result.output


@pytest.mark.os_agnostic
def test_config_reports_malformed_settings(
    cli_runner: CliRunner,
    itms_cli_context: Callable[..., Any],
) -> None:
    """A broken settings file is a configuration error here too."""
    ctx = itms_cli_context("upload: [unclosed\n", display=True)

    result = cli_runner.invoke(cli, ["config", "upload"], obj=ctx.factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR


@pytest.mark.os_agnostic
def test_render_human_marks_unset_values_as_null() -> None:
    """None values are shown explicitly."""
    text = render_human("status", resolve({"vendor_id": None}, "status"))

    assert "vendor_id = null" in text


@pytest.mark.os_agnostic
def test_options_as_dict_leaves_empty_password_unmasked() -> None:
    """Only a set password is masked."""
    data = options_as_dict("upload", resolve({"password": ""}, "upload"))

    assert data["options"]["password"] == ""
