"""Shared pytest fixtures for CLI and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from itms.adapters.memory import NotificationSpy, TransporterStub
    from itms.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.x provides separate result.stdout and result.stderr attributes.
    Use result.stdout for clean output (e.g., JSON parsing) to avoid
    log messages on stderr contaminating the output.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Use this when invoking CLI commands that don't need custom injection.
    """
    from itms.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, so a monkeypatched ``get_config`` does
    not break teardown.
    """
    from itms.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def settings_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str | None], Path]:
    """Point HOME at a temporary directory and optionally write ``.itms``.

    Returns:
        Callable taking the settings text (None writes nothing) and
        returning the settings file path.

    Example:
        def test_loads(settings_home: Callable[[str | None], Path]) -> None:
            path = settings_home("username: jdoe\\n")
            assert load_settings() == {"username": "jdoe"}
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("USERPROFILE", raising=False)

    def _write(content: str | None) -> Path:
        target = tmp_path / ".itms"
        if content is not None:
            target.write_text(content, encoding="utf-8")
        return target

    return _write


@dataclass
class ItmsCliContext:
    """Container for transporter CLI test setup.

    Attributes:
        factory: Callable returning wired AppServices for CLI invocation.
        transporter: Stub recording transporter calls.
        spy: Spy capturing notifications.
    """

    factory: Callable[[], Any]
    transporter: TransporterStub
    spy: NotificationSpy


@pytest.fixture
def itms_cli_context(
    clear_config_cache: None,
) -> Callable[..., ItmsCliContext]:
    """Create a CLI test context serving an in-memory settings document.

    The settings store, transporter, and mail transport are replaced with
    in-memory adapters; logging uses the production setup so commands run
    with an initialised lib_log_rich runtime.

    Returns:
        Function taking ``document`` (mapping or YAML text) plus optional
        ``output``, ``raise_exception``, ``config``, and ``display`` keyword
        arguments and returning an ItmsCliContext.

    Example:
        def test_upload(cli_runner, itms_cli_context) -> None:
            ctx = itms_cli_context({"upload": {"package": "a.itmsp"}}, output="ok")
            result = cli_runner.invoke(cli, ["upload"], obj=ctx.factory)
            assert ctx.transporter.calls[0].options == {"package": "a.itmsp"}
    """
    from itms.adapters.config.display import display_options
    from itms.adapters.logging import init_logging
    from itms.adapters.memory import NotificationSpy as NotificationSpyImpl
    from itms.adapters.memory import TransporterStub as TransporterStubImpl
    from itms.composition import build_testing

    def _create(
        document: Mapping[str, Any] | str | None = None,
        *,
        output: str = "",
        raise_exception: Exception | None = None,
        config: Mapping[str, Any] | None = None,
        display: bool = False,
    ) -> ItmsCliContext:
        stub = TransporterStubImpl(output=output, raise_exception=raise_exception)
        spy = NotificationSpyImpl()
        app_config = Config(dict(config or {}), {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return app_config

        services = replace(
            build_testing(document=document, transporter=stub, spy=spy),
            get_config=_fake_get_config,
            init_logging=init_logging,
        )
        if display:
            services = replace(services, display_options=display_options)
        return ItmsCliContext(factory=lambda: services, transporter=stub, spy=spy)

    return _create
