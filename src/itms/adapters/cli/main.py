"""Run the ``itms`` command group and turn its outcome into an exit status.

Contents:
    * :func:`main` - Entry point shared by the console script and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from itms import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, preserved_traceback_state

if TYPE_CHECKING:
    from itms.composition import AppServices


def _status_from_system_exit(exc: SystemExit) -> int:
    """Commands stop with ``SystemExit(ExitCode...)``; None means success."""
    if exc.code is None:
        return 0
    if isinstance(exc.code, int):
        return int(exc.code)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _report_unexpected(exc: BaseException) -> int:
    """Print an unexpected exception via lib_cli_exit_tools and return its status."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # Invoked directly: lib_cli_exit_tools.run_cli has no way to pass ctx.obj.
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return _status_from_system_exit(exc)
    except BaseException as exc:  # noqa: BLE001
        return _report_unexpected(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``itms`` and return its exit status.

    Args:
        argv: Arguments after the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back afterwards.
        services_factory: Returns the AppServices for this run. The console
            script passes ``build_production``.

    Returns:
        0 on success, otherwise the status chosen by the failing command.

    Raises:
        ValueError: ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        with preserved_traceback_state(restore=restore_traceback):
            return _invoke(args, services_factory)
    finally:
        # Logging belongs to the main thread; other threads leave it running.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
