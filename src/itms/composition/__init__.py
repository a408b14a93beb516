"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.display import display_options
from ..adapters.config.loader import get_config
from ..adapters.email.transport import send_notification
from ..adapters.logging.setup import init_logging
from ..adapters.settings.store import load_settings
from ..adapters.transporter.commands import run_transporter

# Static conformance assertions checked by pyright.
if TYPE_CHECKING:
    from ..adapters.memory import NotificationSpy, TransporterStub
    from ..application.ports import (
        DisplayOptions,
        GetConfig,
        InitLogging,
        LoadSettings,
        RunTransporter,
        SendNotification,
    )

    _assert_get_config: GetConfig = get_config
    _assert_load_settings: LoadSettings = load_settings
    _assert_run_transporter: RunTransporter = run_transporter
    _assert_send_notification: SendNotification = send_notification
    _assert_display_options: DisplayOptions = display_options
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    load_settings: LoadSettings
    run_transporter: RunTransporter
    send_notification: SendNotification
    display_options: DisplayOptions
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        load_settings=load_settings,
        run_transporter=run_transporter,
        send_notification=send_notification,
        display_options=display_options,
        init_logging=init_logging,
    )


def build_testing(
    *,
    document: Mapping[str, Any] | str | None = None,
    transporter: TransporterStub | None = None,
    spy: NotificationSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        document: Settings document served instead of ``~/.itms``. A string
            is parsed as YAML when loaded.
        transporter: Stub recording transporter calls. A fresh one is
            created when None.
        spy: Spy capturing notifications. A fresh one is created when None.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        NotificationSpy,
        TransporterStub,
        display_options_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        settings_loader_in_memory,
    )

    stub = transporter if transporter is not None else TransporterStub()
    notification_spy = spy if spy is not None else NotificationSpy()

    return AppServices(
        get_config=get_config_in_memory,
        load_settings=settings_loader_in_memory(document),
        run_transporter=stub.run_transporter,
        send_notification=notification_spy.send_notification,
        display_options=display_options_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_options",
    "get_config",
    "init_logging",
    "load_settings",
    "run_transporter",
    "send_notification",
]
