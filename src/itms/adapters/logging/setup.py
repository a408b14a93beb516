"""lib_log_rich runtime setup shared by every entry point.

Reads the ``[lib_log_rich]`` section of the application configuration and
initialises the runtime once per process. Standard ``logging`` records are
bridged into lib_log_rich so modules can keep using ``logging.getLogger``.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from itms import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section; unknown keys pass through to RuntimeConfig.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="itms-ci").service
        'itms-ci'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime unless it is already running.

    Loads ``.env`` first so ``LOG_*`` variables can override the configured
    levels.

    Args:
        config: Application configuration holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
