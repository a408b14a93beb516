"""Tests for the logging configuration model.

LoggingConfigModel validation is tested here. The init_logging function
is tested via CLI integration tests in test_cli_core.py.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from itms.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    assert extra == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_service_defaults_to_package_name() -> None:
    """Without a configured service the package name is used."""
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == "itms"
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_reads_the_lib_log_rich_section() -> None:
    """Configured values reach the runtime config."""
    config = Config({"lib_log_rich": {"service": "itms-ci", "environment": "dev"}}, {})

    runtime_config = _build_runtime_config(config)

    assert runtime_config.service == "itms-ci"
    assert runtime_config.environment == "dev"
