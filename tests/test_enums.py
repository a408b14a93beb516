"""Domain enum values."""

from __future__ import annotations

import pytest

from itms.domain.enums import Outcome, OutputFormat


@pytest.mark.os_agnostic
def test_outcome_values_match_settings_keys() -> None:
    """Outcome names are the keys used under ``email``."""
    assert [outcome.value for outcome in Outcome] == ["success", "failure"]
    assert Outcome("failure") is Outcome.FAILURE


@pytest.mark.os_agnostic
def test_output_format_values() -> None:
    """Both display formats are available."""
    assert {fmt.value for fmt in OutputFormat} == {"human", "json"}
