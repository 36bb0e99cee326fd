"""Tests for ParseOutcome and ParseStatus."""

from __future__ import annotations

import pytest

from parsing_strings.outcome import ParseOutcome, ParseStatus


def test_success_outcome_exposes_value():
    outcome = ParseOutcome.success(1.5, "1.5")
    assert outcome.ok
    assert outcome.status is ParseStatus.OK
    assert outcome.value_or(0.0) == 1.5


def test_failure_outcome_uses_fallback():
    outcome = ParseOutcome.failure(ParseStatus.OVERFLOW, "1e400")
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.value_or(-1.0) == -1.0


def test_failure_rejects_ok_status():
    with pytest.raises(ValueError, match="non-OK"):
        ParseOutcome.failure(ParseStatus.OK, "1")


def test_outcome_is_immutable():
    outcome = ParseOutcome.success(1, "1")
    with pytest.raises(AttributeError):
        outcome.value = 2  # type: ignore[misc]
