from __future__ import annotations

import math

import pytest

from firespot.services.risk import (
    RiskLevel,
    advisory,
    alert_color_class,
    classify,
    marker_color_class,
    parse_risk_level,
    risk_score,
)


@pytest.mark.parametrize(
    ("temperature", "humidity", "expected"),
    [
        (40.0, 10.0, RiskLevel.MEDIUM),
        (50.0, 0.0, RiskLevel.HIGH),
        (20.0, 20.0, RiskLevel.LOW),
        (25.0, 60.0, RiskLevel.LOW),
    ],
)
def test_classify_examples(temperature: float, humidity: float, expected: RiskLevel) -> None:
    assert classify(temperature, humidity) is expected


def test_classify_boundaries_fall_to_lower_class() -> None:
    assert risk_score(40.0, 0.0) == 60.0
    assert classify(40.0, 0.0) is RiskLevel.MEDIUM
    assert risk_score(30.0, 10.0) == 40.0
    assert classify(30.0, 10.0) is RiskLevel.LOW
    assert classify(40.0, -0.5) is RiskLevel.HIGH


def test_classify_accepts_out_of_range_inputs() -> None:
    assert classify(-50.0, 150.0) is RiskLevel.LOW
    assert classify(1000.0, -20.0) is RiskLevel.HIGH


def test_classify_nan_falls_to_low() -> None:
    assert classify(math.nan, 10.0) is RiskLevel.LOW
    assert classify(40.0, math.nan) is RiskLevel.LOW


def test_classify_is_monotonic_in_score() -> None:
    temperatures = [t / 2 for t in range(-20, 120)]
    levels = [classify(t, 30.0) for t in temperatures]
    assert levels == sorted(levels)
    assert classify(40.0, 10.0) == classify(40.0, 10.0)


def test_risk_levels_are_ordered() -> None:
    assert RiskLevel.LOW < RiskLevel.MEDIUM < RiskLevel.HIGH
    assert RiskLevel.HIGH >= RiskLevel.HIGH
    assert max([RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.LOW]) is RiskLevel.HIGH


def test_presentation_classes_and_advisory() -> None:
    assert marker_color_class(RiskLevel.HIGH) == "bg-red-500"
    assert marker_color_class(RiskLevel.LOW) == "bg-green-500"
    assert alert_color_class(RiskLevel.MEDIUM) == "bg-yellow-100"
    assert alert_color_class(RiskLevel.LOW) == "bg-green-100"
    assert advisory(RiskLevel.LOW).startswith("Based on current weather conditions, the fire risk is low.")
    assert "extremely cautious" in advisory(RiskLevel.HIGH)


def test_parse_risk_level_is_case_insensitive() -> None:
    assert parse_risk_level(" high ") is RiskLevel.HIGH
    assert parse_risk_level("Medium") is RiskLevel.MEDIUM
    with pytest.raises(ValueError):
        parse_risk_level("extreme")
