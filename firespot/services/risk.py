from __future__ import annotations

from enum import Enum


HIGH_THRESHOLD = 60.0
MEDIUM_THRESHOLD = 40.0
TEMPERATURE_WEIGHT = 1.5
HUMIDITY_WEIGHT = 0.5


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}

_MARKER_CLASSES = {
    RiskLevel.HIGH: "bg-red-500",
    RiskLevel.MEDIUM: "bg-yellow-500",
    RiskLevel.LOW: "bg-green-500",
}

_ALERT_CLASSES = {
    RiskLevel.HIGH: "bg-red-100",
    RiskLevel.MEDIUM: "bg-yellow-100",
    RiskLevel.LOW: "bg-green-100",
}

_GUIDANCE = {
    RiskLevel.HIGH: "Please be extremely cautious and avoid any activities that could start a fire.",
    RiskLevel.MEDIUM: "Exercise caution with any fire-related activities.",
    RiskLevel.LOW: "Conditions are favorable, but always practice fire safety.",
}


def risk_score(temperature: float, humidity: float) -> float:
    return TEMPERATURE_WEIGHT * temperature - HUMIDITY_WEIGHT * humidity


def classify(temperature: float, humidity: float) -> RiskLevel:
    """Map a temperature (°C) and relative humidity (%) to a risk level.

    Every real input classifies; nothing is validated. A NaN score fails both
    comparisons and lands in ``LOW``.
    """
    score = risk_score(temperature, humidity)
    if score > HIGH_THRESHOLD:
        return RiskLevel.HIGH
    if score > MEDIUM_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def parse_risk_level(value: str) -> RiskLevel:
    normalized = value.strip().lower()
    for level in RiskLevel:
        if level.value.lower() == normalized:
            return level
    raise ValueError(f"Unknown risk level: {value!r}")


def marker_color_class(level: RiskLevel) -> str:
    return _MARKER_CLASSES[level]


def alert_color_class(level: RiskLevel) -> str:
    return _ALERT_CLASSES[level]


def advisory(level: RiskLevel) -> str:
    return (
        f"Based on current weather conditions, the fire risk is {level.value.lower()}. "
        f"{_GUIDANCE[level]}"
    )
