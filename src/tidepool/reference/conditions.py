"""Descriptive scales for wave height and air temperature."""

from __future__ import annotations

# (upper bound exclusive, label), ascending
WAVE_SCALE: list[tuple[float, str]] = [
    (1, "Calm"),
    (2, "Slight"),
    (3, "Light"),
    (4, "Moderate"),
    (6, "Rough"),
    (10, "Very Rough"),
]
WAVE_MAX_LABEL = "Phenomenal"

TEMPERATURE_SCALE: list[tuple[float, str]] = [
    (5, "Very Cold"),
    (10, "Cold"),
    (15, "Cool"),
    (20, "Mild"),
    (25, "Warm"),
]
TEMPERATURE_MAX_LABEL = "Very Warm"

UNKNOWN = "Unknown"


def _classify(value: float | None, scale: list[tuple[float, str]], top: str) -> str:
    if value is None:
        return UNKNOWN
    for bound, label in scale:
        if value < bound:
            return label
    return top


def wave_condition(height_m: float | None) -> str:
    """Sea state for a significant wave height in meters."""
    return _classify(height_m, WAVE_SCALE, WAVE_MAX_LABEL)


def temperature_condition(temp_c: float | None) -> str:
    """Comfort label for an air temperature in Celsius."""
    return _classify(temp_c, TEMPERATURE_SCALE, TEMPERATURE_MAX_LABEL)
