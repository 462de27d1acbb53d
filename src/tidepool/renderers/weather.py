"""Ocean weather cards, one per location."""

from __future__ import annotations

from typing import Any

from tidepool.renderers import render_template
from tidepool.schemas import WAVE_ICON


def build_weather_html(weather: list[dict[str, Any]] | None) -> str:
    """Wave height, wave period, wind waves and sea state per location."""
    if not weather:
        return '<p class="text-muted">No weather data available</p>'

    cards = []
    for entry in weather:
        current = entry.get("current") or {}
        location = entry.get("location") or {}
        cards.append(
            {
                "icon": entry.get("icon") or WAVE_ICON,
                "name": entry.get("name") or location.get("name") or "Unknown Location",
                "wave_height": current.get("waveHeight"),
                "wave_height_unit": current.get("waveHeightUnit") or "m",
                "wave_period": current.get("wavePeriod"),
                "wave_period_unit": current.get("wavePeriodUnit") or "s",
                "wind_wave_height": current.get("windWaveHeight"),
                "condition": current.get("condition"),
            }
        )
    return render_template("weather.html.j2", cards=cards)
