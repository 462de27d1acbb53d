"""Full dashboard page."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from tidepool.renderers import render_template
from tidepool.renderers.biodiversity import build_observations_html, build_stats_html
from tidepool.renderers.species import build_fish_species_html
from tidepool.renderers.weather import build_weather_html


def build_dashboard_page(
    data: dict[str, Any] | None,
    *,
    title: str = "Tidepool Marine Data Dashboard",
    error: str | None = None,
    updated_at: datetime | None = None,
) -> str:
    """
    Render every section of a dashboard payload into one HTML page.

    Each section renders independently, so a missing section shows its own
    placeholder without affecting the others. ``error`` is shown as an
    inline banner above the sections.
    """
    data = data or {}
    return render_template(
        "base.html.j2",
        title=title,
        error=error,
        updated_at=(updated_at or datetime.now()).strftime("%H:%M:%S"),
        fish_html=build_fish_species_html(data.get("fishSpecies")),
        stats_html=build_stats_html(data.get("stats")),
        observations_html=build_observations_html(data.get("biodiversity")),
        weather_html=build_weather_html(data.get("oceanWeather")),
    )
