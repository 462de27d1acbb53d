"""Archive statistics tiles and the observation list."""

from __future__ import annotations

from typing import Any

from tidepool.renderers import render_template
from tidepool.schemas import WAVE_ICON

STAT_TILES = (
    ("totalSpecies", "\U0001f419", "Total Marine Species"),
    ("totalObservations", "\U0001f4cd", "Observations"),
    ("totalDatasets", "\U0001f4ca", "Datasets"),
)


def build_stats_html(stats: dict[str, Any] | None) -> str:
    """Three tiles: species, observations and datasets."""
    if not stats:
        return '<p class="text-muted">No statistics available</p>'
    tiles = [
        {"icon": icon, "label": label, "value": stats.get(key)} for key, icon, label in STAT_TILES
    ]
    return render_template("stats.html.j2", tiles=tiles)


def build_observations_html(biodiversity: dict[str, Any] | None) -> str:
    """Observation list: species, common name, date and position."""
    observations = (biodiversity or {}).get("observations") or []
    if not observations:
        return '<p class="text-muted">No biodiversity observations available</p>'

    items = []
    for obs in observations:
        lat, lon = obs.get("latitude"), obs.get("longitude")
        items.append(
            {
                "icon": obs.get("icon") or WAVE_ICON,
                "species": obs.get("species") or "Unknown",
                "common_name": obs.get("commonName"),
                "date": obs.get("date"),
                "position": (lat, lon) if lat is not None and lon is not None else None,
            }
        )
    return render_template("observations.html.j2", items=items)
