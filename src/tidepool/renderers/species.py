"""Fish species cards."""

from __future__ import annotations

from typing import Any

from tidepool.renderers import render_template
from tidepool.schemas import FISH_ICON

HABITATS = (("marine", "Marine"), ("freshwater", "Freshwater"), ("brackish", "Brackish"))


def build_fish_species_html(species: list[dict[str, Any]] | None) -> str:
    """One card per species with its genus, family and habitat tags."""
    if not species:
        return '<p class="text-muted">No fish species data available</p>'

    cards = [
        {
            "icon": fish.get("icon") or FISH_ICON,
            "name": fish.get("name") or "Unknown",
            "genus": fish.get("genus") or "",
            "family": fish.get("family") or "",
            "habitats": [label for key, label in HABITATS if fish.get(key)],
        }
        for fish in species
    ]
    return render_template("fish_species.html.j2", cards=cards)
