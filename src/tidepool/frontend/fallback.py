"""Demo content shown when the dashboard API cannot be reached."""

from __future__ import annotations

import copy
from typing import Any

LOCAL_DASHBOARD: dict[str, Any] = {
    "fishSpecies": [
        {
            "name": "Blue Whale",
            "genus": "Balaenoptera",
            "family": "Balaenopteridae",
            "icon": "\U0001f40b",
            "marine": 1,
        },
        {
            "name": "Clownfish",
            "genus": "Amphiprion",
            "family": "Pomacentridae",
            "icon": "\U0001f41f",
            "marine": 1,
        },
        {
            "name": "Sea Turtle",
            "genus": "Chelonia",
            "family": "Cheloniidae",
            "icon": "\U0001f422",
            "marine": 1,
        },
    ],
    "stats": {
        "totalSpecies": 234567,
        "totalObservations": 123456789,
        "totalDatasets": 3251,
    },
    "biodiversity": {"observations": [], "total": 0},
    "oceanWeather": [
        {
            "name": "San Francisco Bay",
            "icon": "\U0001f30a",
            "current": {
                "waveHeight": 1.5,
                "waveHeightUnit": "m",
                "wavePeriod": 8.2,
                "wavePeriodUnit": "s",
                "windWaveHeight": 0.9,
                "condition": "Light",
            },
        },
        {
            "name": "Great Barrier Reef",
            "icon": "\U0001f420",
            "current": {
                "waveHeight": 1.2,
                "waveHeightUnit": "m",
                "wavePeriod": 7.5,
                "wavePeriodUnit": "s",
                "windWaveHeight": 0.6,
                "condition": "Calm",
            },
        },
    ],
}


def local_dashboard_data() -> dict[str, Any]:
    """A fresh copy of the demo dataset."""
    return copy.deepcopy(LOCAL_DASHBOARD)
