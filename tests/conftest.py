"""Shared fixtures: canned upstream responses and session doubles."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
import requests


def make_response(payload: Any = None, status: int = 200, *, text: str | None = None) -> requests.Response:
    """A real ``requests.Response`` carrying ``payload`` as its JSON body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = "https://upstream.test/"
    body = text if text is not None else json.dumps(payload)
    resp._content = body.encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    return resp


def routing_session(routes: dict[str, Any]) -> Mock:
    """Session double answering by URL suffix; unknown URLs raise ConnectionError.

    Values are either a payload (served with 200) or a ready ``Response``.
    """

    def _get(url: str, params: dict[str, Any] | None = None, **_: Any) -> requests.Response:
        for suffix, answer in routes.items():
            if url.endswith(suffix):
                return answer if isinstance(answer, requests.Response) else make_response(answer)
        raise requests.ConnectionError(f"no route to {url}")

    session = Mock(spec=requests.Session)
    session.get.side_effect = _get
    return session


@pytest.fixture
def offline_session() -> Mock:
    """Every request fails as if the network were down."""
    session = Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("network unreachable")
    return session


@pytest.fixture
def session_returning() -> Callable[..., Mock]:
    """Factory: a session whose every GET returns the given payload/status."""

    def _factory(payload: Any = None, status: int = 200, *, text: str | None = None) -> Mock:
        session = Mock(spec=requests.Session)
        session.get.return_value = make_response(payload, status, text=text)
        return session

    return _factory


# =============================================================================
# Sample upstream payloads
# =============================================================================

SAMPLE_FISHBASE_RESPONSE: dict[str, Any] = {
    "count": 3,
    "returned": 3,
    "data": [
        {
            "SpecCode": 69,
            "Genus": "Gadus",
            "Species": "morhua",
            "Family": "Gadidae",
            "Marine": -1,
            "Freshwater": 0,
            "Brackish": -1,
        },
        {
            "SpecCode": 236,
            "Genus": "Salmo",
            "Species": "salar",
            "Family": "Salmonidae",
            "Marine": -1,
            "Freshwater": -1,
            "Brackish": -1,
        },
        {
            # Sparse row: genus, family and flags missing
            "SpecCode": 999,
            "Species": "incognita",
        },
    ],
}

SAMPLE_OCCURRENCE_RESPONSE: dict[str, Any] = {
    "total": 128000000,
    "results": [
        {
            "id": "a1b2",
            "scientificName": "Orcinus orca",
            "vernacularName": "Killer Whale",
            "decimalLatitude": 48.5,
            "decimalLongitude": -123.1,
            "eventDate": "2023-07-14T10:30:00Z",
            "datasetName": "Salish Sea Cetacean Sightings",
        },
        {
            "id": "c3d4",
            "scientificName": "Zostera marina",
            "eventDate": "2022-05-01/2022-05-31",
        },
    ],
}

SAMPLE_STATISTICS_RESPONSE: dict[str, Any] = {
    "species": 180123,
    "records": 140000000,
    "datasets": 4700,
}

SAMPLE_MARINE_RESPONSE: dict[str, Any] = {
    "latitude": 37.5,
    "longitude": -122.4,
    "hourly": {
        "time": ["2024-02-01T00:00", "2024-02-01T01:00", "2024-02-01T02:00"],
        "wave_height": [1.234, 1.3, 1.4],
        "wave_period": [8.456, 8.5, 8.6],
        "wind_wave_height": [0.5, 0.6, 0.7],
        "wind_wave_direction": [270, 275, 280],
        "sea_surface_temperature": [14.2, 15.04, 13.5],
    },
    "daily": {
        "time": [f"2024-02-0{d}" for d in range(1, 9)],
        "wave_height_max": [1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0],
    },
}

SAMPLE_FORECAST_RESPONSE: dict[str, Any] = {
    "current": {"time": "2024-02-01T12:00", "temperature_2m": 16.24, "relative_humidity_2m": 81},
    "daily": {
        "time": ["2024-02-01"],
        "temperature_2m_max": [18.1],
        "temperature_2m_min": [11.9],
        "precipitation_sum": [2.4],
    },
}
