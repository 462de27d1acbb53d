"""Tests for static reference data: regions, locations and condition scales."""

from __future__ import annotations

import pytest

from tidepool.reference import (
    DASHBOARD_LOCATIONS,
    BoundingBox,
    location_name,
    temperature_condition,
    wave_condition,
)


class TestLocationName:
    @pytest.mark.parametrize(
        ("lat", "lon", "expected"),
        [
            (37.5, -122.4, "North Pacific"),
            (35.0, 140.0, "North Pacific"),
            (-16.2, 145.8, "South Pacific"),
            (40.7, -74.0, "Atlantic Ocean"),
            (0.0, 60.0, "Indian Ocean"),
            (75.0, 10.0, "Arctic Ocean"),
        ],
    )
    def test_named_regions(self, lat: float, lon: float, expected: str) -> None:
        assert location_name(lat, lon) == expected

    def test_unmatched_point_uses_coordinates(self) -> None:
        assert location_name(-70.0, 0.0) == "-70.0°, 0.0°"


class TestBoundingBox:
    def test_contains(self) -> None:
        box = BoundingBox(30, 40, -125, -115)
        assert box.contains(35, -120)
        assert not box.contains(45, -120)
        assert not box.contains(35, -110)

    def test_antimeridian_box(self) -> None:
        box = BoundingBox(30, 60, 120, -100)
        assert box.contains(40, 170)
        assert box.contains(40, -150)
        assert not box.contains(40, 0)

    def test_wkt_polygon_is_closed(self) -> None:
        wkt = BoundingBox(1, 2, 3, 4).as_wkt_polygon()
        assert wkt == "POLYGON((3 1,4 1,4 2,3 2,3 1))"


class TestDashboardLocations:
    def test_three_named_locations(self) -> None:
        assert [loc.name for loc in DASHBOARD_LOCATIONS] == [
            "San Francisco Bay",
            "Great Barrier Reef",
            "Atlantic Mid-Atlantic Ridge",
        ]


class TestConditions:
    @pytest.mark.parametrize(
        ("height", "expected"),
        [
            (0.4, "Calm"),
            (1.0, "Slight"),
            (2.5, "Light"),
            (3.9, "Moderate"),
            (5.0, "Rough"),
            (9.9, "Very Rough"),
            (14.0, "Phenomenal"),
            (None, "Unknown"),
        ],
    )
    def test_wave_condition(self, height: float | None, expected: str) -> None:
        assert wave_condition(height) == expected

    @pytest.mark.parametrize(
        ("temp", "expected"),
        [(-2, "Very Cold"), (7, "Cold"), (13.5, "Cool"), (18, "Mild"), (24.9, "Warm"), (30, "Very Warm")],
    )
    def test_temperature_condition(self, temp: float, expected: str) -> None:
        assert temperature_condition(temp) == expected
