"""Named locations and ocean regions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NamedLocation:
    """A fixed point shown on the dashboard."""

    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class BoundingBox:
    """Lat/lon box. ``min_lon > max_lon`` means the box crosses the antimeridian."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, lat: float, lon: float) -> bool:
        if not self.min_lat <= lat <= self.max_lat:
            return False
        if self.min_lon <= self.max_lon:
            return self.min_lon <= lon <= self.max_lon
        return lon >= self.min_lon or lon <= self.max_lon

    def as_wkt_polygon(self) -> str:
        """Closed WKT ring, counter-clockwise from the SW corner."""
        corners = [
            (self.min_lon, self.min_lat),
            (self.max_lon, self.min_lat),
            (self.max_lon, self.max_lat),
            (self.min_lon, self.max_lat),
            (self.min_lon, self.min_lat),
        ]
        return "POLYGON((" + ",".join(f"{lon} {lat}" for lon, lat in corners) + "))"


DASHBOARD_LOCATIONS: tuple[NamedLocation, ...] = (
    NamedLocation("San Francisco Bay", 37.5, -122.4),
    NamedLocation("Great Barrier Reef", -16.2, 145.8),
    NamedLocation("Atlantic Mid-Atlantic Ridge", 42.0, -30.0),
)

# Checked in order; the first match wins
OCEAN_REGIONS: tuple[tuple[str, BoundingBox], ...] = (
    ("North Pacific", BoundingBox(30, 60, 120, -100)),
    ("South Pacific", BoundingBox(-60, -10, 100, 180)),
    ("Atlantic Ocean", BoundingBox(-60, 60, -100, 0)),
    ("Indian Ocean", BoundingBox(-60, 30, 20, 120)),
    ("Arctic Ocean", BoundingBox(60, 90, -180, 180)),
)


def location_name(lat: float, lon: float) -> str:
    """Ocean region containing the point, or the formatted coordinates."""
    for name, box in OCEAN_REGIONS:
        if box.contains(lat, lon):
            return name
    return f"{lat:.1f}°, {lon:.1f}°"
