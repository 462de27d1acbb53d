"""Static marine and surface weather served when Open-Meteo is unreachable.

Payloads are parameterized by the requested coordinates so the location
block still reflects the request.
"""

from __future__ import annotations

from tidepool.reference.geography import DASHBOARD_LOCATIONS, NamedLocation, location_name
from tidepool.schemas import (
    CurrentTemperature,
    DailyTemperature,
    DailyWeather,
    ForecastDay,
    GeoLocation,
    LocationWeather,
    TemperatureSnapshot,
    WaveConditions,
    WeatherSnapshot,
)

MARINE_FALLBACK_SOURCE = "Open-Meteo Marine API (Fallback)"
WEATHER_FALLBACK_SOURCE = "Open-Meteo Weather API (Fallback)"

DEFAULT_WAVES: dict[str, object] = {
    "wave_height": 1.5,
    "wave_period": 8.2,
    "wind_wave_height": 0.9,
    "condition": "Light",
}
DEFAULT_DAILY: dict[str, float] = {"max_temp": 15.2, "min_temp": 12.8}
DEFAULT_FORECAST: tuple[float, ...] = (1.5, 1.8, 2.1, 1.9, 1.6, 1.4, 1.7)

# Per-location current conditions for the dashboard locations
DEFAULT_LOCATION_WAVES: dict[str, dict[str, object]] = {
    "San Francisco Bay": DEFAULT_WAVES,
    "Great Barrier Reef": {
        "wave_height": 1.2,
        "wave_period": 7.5,
        "wind_wave_height": 0.6,
        "condition": "Calm",
    },
    "Atlantic Mid-Atlantic Ridge": {
        "wave_height": 2.3,
        "wave_period": 9.8,
        "wind_wave_height": 1.4,
        "condition": "Moderate",
    },
}

DEFAULT_TEMPERATURE: dict[str, object] = {"temperature": 13.5, "humidity": 72, "condition": "Cool"}


def _location(lat: float, lon: float) -> GeoLocation:
    return GeoLocation(latitude=lat, longitude=lon, name=location_name(lat, lon))


class OpenMeteoFallback:
    """Fallback provider for marine weather and surface temperature."""

    def weather(
        self, latitude: float, longitude: float, waves: dict[str, object] | None = None
    ) -> WeatherSnapshot:
        return WeatherSnapshot(
            location=_location(latitude, longitude),
            current=WaveConditions.model_validate(waves or DEFAULT_WAVES),
            daily=DailyTemperature.model_validate(DEFAULT_DAILY),
            forecast=[ForecastDay(day=i, wave_height=h) for i, h in enumerate(DEFAULT_FORECAST)],
            source=MARINE_FALLBACK_SOURCE,
        )

    def location_weather(self, place: NamedLocation) -> LocationWeather:
        snapshot = self.weather(place.lat, place.lon, DEFAULT_LOCATION_WAVES.get(place.name))
        return LocationWeather(name=place.name, **dict(snapshot))

    def locations(
        self, places: tuple[NamedLocation, ...] = DASHBOARD_LOCATIONS
    ) -> list[LocationWeather]:
        return [self.location_weather(place) for place in places]

    def temperature(self, latitude: float, longitude: float) -> TemperatureSnapshot:
        return TemperatureSnapshot(
            location=_location(latitude, longitude),
            current=CurrentTemperature.model_validate(DEFAULT_TEMPERATURE),
            daily=DailyWeather(**DEFAULT_DAILY, precipitation=0.0),
            source=WEATHER_FALLBACK_SOURCE,
        )
