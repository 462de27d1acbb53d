"""
Open-Meteo marine and surface weather adapter.

Uses Open-Meteo (free, no API key): https://open-meteo.com/
- Marine API: https://marine-api.open-meteo.com/v1/marine
- Forecast API: https://api.open-meteo.com/v1/forecast

Example:
    from tidepool.datasources.openmeteo import OpenMeteoClient
    snapshot = OpenMeteoClient().get_ocean_weather(37.5, -122.4)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import requests

from tidepool.datasources.base import SourceAdapter, SourceConfig, UpstreamError, as_float
from tidepool.datasources.openmeteo.fallback import OpenMeteoFallback
from tidepool.reference.conditions import temperature_condition, wave_condition
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

logger = logging.getLogger(__name__)

MARINE_API = "https://marine-api.open-meteo.com/v1"
WEATHER_API = "https://api.open-meteo.com/v1"

DEFAULT_LAT = 37.5
DEFAULT_LON = -122.4
FORECAST_DAYS = 7
HOURS_PER_DAY = 24

MARINE_HOURLY_VARS = [
    "wave_height",
    "wave_period",
    "wind_wave_height",
    "wind_wave_direction",
    "sea_surface_temperature",
]
MARINE_DAILY_VARS = ["wave_height_max"]
SURFACE_CURRENT_VARS = ["temperature_2m", "relative_humidity_2m"]
SURFACE_DAILY_VARS = ["temperature_2m_max", "temperature_2m_min", "precipitation_sum"]


def _head(series: Any) -> Any:
    """First element of an Open-Meteo value array, or ``None``."""
    if isinstance(series, list) and series:
        return series[0]
    return None


def _sections(data: Any, *keys: str) -> list[dict[str, Any]]:
    """Pull the named blocks out of a response; at least one must be present."""
    blocks = [data.get(key) or {} for key in keys]
    if not any(blocks):
        raise ValueError(f"response has none of {', '.join(keys)}")
    return blocks


def parse_marine(data: dict[str, Any], latitude: float, longitude: float) -> WeatherSnapshot:
    """Map a Marine API response to a :class:`WeatherSnapshot`."""
    hourly, daily = _sections(data, "hourly", "daily")

    wave_height = as_float(_head(hourly.get("wave_height")), 2)
    first_day = [
        t
        for t in (as_float(v) for v in (hourly.get("sea_surface_temperature") or [])[:HOURS_PER_DAY])
        if t is not None
    ]
    heights = (daily.get("wave_height_max") or [])[:FORECAST_DAYS]

    return WeatherSnapshot(
        location=GeoLocation(
            latitude=latitude, longitude=longitude, name=location_name(latitude, longitude)
        ),
        current=WaveConditions(
            wave_height=wave_height,
            wave_period=as_float(_head(hourly.get("wave_period")), 2),
            wind_wave_height=as_float(_head(hourly.get("wind_wave_height")), 2),
            condition=wave_condition(wave_height),
        ),
        daily=DailyTemperature(
            max_temp=round(max(first_day), 1) if first_day else None,
            min_temp=round(min(first_day), 1) if first_day else None,
        ),
        forecast=[ForecastDay(day=i, wave_height=as_float(h, 2)) for i, h in enumerate(heights)],
    )


def parse_surface(data: dict[str, Any], latitude: float, longitude: float) -> TemperatureSnapshot:
    """Map a Forecast API response to a :class:`TemperatureSnapshot`."""
    current, daily = _sections(data, "current", "daily")
    temperature = as_float(current.get("temperature_2m"), 1)
    return TemperatureSnapshot(
        location=GeoLocation(
            latitude=latitude, longitude=longitude, name=location_name(latitude, longitude)
        ),
        current=CurrentTemperature(
            temperature=temperature,
            humidity=as_float(current.get("relative_humidity_2m")),
            condition=temperature_condition(temperature),
        ),
        daily=DailyWeather(
            max_temp=as_float(_head(daily.get("temperature_2m_max")), 1),
            min_temp=as_float(_head(daily.get("temperature_2m_min")), 1),
            precipitation=as_float(_head(daily.get("precipitation_sum")), 1) or 0.0,
        ),
    )


class OpenMeteoClient(SourceAdapter):
    """Marine conditions and surface temperature with a static fallback.

    ``config`` points at the Marine API, ``weather_config`` at the
    Forecast API.
    """

    source_name = "Open-Meteo Marine API"

    def __init__(
        self,
        config: SourceConfig | None = None,
        *,
        weather_config: SourceConfig | None = None,
        session: requests.Session | None = None,
        fallback: OpenMeteoFallback | None = None,
        locations: tuple[NamedLocation, ...] = DASHBOARD_LOCATIONS,
    ) -> None:
        super().__init__(config or SourceConfig(MARINE_API), session=session)
        self.weather_config = weather_config or SourceConfig(WEATHER_API, self.config.timeout)
        self.fallback = fallback or OpenMeteoFallback()
        self.locations = locations

    def _fetch_marine(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """One Marine API request, parsed; raises on any upstream failure."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": ",".join(MARINE_HOURLY_VARS),
            "daily": ",".join(MARINE_DAILY_VARS),
            "timezone": "auto",
            "forecast_days": FORECAST_DAYS,
        }
        return parse_marine(self._get_json("marine", params), latitude, longitude)

    def get_ocean_weather(
        self, latitude: float = DEFAULT_LAT, longitude: float = DEFAULT_LON
    ) -> WeatherSnapshot:
        """Current waves, first-day sea temperature and a 7-day wave outlook."""
        try:
            return self._fetch_marine(latitude, longitude)
        except UpstreamError as exc:
            self._log_failure(f"marine ({latitude}, {longitude})", exc)
            return self.fallback.weather(latitude, longitude)

    def get_water_temperature(
        self, latitude: float = DEFAULT_LAT, longitude: float = DEFAULT_LON
    ) -> TemperatureSnapshot:
        """Surface air temperature, used as a proxy for conditions at the water."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(SURFACE_CURRENT_VARS),
            "daily": ",".join(SURFACE_DAILY_VARS),
            "timezone": "auto",
            "forecast_days": 1,
        }
        try:
            data = self._get_json("forecast", params, config=self.weather_config)
            return parse_surface(data, latitude, longitude)
        except UpstreamError as exc:
            self._log_failure(f"surface temperature ({latitude}, {longitude})", exc)
            return self.fallback.temperature(latitude, longitude)

    def _location_weather(self, place: NamedLocation) -> LocationWeather:
        try:
            snapshot = self._fetch_marine(place.lat, place.lon)
        except UpstreamError as exc:
            self._log_failure(f"marine {place.name}", exc)
            return self.fallback.location_weather(place)
        return LocationWeather(name=place.name, **dict(snapshot))

    def get_ocean_data_multiple_locations(self) -> list[LocationWeather]:
        """Marine conditions for every configured location, fetched concurrently."""
        try:
            with ThreadPoolExecutor(max_workers=len(self.locations) or 1) as pool:
                return list(pool.map(self._location_weather, self.locations))
        except (RuntimeError, *UpstreamError) as exc:
            logger.warning("multi-location fetch failed, serving fallback: %s", exc)
            return self.fallback.locations(self.locations)
