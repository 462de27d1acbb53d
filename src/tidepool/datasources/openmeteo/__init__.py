"""Open-Meteo marine weather data source.

Public API:
  - client: OpenMeteoClient (get_ocean_weather, get_water_temperature,
    get_ocean_data_multiple_locations), parse_marine, parse_surface
  - fallback: OpenMeteoFallback
"""

from tidepool.datasources.openmeteo.client import (
    MARINE_API,
    WEATHER_API,
    OpenMeteoClient,
    parse_marine,
    parse_surface,
)
from tidepool.datasources.openmeteo.fallback import OpenMeteoFallback

__all__ = [
    "MARINE_API",
    "WEATHER_API",
    "OpenMeteoClient",
    "OpenMeteoFallback",
    "parse_marine",
    "parse_surface",
]
