"""
Domain models for the marine dashboard.

Pydantic models for everything the adapters produce. These define the
canonical schema - datasources normalize upstream responses (and their
fallback payloads) to these, so live and fallback data look identical.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FISH_ICON = "\U0001f41f"
WAVE_ICON = "\U0001f30a"
STATS_ICON = "\U0001f4ca"
THERMOMETER_ICON = "\U0001f321\ufe0f"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-ready dict using the wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Species catalog
# =============================================================================


class FishRecord(CamelModel):
    """A fish species from the catalog. Habitat flags are 0/1."""

    id: int | str
    name: str
    genus: str = "Unknown"
    family: str = "Unknown"
    marine: int = Field(default=1, ge=0, le=1)
    freshwater: int = Field(default=0, ge=0, le=1)
    brackish: int = Field(default=0, ge=0, le=1)
    icon: str = FISH_ICON


# =============================================================================
# Biodiversity
# =============================================================================


class ObservationRecord(CamelModel):
    """A single occurrence record, in upstream response order."""

    id: int | str | None = None
    species: str
    common_name: str = ""
    latitude: float | None = None
    longitude: float | None = None
    date: str | None = None
    dataset_name: str = "OBIS"
    icon: str = WAVE_ICON


class AreaObservation(CamelModel):
    """Minimal occurrence record returned by bounding-box queries."""

    species: str
    lat: float | None = None
    lon: float | None = None


class BiodiversityResult(CamelModel):
    """A page of observations plus the upstream total."""

    total: int = Field(ge=0)
    observations: list[ObservationRecord] = Field(default_factory=list)
    source: str = "OBIS API"


class SpeciesStats(CamelModel):
    """Archive-wide counts."""

    total_species: int = Field(ge=0)
    total_observations: int = Field(ge=0)
    total_datasets: int = Field(ge=0)
    icon: str = STATS_ICON


# =============================================================================
# Weather
# =============================================================================


class GeoLocation(CamelModel):
    """Requested coordinates echoed back with a display name."""

    latitude: float
    longitude: float
    name: str


class WaveConditions(CamelModel):
    wave_height: float | None = None
    wave_height_unit: str = "meters"
    wave_period: float | None = None
    wave_period_unit: str = "seconds"
    wind_wave_height: float | None = None
    condition: str = "Unknown"


class DailyTemperature(CamelModel):
    max_temp: float | None = None
    min_temp: float | None = None
    temp_unit: str = "°C"


class ForecastDay(CamelModel):
    day: int = Field(ge=0)
    wave_height: float | None = None


class WeatherSnapshot(CamelModel):
    """Marine conditions at one location."""

    location: GeoLocation
    current: WaveConditions
    daily: DailyTemperature
    forecast: list[ForecastDay] = Field(default_factory=list)
    source: str = "Open-Meteo Marine API"
    icon: str = WAVE_ICON


class LocationWeather(WeatherSnapshot):
    """A weather snapshot for one of the fixed dashboard locations."""

    name: str


class CurrentTemperature(CamelModel):
    temperature: float | None = None
    unit: str = "°C"
    humidity: float | None = None
    condition: str = "Unknown"


class DailyWeather(CamelModel):
    max_temp: float | None = None
    min_temp: float | None = None
    precipitation: float = 0.0


class TemperatureSnapshot(CamelModel):
    """Surface temperature at one location."""

    location: GeoLocation
    current: CurrentTemperature
    daily: DailyWeather
    source: str = "Open-Meteo Weather API"
    icon: str = THERMOMETER_ICON


# =============================================================================
# Dashboard
# =============================================================================


class DashboardPayload(CamelModel):
    """The combined payload behind ``/api/dashboard``."""

    fish_species: list[FishRecord]
    biodiversity: BiodiversityResult
    ocean_weather: list[LocationWeather]
    stats: SpeciesStats
