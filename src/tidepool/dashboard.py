"""
Dashboard aggregation.

Joins one call to each source into a single :class:`DashboardPayload`. The
calls run concurrently; adapters absorb their own failures, so in practice
the join always succeeds. Anything that does escape an adapter propagates to
the caller unchanged.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import requests

from tidepool.config import Settings
from tidepool.datasources.base import SourceConfig
from tidepool.datasources.fishbase import FishBaseClient
from tidepool.datasources.obis import ObisClient
from tidepool.datasources.openmeteo import OpenMeteoClient
from tidepool.schemas import DashboardPayload
from tidepool.services.http import build_retry, create_session

logger = logging.getLogger(__name__)

DASHBOARD_SOURCES = ["FishBase API", "OBIS API", "Open-Meteo Marine API"]


@dataclass
class Sources:
    """The three adapters the API serves from."""

    fishbase: FishBaseClient
    obis: ObisClient
    openmeteo: OpenMeteoClient

    @classmethod
    def from_settings(
        cls, settings: Settings, *, session: requests.Session | None = None
    ) -> Sources:
        """Build adapters pointed at the configured upstream URLs."""
        session = session or create_session(
            retry=build_retry(settings.upstream_retries), timeout=settings.request_timeout
        )
        timeout = settings.request_timeout
        return cls(
            fishbase=FishBaseClient(
                SourceConfig(settings.fishbase_api_url, timeout), session=session
            ),
            obis=ObisClient(SourceConfig(settings.obis_api_url, timeout), session=session),
            openmeteo=OpenMeteoClient(
                SourceConfig(settings.marine_api_url, timeout),
                weather_config=SourceConfig(settings.weather_api_url, timeout),
                session=session,
            ),
        )


def build_dashboard(
    sources: Sources,
    *,
    fish_count: int = 5,
    observation_count: int = 5,
) -> DashboardPayload:
    """Fetch species, observations, location weather and stats in parallel."""
    with ThreadPoolExecutor(max_workers=4) as pool:
        fish = pool.submit(sources.fishbase.get_fish_species, fish_count)
        biodiversity = pool.submit(
            sources.obis.get_biodiversity_observations, limit=observation_count
        )
        weather = pool.submit(sources.openmeteo.get_ocean_data_multiple_locations)
        stats = pool.submit(sources.obis.get_species_stats)

        payload = DashboardPayload(
            fish_species=fish.result(),
            biodiversity=biodiversity.result(),
            ocean_weather=weather.result(),
            stats=stats.result(),
        )

    logger.info(
        "Dashboard assembled: %d species, %d observations, %d locations",
        len(payload.fish_species),
        len(payload.biodiversity.observations),
        len(payload.ocean_weather),
    )
    return payload
