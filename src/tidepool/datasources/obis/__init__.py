"""OBIS biodiversity data source.

Public API:
  - client: ObisClient (get_biodiversity_observations, get_species_stats,
    get_observations_by_area), parse_occurrence
  - fallback: ObisFallback, DEFAULT_OBSERVATIONS, DEFAULT_STATS
"""

from tidepool.datasources.obis.client import OBIS_API, ObisClient, parse_occurrence
from tidepool.datasources.obis.fallback import DEFAULT_OBSERVATIONS, DEFAULT_STATS, ObisFallback

__all__ = [
    "DEFAULT_OBSERVATIONS",
    "DEFAULT_STATS",
    "OBIS_API",
    "ObisClient",
    "ObisFallback",
    "parse_occurrence",
]
