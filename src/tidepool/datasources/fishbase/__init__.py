"""FishBase species catalog data source.

Public API:
  - client: FishBaseClient (get_fish_species, get_fish_by_family), parse_fish
  - fallback: FishBaseFallback, DEFAULT_FISH
"""

from tidepool.datasources.fishbase.client import FISHBASE_API, FishBaseClient, parse_fish
from tidepool.datasources.fishbase.fallback import DEFAULT_FISH, FishBaseFallback

__all__ = [
    "DEFAULT_FISH",
    "FISHBASE_API",
    "FishBaseClient",
    "FishBaseFallback",
    "parse_fish",
]
