"""
FishBase species catalog adapter.

API docs: https://ropensci.github.io/fishbaseapidocs/

Example:
    from tidepool.datasources.fishbase import FishBaseClient
    fish = FishBaseClient().get_fish_species(limit=5)
"""

from __future__ import annotations

from typing import Any

import requests

from tidepool.datasources.base import SourceAdapter, SourceConfig, UpstreamError, first
from tidepool.datasources.fishbase.fallback import FishBaseFallback
from tidepool.schemas import FishRecord

FISHBASE_API = "https://fishbase.ropensci.org/api"
FAMILY_PAGE_SIZE = 5


def _flag(value: Any, default: int) -> int:
    """FishBase habitat flags are -1 (yes) / 0 (no); normalize to 1/0."""
    if value is None or value == "":
        return default
    try:
        return 1 if int(value) != 0 else 0
    except (TypeError, ValueError):
        return 1 if value else 0


def _rows(data: Any) -> list[dict[str, Any]]:
    """The API returns either a bare list or ``{"data": [...]}``."""
    rows = data.get("data") if isinstance(data, dict) else data
    if not isinstance(rows, list):
        raise TypeError(f"unexpected species payload: {type(rows).__name__}")
    return rows


def parse_fish(
    row: dict[str, Any], *, family: str | None = None, position: int = 1
) -> FishRecord:
    """Map one FishBase species row to a :class:`FishRecord`.

    Rows without a ``SpecCode`` are identified by their 1-based ``position``
    in the response.
    """
    return FishRecord(
        id=first(row, "SpecCode", "id", default=position),
        name=first(row, "Species", "name", default="Unknown Species"),
        genus=first(row, "Genus", default="Unknown"),
        family=family or first(row, "Family", default="Unknown"),
        marine=_flag(row.get("Marine"), 1),
        freshwater=_flag(row.get("Freshwater"), 0),
        brackish=_flag(row.get("Brackish"), 0),
    )


class FishBaseClient(SourceAdapter):
    """Species catalog lookups with a static fallback."""

    source_name = "FishBase API"

    def __init__(
        self,
        config: SourceConfig | None = None,
        *,
        session: requests.Session | None = None,
        fallback: FishBaseFallback | None = None,
    ) -> None:
        super().__init__(config or SourceConfig(FISHBASE_API), session=session)
        self.fallback = fallback or FishBaseFallback()

    def get_fish_species(self, limit: int = 10) -> list[FishRecord]:
        """A sample of ``limit`` species."""
        try:
            rows = _rows(self._get_json("species", {"limit": limit}))
            if not rows:
                return self.fallback.species(limit)
            return [parse_fish(row, position=i) for i, row in enumerate(rows[:limit], 1)]
        except UpstreamError as exc:
            self._log_failure("species", exc)
            return self.fallback.species(limit)

    def get_fish_by_family(self, family: str = "Salmonidae") -> list[FishRecord]:
        """Up to five species of ``family``."""
        try:
            rows = _rows(
                self._get_json("species", {"Family": family, "limit": FAMILY_PAGE_SIZE})
            )
            if not rows:
                return self.fallback.family(family)
            return [
                parse_fish(row, family=family, position=i)
                for i, row in enumerate(rows[:FAMILY_PAGE_SIZE], 1)
            ]
        except UpstreamError as exc:
            self._log_failure(f"family {family}", exc)
            return self.fallback.family(family)
