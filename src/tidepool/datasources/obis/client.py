"""
OBIS (Ocean Biodiversity Information System) adapter.

API docs: https://api.obis.org/

Example:
    from tidepool.datasources.obis import ObisClient
    page = ObisClient().get_biodiversity_observations(limit=10)
"""

from __future__ import annotations

from typing import Any

import requests

from tidepool.datasources.base import (
    SourceAdapter,
    SourceConfig,
    UpstreamError,
    as_float,
    first,
)
from tidepool.datasources.obis.fallback import ObisFallback
from tidepool.reference.geography import BoundingBox
from tidepool.schemas import AreaObservation, BiodiversityResult, ObservationRecord, SpeciesStats

OBIS_API = "https://api.obis.org/v3"
AREA_PAGE_SIZE = 50

# Used when /statistics answers but omits a counter
STATS_DEFAULTS = {"species": 200_000, "observations": 100_000_000, "datasets": 3_000}


def _event_date(value: Any) -> str | None:
    """Date part of an OBIS ``eventDate`` (which may be a datetime or a range)."""
    if not value:
        return None
    return str(value).split("/")[0].split("T")[0]


def _count(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 0 else default


def parse_occurrence(row: dict[str, Any]) -> ObservationRecord:
    """Map one OBIS occurrence to an :class:`ObservationRecord`."""
    return ObservationRecord(
        id=row.get("id"),
        species=first(row, "scientificName", "species", default="Unknown"),
        common_name=first(row, "commonName", "vernacularName", default=""),
        latitude=as_float(row.get("decimalLatitude")),
        longitude=as_float(row.get("decimalLongitude")),
        date=_event_date(row.get("eventDate")),
        dataset_name=first(row, "datasetName", default="OBIS"),
    )


def _results(data: Any) -> list[dict[str, Any]]:
    results = data.get("results")
    if not results:
        raise ValueError("occurrence response has no results")
    return list(results)


class ObisClient(SourceAdapter):
    """Occurrence search and archive statistics with a static fallback."""

    source_name = "OBIS API"

    def __init__(
        self,
        config: SourceConfig | None = None,
        *,
        session: requests.Session | None = None,
        fallback: ObisFallback | None = None,
    ) -> None:
        super().__init__(config or SourceConfig(OBIS_API), session=session)
        self.fallback = fallback or ObisFallback()

    def get_biodiversity_observations(
        self, limit: int = 20, offset: int = 0, **filters: Any
    ) -> BiodiversityResult:
        """
        One page of occurrence records.

        Args:
            limit: Page size.
            offset: Records to skip.
            **filters: Extra OBIS query parameters (``taxonid``, ``geometry``, ...).
        """
        params = {"limit": limit, "offset": offset, **filters}
        try:
            data = self._get_json("occurrence", params)
            observations = [parse_occurrence(row) for row in _results(data)]
            return BiodiversityResult(
                total=_count(data.get("total"), len(observations)),
                observations=observations,
                source=self.source_name,
            )
        except UpstreamError as exc:
            self._log_failure("occurrence", exc)
            return self.fallback.biodiversity(limit)

    def get_species_stats(self) -> SpeciesStats:
        """Archive-wide species, record and dataset counts."""
        try:
            data = self._get_json("statistics")
            return SpeciesStats(
                total_species=_count(data.get("species"), STATS_DEFAULTS["species"]),
                total_observations=_count(
                    first(data, "records", "observations"), STATS_DEFAULTS["observations"]
                ),
                total_datasets=_count(data.get("datasets"), STATS_DEFAULTS["datasets"]),
            )
        except UpstreamError as exc:
            self._log_failure("statistics", exc)
            return self.fallback.stats()

    def get_observations_by_area(
        self,
        min_lat: float,
        max_lat: float,
        min_lon: float,
        max_lon: float,
    ) -> list[AreaObservation]:
        """Occurrences inside a lat/lon box (first 50)."""
        box = BoundingBox(min_lat, max_lat, min_lon, max_lon)
        params = {"geometry": box.as_wkt_polygon(), "limit": AREA_PAGE_SIZE}
        try:
            data = self._get_json("occurrence", params)
            return [
                AreaObservation(
                    species=first(row, "scientificName", default="Unknown"),
                    lat=as_float(row.get("decimalLatitude")),
                    lon=as_float(row.get("decimalLongitude")),
                )
                for row in _results(data)
            ]
        except UpstreamError as exc:
            self._log_failure("area occurrence", exc)
            return self.fallback.area(box)
