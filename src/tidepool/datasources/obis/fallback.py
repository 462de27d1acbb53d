"""Static biodiversity data served when OBIS is unreachable."""

from __future__ import annotations

from tidepool.reference.geography import BoundingBox
from tidepool.schemas import AreaObservation, BiodiversityResult, ObservationRecord, SpeciesStats

WHALE = "\U0001f40b"
TURTLE = "\U0001f422"
SHARK = "\U0001f988"
BLUE_CIRCLE = "\U0001f535"

DEFAULT_OBSERVATIONS: tuple[dict[str, object], ...] = (
    {
        "id": 1,
        "species": "Balaenoptera musculus (Blue Whale)",
        "common_name": "Blue Whale",
        "latitude": 37.5,
        "longitude": -122.4,
        "date": "2024-02-01",
        "dataset_name": "Marine Mammal Observations",
        "icon": WHALE,
    },
    {
        "id": 2,
        "species": "Megaptera novaeangliae (Humpback Whale)",
        "common_name": "Humpback Whale",
        "latitude": 37.8,
        "longitude": -123.1,
        "date": "2024-02-05",
        "dataset_name": "Whale Migration Tracking",
        "icon": WHALE,
    },
    {
        "id": 3,
        "species": "Chelonia mydas (Green Sea Turtle)",
        "common_name": "Green Sea Turtle",
        "latitude": 25.5,
        "longitude": -80.2,
        "date": "2024-02-08",
        "dataset_name": "Sea Turtle Database",
        "icon": TURTLE,
    },
    {
        "id": 4,
        "species": "Echinorhinus brucus (Bramble Shark)",
        "common_name": "Bramble Shark",
        "latitude": 45.2,
        "longitude": -124.5,
        "date": "2024-02-10",
        "dataset_name": "Deep Sea Research",
        "icon": SHARK,
    },
    {
        "id": 5,
        "species": "Strongylocentrotus purpuratus (Purple Sea Urchin)",
        "common_name": "Purple Sea Urchin",
        "latitude": 34.1,
        "longitude": -119.3,
        "date": "2024-02-12",
        "dataset_name": "Kelp Forest Survey",
        "icon": BLUE_CIRCLE,
    },
)

DEFAULT_STATS: dict[str, int] = {
    "total_species": 234567,
    "total_observations": 123456789,
    "total_datasets": 3251,
}

FALLBACK_SOURCE = "OBIS API (Fallback)"


class ObisFallback:
    """Fallback provider for occurrences and statistics."""

    def __init__(
        self,
        observations: tuple[dict[str, object], ...] = DEFAULT_OBSERVATIONS,
        stats: dict[str, int] | None = None,
    ) -> None:
        self.observations = observations
        self._stats = stats or DEFAULT_STATS

    def _records(self) -> list[ObservationRecord]:
        return [ObservationRecord.model_validate(o) for o in self.observations]

    def biodiversity(self, limit: int | None = None) -> BiodiversityResult:
        records = self._records()
        return BiodiversityResult(
            total=len(records),
            observations=records[:limit] if limit else records,
            source=FALLBACK_SOURCE,
        )

    def stats(self) -> SpeciesStats:
        return SpeciesStats.model_validate(self._stats)

    def area(self, box: BoundingBox) -> list[AreaObservation]:
        """Fallback observations inside ``box``; may be empty."""
        return [
            AreaObservation(species=r.species, lat=r.latitude, lon=r.longitude)
            for r in self._records()
            if r.latitude is not None
            and r.longitude is not None
            and box.contains(r.latitude, r.longitude)
        ]
