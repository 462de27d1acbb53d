"""Static species catalog served when FishBase is unreachable."""

from __future__ import annotations

from tidepool.schemas import FishRecord

DEFAULT_FISH: tuple[dict[str, object], ...] = (
    {"id": 1, "name": "Tuna", "genus": "Thunnus", "family": "Scombridae", "marine": 1},
    {
        "id": 2,
        "name": "Salmon",
        "genus": "Salmo",
        "family": "Salmonidae",
        "marine": 1,
        "freshwater": 1,
        "brackish": 1,
    },
    {"id": 3, "name": "Cod", "genus": "Gadus", "family": "Gadidae", "marine": 1},
    {"id": 4, "name": "Anchovy", "genus": "Engraulis", "family": "Engraulidae", "marine": 1},
    {"id": 5, "name": "Herring", "genus": "Clupea", "family": "Clupeidae", "marine": 1},
)


class FishBaseFallback:
    """Fallback provider for the species catalog."""

    def __init__(self, records: tuple[dict[str, object], ...] = DEFAULT_FISH) -> None:
        self.records = records

    def species(self, limit: int | None = None) -> list[FishRecord]:
        fish = [FishRecord.model_validate(r) for r in self.records]
        return fish[:limit] if limit else fish

    def family(self, family: str) -> list[FishRecord]:
        """Catalog entries of one family (case-insensitive); may be empty."""
        wanted = family.casefold()
        return [f for f in self.species() if f.family.casefold() == wanted]
