"""
Tests for the OBIS biodiversity adapter.
"""

from __future__ import annotations

import requests
from conftest import SAMPLE_OCCURRENCE_RESPONSE, SAMPLE_STATISTICS_RESPONSE

from tidepool.datasources.obis import DEFAULT_STATS, ObisClient, parse_occurrence
from tidepool.datasources.obis.client import STATS_DEFAULTS


class TestParseOccurrence:
    def test_maps_darwin_core_fields(self) -> None:
        obs = parse_occurrence(SAMPLE_OCCURRENCE_RESPONSE["results"][0])
        assert obs.id == "a1b2"
        assert obs.species == "Orcinus orca"
        assert obs.common_name == "Killer Whale"
        assert obs.latitude == 48.5
        assert obs.longitude == -123.1
        assert obs.date == "2023-07-14"
        assert obs.dataset_name == "Salish Sea Cetacean Sightings"
        assert obs.icon

    def test_sparse_record(self) -> None:
        obs = parse_occurrence(SAMPLE_OCCURRENCE_RESPONSE["results"][1])
        assert obs.common_name == ""
        assert obs.latitude is None
        assert obs.longitude is None
        assert obs.date == "2022-05-01"
        assert obs.dataset_name == "OBIS"

    def test_unknown_species(self) -> None:
        assert parse_occurrence({}).species == "Unknown"


class TestGetBiodiversityObservations:
    def test_live_response(self, session_returning) -> None:
        session = session_returning(SAMPLE_OCCURRENCE_RESPONSE)
        result = ObisClient(session=session).get_biodiversity_observations(limit=2)

        assert result.total == 128000000
        assert result.source == "OBIS API"
        assert [o.species for o in result.observations] == ["Orcinus orca", "Zostera marina"]
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"limit": 2, "offset": 0}

    def test_extra_filters_are_forwarded(self, session_returning) -> None:
        session = session_returning(SAMPLE_OCCURRENCE_RESPONSE)
        ObisClient(session=session).get_biodiversity_observations(limit=5, offset=10, taxonid=137205)
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"limit": 5, "offset": 10, "taxonid": 137205}

    def test_total_defaults_to_page_size(self, session_returning) -> None:
        payload = {"results": SAMPLE_OCCURRENCE_RESPONSE["results"]}
        assert ObisClient(session=session_returning(payload)).get_biodiversity_observations().total == 2

    def test_offline_returns_fallback(self, offline_session) -> None:
        result = ObisClient(session=offline_session).get_biodiversity_observations()
        assert result.total == 5
        assert result.source == "OBIS API (Fallback)"
        assert len(result.observations) == 5
        for obs in result.observations:
            assert obs.species
            assert obs.icon

    def test_fallback_respects_limit(self, offline_session) -> None:
        result = ObisClient(session=offline_session).get_biodiversity_observations(limit=2)
        assert len(result.observations) == 2

    def test_missing_results_returns_fallback(self, session_returning) -> None:
        result = ObisClient(session=session_returning({"total": 0})).get_biodiversity_observations()
        assert result.source == "OBIS API (Fallback)"

    def test_empty_results_returns_fallback(self, session_returning) -> None:
        payload = {"total": 0, "results": []}
        result = ObisClient(session=session_returning(payload)).get_biodiversity_observations()
        assert result.source == "OBIS API (Fallback)"

    def test_timeout_returns_fallback(self, offline_session) -> None:
        offline_session.get.side_effect = requests.Timeout("read timed out")
        result = ObisClient(session=offline_session).get_biodiversity_observations()
        assert result.observations


class TestGetSpeciesStats:
    def test_live_response(self, session_returning) -> None:
        stats = ObisClient(session=session_returning(SAMPLE_STATISTICS_RESPONSE)).get_species_stats()
        assert stats.total_species == 180123
        assert stats.total_observations == 140000000
        assert stats.total_datasets == 4700

    def test_missing_counters_use_defaults(self, session_returning) -> None:
        stats = ObisClient(session=session_returning({"taxa": 1})).get_species_stats()
        assert stats.total_species == STATS_DEFAULTS["species"]
        assert stats.total_observations == STATS_DEFAULTS["observations"]
        assert stats.total_datasets == STATS_DEFAULTS["datasets"]

    def test_negative_counter_uses_default(self, session_returning) -> None:
        stats = ObisClient(session=session_returning({"species": -4})).get_species_stats()
        assert stats.total_species == STATS_DEFAULTS["species"]

    def test_offline_returns_fallback(self, offline_session) -> None:
        stats = ObisClient(session=offline_session).get_species_stats()
        assert stats.total_species == DEFAULT_STATS["total_species"]
        for value in (stats.total_species, stats.total_observations, stats.total_datasets):
            assert isinstance(value, int)
            assert value >= 0


class TestGetObservationsByArea:
    def test_sends_polygon(self, session_returning) -> None:
        session = session_returning(SAMPLE_OCCURRENCE_RESPONSE)
        found = ObisClient(session=session).get_observations_by_area(40, 50, -130, -120)

        _, kwargs = session.get.call_args
        assert kwargs["params"]["geometry"] == (
            "POLYGON((-130 40,-120 40,-120 50,-130 50,-130 40))"
        )
        assert kwargs["params"]["limit"] == 50
        assert found[0].species == "Orcinus orca"
        assert found[0].lat == 48.5
        assert found[1].lat is None

    def test_offline_returns_fallback_inside_box(self, offline_session) -> None:
        found = ObisClient(session=offline_session).get_observations_by_area(30, 40, -125, -115)
        species = {o.species for o in found}
        assert "Balaenoptera musculus (Blue Whale)" in species
        assert "Chelonia mydas (Green Sea Turtle)" not in species

    def test_offline_empty_box(self, offline_session) -> None:
        assert ObisClient(session=offline_session).get_observations_by_area(-5, 5, 0, 10) == []
