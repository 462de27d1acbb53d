"""
Tests for the FishBase species catalog adapter.
"""

from __future__ import annotations

from conftest import SAMPLE_FISHBASE_RESPONSE

from tidepool.datasources.base import SourceConfig
from tidepool.datasources.fishbase import DEFAULT_FISH, FishBaseClient, FishBaseFallback, parse_fish
from tidepool.schemas import FishRecord


def _assert_well_formed(records: list[FishRecord]) -> None:
    for fish in records:
        assert fish.id not in (None, "")
        assert fish.name
        assert fish.family
        assert fish.marine in (0, 1)


class TestParseFish:
    def test_maps_fishbase_columns(self) -> None:
        fish = parse_fish(SAMPLE_FISHBASE_RESPONSE["data"][0])
        assert fish.id == 69
        assert fish.name == "morhua"
        assert fish.genus == "Gadus"
        assert fish.family == "Gadidae"

    def test_negative_one_flags_become_one(self) -> None:
        fish = parse_fish(SAMPLE_FISHBASE_RESPONSE["data"][1])
        assert (fish.marine, fish.freshwater, fish.brackish) == (1, 1, 1)

    def test_missing_fields_get_defaults(self) -> None:
        fish = parse_fish({"SpecCode": 5})
        assert fish.name == "Unknown Species"
        assert fish.genus == "Unknown"
        assert fish.family == "Unknown"
        assert fish.marine == 1
        assert fish.freshwater == 0
        assert fish.brackish == 0

    def test_explicit_zero_marine_is_kept(self) -> None:
        assert parse_fish({"SpecCode": 5, "Marine": 0}).marine == 0

    def test_family_override(self) -> None:
        assert parse_fish({"SpecCode": 5, "Family": "X"}, family="Gadidae").family == "Gadidae"

    def test_missing_spec_code_uses_row_position(self) -> None:
        assert parse_fish({"Species": "incognita"}, position=4).id == 4


class TestGetFishSpecies:
    def test_live_response(self, session_returning) -> None:
        session = session_returning(SAMPLE_FISHBASE_RESPONSE)
        client = FishBaseClient(SourceConfig("https://fish.test/api", timeout=3), session=session)

        fish = client.get_fish_species(limit=3)

        assert [f.genus for f in fish] == ["Gadus", "Salmo", "Unknown"]
        _assert_well_formed(fish)
        session.get.assert_called_once_with(
            "https://fish.test/api/species", params={"limit": 3}, timeout=3
        )

    def test_bare_list_response(self, session_returning) -> None:
        client = FishBaseClient(session=session_returning(SAMPLE_FISHBASE_RESPONSE["data"]))
        assert len(client.get_fish_species()) == 3

    def test_truncates_to_limit(self, session_returning) -> None:
        client = FishBaseClient(session=session_returning(SAMPLE_FISHBASE_RESPONSE))
        assert len(client.get_fish_species(limit=2)) == 2

    def test_offline_returns_fallback(self, offline_session) -> None:
        fish = FishBaseClient(session=offline_session).get_fish_species()
        assert [f.name for f in fish] == [r["name"] for r in DEFAULT_FISH]
        _assert_well_formed(fish)

    def test_fallback_respects_limit(self, offline_session) -> None:
        assert len(FishBaseClient(session=offline_session).get_fish_species(limit=3)) == 3

    def test_server_error_returns_fallback(self, session_returning) -> None:
        fish = FishBaseClient(session=session_returning({"error": "boom"}, 500)).get_fish_species()
        assert fish[0].name == "Tuna"

    def test_empty_body_returns_fallback(self, session_returning) -> None:
        assert FishBaseClient(session=session_returning([])).get_fish_species()[0].name == "Tuna"
        assert (
            FishBaseClient(session=session_returning({"data": []})).get_fish_species()[0].name
            == "Tuna"
        )

    def test_malformed_body_returns_fallback(self, session_returning) -> None:
        client = FishBaseClient(session=session_returning(text="<html>not json</html>"))
        assert client.get_fish_species()[0].name == "Tuna"

    def test_custom_fallback(self, offline_session) -> None:
        fallback = FishBaseFallback(({"id": 9, "name": "Grouper", "family": "Serranidae"},))
        fish = FishBaseClient(session=offline_session, fallback=fallback).get_fish_species()
        assert [f.name for f in fish] == ["Grouper"]

    def test_live_and_fallback_share_shape(self, session_returning, offline_session) -> None:
        live = FishBaseClient(session=session_returning(SAMPLE_FISHBASE_RESPONSE)).get_fish_species()
        fallback = FishBaseClient(session=offline_session).get_fish_species()
        assert live[0].to_json_dict().keys() == fallback[0].to_json_dict().keys()


class TestGetFishByFamily:
    def test_live_response_uses_requested_family(self, session_returning) -> None:
        session = session_returning(SAMPLE_FISHBASE_RESPONSE)
        fish = FishBaseClient(session=session).get_fish_by_family("Salmonidae")

        assert all(f.family == "Salmonidae" for f in fish)
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"Family": "Salmonidae", "limit": 5}

    def test_offline_filters_fallback_by_family(self, offline_session) -> None:
        fish = FishBaseClient(session=offline_session).get_fish_by_family("salmonidae")
        assert [f.name for f in fish] == ["Salmon"]

    def test_offline_unknown_family_is_empty(self, offline_session) -> None:
        assert FishBaseClient(session=offline_session).get_fish_by_family("Nope") == []


class TestRowsWithoutSpecCode:
    def test_species_ids_are_positions(self, session_returning) -> None:
        rows = [{"Species": "incognita"}, {"Species": "obscura", "Genus": "Latens"}]
        fish = FishBaseClient(session=session_returning(rows)).get_fish_species()
        assert [f.id for f in fish] == [1, 2]
        _assert_well_formed(fish)

    def test_family_ids_are_positions(self, session_returning) -> None:
        rows = [{"Species": "incognita"}]
        fish = FishBaseClient(session=session_returning(rows)).get_fish_by_family("Gadidae")
        assert fish[0].id == 1
        assert fish[0].family == "Gadidae"
