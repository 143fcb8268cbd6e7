"""Tests for decoding API payloads into data models."""

import dataclasses

import pytest
from hypothesis import given, strategies as st

from igdb import (
    AgeRating,
    AgeRatingValue,
    Cover,
    Game,
    GameCategory,
    GameStatus,
    ListEntry,
    MultiplayerMode,
    RegionCategory,
    ReleaseDate,
    Website,
    WebsiteCategory,
)


class TestDecoding:
    """Test cases for Model.from_dict."""

    def test_missing_keys_take_defaults(self) -> None:
        game = Game.from_dict({"id": 1942})

        assert game.id == 1942
        assert game.name == ""
        assert game.rating == 0.0
        assert game.genres == []
        assert game.category is GameCategory.MAIN_GAME

    def test_unknown_keys_ignored(self) -> None:
        game = Game.from_dict({"id": 1, "name": "Quake", "not_a_field": {"nested": True}})
        assert game.name == "Quake"

    def test_null_values_take_defaults(self) -> None:
        game = Game.from_dict({"id": 1, "name": None, "genres": None})
        assert game.name == ""
        assert game.genres == []

    def test_lists_and_floats(self) -> None:
        game = Game.from_dict({"id": 1, "genres": [5, 12], "rating": 85})

        assert game.genres == [5, 12]
        assert isinstance(game.rating, float)
        assert game.rating == 85.0

    def test_renamed_json_keys(self) -> None:
        date = ReleaseDate.from_dict({"id": 1, "m": 11, "y": 1998, "region": 8})
        assert (date.month, date.year) == (11, 1998)
        assert date.region is RegionCategory.WORLDWIDE

        mode = MultiplayerMode.from_dict({"campaigncoop": True, "onlinemax": 16})
        assert mode.campaign_coop is True
        assert mode.online_max == 16

        entry = ListEntry.from_dict({"id": 3, "list": 77})
        assert entry.list_id == 77

    def test_image_fields_inherited(self) -> None:
        cover = Cover.from_dict({"id": 5, "game": 1942, "image_id": "co1wyy", "width": 264, "height": 374})
        assert cover.game == 1942
        assert cover.image_id == "co1wyy"
        assert (cover.width, cover.height) == (264, 374)

    def test_records_are_frozen(self) -> None:
        game = Game.from_dict({"id": 1})
        with pytest.raises(dataclasses.FrozenInstanceError):
            game.name = "changed"  # type: ignore[misc]

    def test_json_fields(self) -> None:
        keys = ReleaseDate.json_fields()
        assert "m" in keys
        assert "y" in keys
        assert "month" not in keys


class TestEnums:
    """Test cases for coded enum fields."""

    def test_labels(self) -> None:
        assert str(GameCategory.DLC_ADDON) == "DLC / Addon"
        assert str(AgeRatingValue.E10) == "E10"
        assert str(WebsiteCategory.STEAM) == "steam"

    def test_members_compare_as_codes(self) -> None:
        assert GameStatus.EARLY_ACCESS == 4
        assert str(GameCategory.EXPANSION.value) == "2"

    def test_decoded_enum_fields(self) -> None:
        rating = AgeRating.from_dict({"id": 1, "category": 2, "rating": 3})
        assert str(rating.rating) == "12"

        site = Website.from_dict({"id": 1, "category": 13, "url": "https://store.steampowered.com"})
        assert site.category is WebsiteCategory.STEAM

    @given(st.integers(min_value=5, max_value=10_000))
    def test_unknown_codes_preserved(self, code: int) -> None:
        """**Property: codes without an enum member survive decoding as raw ints**"""
        game = Game.from_dict({"id": 1, "category": code})
        assert game.category == code
        assert not isinstance(game.category, GameCategory)
