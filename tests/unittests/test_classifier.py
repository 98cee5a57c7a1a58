# ABOUTME: Unit tests for query tokenization and token classification.
# ABOUTME: Covers classification priority, generation and type tokens, caps, and empty queries.

import pytest

from dexsearch.data.models import Colour, Tier
from dexsearch.errors import (
    AbilityLimitExceeded,
    EmptyQuery,
    EmptyQueryWithAllFlag,
    MoveLimitExceeded,
    TypeLimitExceeded,
    UnrecognizedToken,
)
from dexsearch.search.categories import CategoryKind
from dexsearch.search.classifier import classify_token, parse_query, requests_all, split_query


class TestSplitQuery:
    """Tests for split_query and requests_all functions."""

    def test_trims_and_drops_empty_tokens(self) -> None:
        assert split_query(" fire type ,, ou ,") == ["fire type", "ou"]

    def test_requests_all(self) -> None:
        assert requests_all("fire type, ALL")
        assert not requests_all("fire type, tall")
        assert not requests_all("")


class TestClassifyToken:
    """Tests for classify_token function."""

    def test_move(self, sample_dex) -> None:
        classified = classify_token("Flamethrower", sample_dex)

        assert classified.kind is CategoryKind.MOVE
        assert classified.value.id == "flamethrower"

    def test_ability(self, sample_dex) -> None:
        classified = classify_token("solar power", sample_dex)

        assert classified.kind is CategoryKind.ABILITY
        assert classified.value.id == "solarpower"

    @pytest.mark.parametrize("token,tier", [("ou", Tier.OU), ("UBER", Tier.UBER), ("cap", Tier.CAP), ("nfe", Tier.NFE)])
    def test_tier(self, sample_dex, token: str, tier: Tier) -> None:
        classified = classify_token(token, sample_dex)

        assert classified.kind is CategoryKind.TIER
        assert classified.value is tier

    def test_illegal_is_not_a_tier_keyword(self, sample_dex) -> None:
        with pytest.raises(UnrecognizedToken):
            classify_token("illegal", sample_dex)

    def test_colour(self, sample_dex) -> None:
        classified = classify_token("Purple", sample_dex)

        assert classified.kind is CategoryKind.COLOUR
        assert classified.value is Colour.PURPLE

    @pytest.mark.parametrize("token,gen", [("1", 1), ("3", 3), ("5", 5)])
    def test_generation(self, sample_dex, token: str, gen: int) -> None:
        classified = classify_token(token, sample_dex)

        assert classified.kind is CategoryKind.GENERATION
        assert classified.value == gen

    @pytest.mark.parametrize("token", ["0", "6", "3rd", "-1"])
    def test_generation_out_of_range_or_partial(self, sample_dex, token: str) -> None:
        with pytest.raises(UnrecognizedToken):
            classify_token(token, sample_dex)

    def test_all_modifier(self, sample_dex) -> None:
        classified = classify_token("All", sample_dex)

        assert classified.kind is None

    @pytest.mark.parametrize("token", ["fire type", "Fire Type", "FIRE TYPE"])
    def test_type(self, sample_dex, token: str) -> None:
        classified = classify_token(token, sample_dex)

        assert classified.kind is CategoryKind.TYPE
        assert classified.value == "Fire"

    def test_bare_type_name_is_unrecognized(self, sample_dex) -> None:
        """Types need the " type" suffix."""
        with pytest.raises(UnrecognizedToken, match='"fire" could not be found'):
            classify_token("fire", sample_dex)

    def test_unknown_type_is_unrecognized(self, sample_dex) -> None:
        with pytest.raises(UnrecognizedToken):
            classify_token("shadow type", sample_dex)

    def test_move_wins_over_ability(self, build_species, build_dex) -> None:
        """A name that is both a move and an ability is classified as a move."""
        dex = build_dex([build_species("Absol", abilities=("Pressure",))], moves={"Pressure": "Dark"})

        assert classify_token("pressure", dex).kind is CategoryKind.MOVE

    def test_ability_wins_over_tier(self, build_species, build_dex) -> None:
        dex = build_dex([build_species("Oddity")], abilities=("OU",))

        assert classify_token("ou", dex).kind is CategoryKind.ABILITY


class TestParseQuery:
    """Tests for parse_query function."""

    def test_accumulates_by_kind(self, sample_dex) -> None:
        state = parse_query("fire type, ou, uu, flamethrower, red, 1", sample_dex)

        assert state.members(CategoryKind.TYPE) == frozenset({"Fire"})
        assert state.members(CategoryKind.TIER) == frozenset({Tier.OU, Tier.UU})
        assert state.members(CategoryKind.COLOUR) == frozenset({Colour.RED})
        assert state.members(CategoryKind.GENERATION) == frozenset({1})
        assert {m.id for m in state.members(CategoryKind.MOVE)} == {"flamethrower"}
        assert not state.show_all

    def test_show_all(self, sample_dex) -> None:
        state = parse_query("fire type, all", sample_dex)

        assert state.show_all

    def test_repeated_token_counts_once(self, sample_dex) -> None:
        state = parse_query("surf, Surf, SURF", sample_dex)

        assert state.categories[CategoryKind.MOVE].count == 1

    @pytest.mark.parametrize("raw", ["", "   ", " , ,"])
    def test_empty_query(self, sample_dex, raw: str) -> None:
        with pytest.raises(EmptyQuery):
            parse_query(raw, sample_dex)

    def test_only_all(self, sample_dex) -> None:
        with pytest.raises(EmptyQueryWithAllFlag):
            parse_query("all", sample_dex)

    def test_unrecognized_token_fails_whole_query(self, sample_dex) -> None:
        with pytest.raises(UnrecognizedToken) as exc_info:
            parse_query("fire type, banana", sample_dex)

        assert exc_info.value.token == "banana"

    def test_fifth_move_rejected(self, sample_dex) -> None:
        with pytest.raises(MoveLimitExceeded):
            parse_query("tackle, surf, fly, roost, earthquake", sample_dex)

    def test_four_moves_accepted(self, sample_dex) -> None:
        state = parse_query("tackle, surf, fly, roost", sample_dex)

        assert state.categories[CategoryKind.MOVE].count == 4

    def test_second_ability_rejected(self, sample_dex) -> None:
        with pytest.raises(AbilityLimitExceeded):
            parse_query("blaze, pressure", sample_dex)

    def test_third_type_rejected(self, sample_dex) -> None:
        with pytest.raises(TypeLimitExceeded):
            parse_query("fire type, water type, grass type", sample_dex)
