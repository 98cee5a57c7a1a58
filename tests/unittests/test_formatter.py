# ABOUTME: Unit tests for search result formatting.
# ABOUTME: Covers the ten-name limit, sampling with a seeded generator, the hidden count, and "all".

import random

import pytest

from dexsearch.search.evaluator import ResultSet
from dexsearch.search.formatter import (
    NO_RESULTS_MESSAGE,
    RESULT_LIMIT,
    SHOW_ALL_HINT,
    ResultFormatter,
    hidden_count,
)


@pytest.fixture
def make_results(build_species):
    def _make(count: int) -> ResultSet:
        return ResultSet(species=tuple(build_species(f"Mon{index:02d}") for index in range(count)))

    return _make


class TestHiddenCount:
    """Tests for hidden_count function."""

    def test_over_limit(self, make_results) -> None:
        assert hidden_count(make_results(23), show_all=False) == 13

    def test_at_limit(self, make_results) -> None:
        assert hidden_count(make_results(RESULT_LIMIT), show_all=False) == 0

    def test_show_all(self, make_results) -> None:
        assert hidden_count(make_results(23), show_all=True) == 0


class TestResultFormatter:
    """Tests for ResultFormatter class."""

    def test_no_results(self) -> None:
        assert ResultFormatter().format(ResultSet()) == NO_RESULTS_MESSAGE

    def test_at_most_limit_lists_every_name(self, make_results) -> None:
        results = make_results(RESULT_LIMIT)

        text = ResultFormatter(random.Random(0)).format(results)

        assert text == ", ".join(results.names)

    def test_over_limit_samples_and_counts_hidden(self, make_results) -> None:
        """23 results: ten distinct names, then "and 13 more" with the hint."""
        results = make_results(23)

        text = ResultFormatter(random.Random(0)).format(results)
        shown, rest = text.split(", and ")

        assert rest == f"13 more. {SHOW_ALL_HINT}"
        shown_names = shown.split(", ")
        assert len(shown_names) == RESULT_LIMIT
        assert len(set(shown_names)) == RESULT_LIMIT
        assert set(shown_names) <= set(results.names)

    def test_same_seed_same_sample(self, make_results) -> None:
        results = make_results(23)

        first = ResultFormatter(random.Random(42)).format(results)
        second = ResultFormatter(random.Random(42)).format(results)

        assert first == second

    def test_show_all_lists_everything(self, make_results) -> None:
        results = make_results(23)

        text = ResultFormatter(random.Random(0)).format(results, show_all=True)

        assert text == ", ".join(results.names)

    def test_names_are_escaped(self, build_species) -> None:
        results = ResultSet(species=(build_species("<Glitch>"),))

        assert ResultFormatter().format(results) == "&lt;Glitch&gt;"
