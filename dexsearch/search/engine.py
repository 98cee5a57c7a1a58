# ABOUTME: Entry point of the species search: raw query in, reply text out.
# ABOUTME: Takes one dataset snapshot per evaluation and runs classify, evaluate, and format on it.

import random

from dexsearch.data.holder import DexHolder
from dexsearch.search.classifier import parse_query, requests_all
from dexsearch.search.evaluator import QueryEvaluator, ResultSet
from dexsearch.search.formatter import ResultFormatter


class DexSearchEngine:
    """Evaluates search queries against the snapshot currently held by a DexHolder."""

    def __init__(self, holder: DexHolder, rng: random.Random | None = None) -> None:
        self.holder = holder
        self.formatter = ResultFormatter(rng)

    @staticmethod
    def query_requests_all(raw: str) -> bool:
        """Return True if the query asks for every result (the "all" modifier)."""
        return requests_all(raw)

    def search(self, raw: str) -> tuple[ResultSet, bool]:
        """Parse and evaluate a query without formatting it.

        Returns:
            The result set and whether "all" was requested.

        Raises:
            InputParseError: If the query is invalid.
            DexLookupError: If a requested move is unknown to the snapshot.
        """
        dex = self.holder.snapshot()
        state = parse_query(raw, dex)
        return QueryEvaluator(dex).evaluate(state), state.show_all

    def evaluate(self, raw: str) -> str:
        """Run a query and return the formatted reply.

        Raises:
            InputParseError: If the query is invalid.
            DexLookupError: If a requested move is unknown to the snapshot.
        """
        results, show_all = self.search(raw)
        return self.formatter.format(results, show_all=show_all)
