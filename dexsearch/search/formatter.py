# ABOUTME: Renders a search ResultSet as a reply.
# ABOUTME: Shows up to ten names, sampling and reporting the hidden count for larger results.

import random

from dexsearch import markup
from dexsearch.search.evaluator import ResultSet

RESULT_LIMIT = 10
NO_RESULTS_MESSAGE = "No Pokémon found."
SHOW_ALL_HINT = 'Redo the search with "all" as a search parameter to show all results.'


def hidden_count(results: ResultSet, show_all: bool, limit: int = RESULT_LIMIT) -> int:
    """Number of matching species left out of the reply."""
    if show_all:
        return 0
    return max(len(results) - limit, 0)


class ResultFormatter:
    """Formats search results, sampling with an injected random generator."""

    def __init__(self, rng: random.Random | None = None, limit: int = RESULT_LIMIT) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.limit = limit

    def format(self, results: ResultSet, show_all: bool = False) -> str:
        """Render the result names.

        Args:
            results: Species matching the query.
            show_all: Whether the query carried the "all" modifier.

        Returns:
            Comma-joined names; with more than `limit` results and no "all",
            a random sample of `limit` names followed by the hidden count.
        """
        if not len(results):
            return NO_RESULTS_MESSAGE

        names = [markup.text(name) for name in results.names]
        hidden = hidden_count(results, show_all, self.limit)
        if not hidden:
            return ", ".join(names)

        shown = self.rng.sample(names, self.limit)
        return f"{', '.join(shown)}, and {hidden} more. {SHOW_ALL_HINT}"
