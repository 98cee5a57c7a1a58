# ABOUTME: Splits a raw search query into tokens and classifies each into one filter kind.
# ABOUTME: Builds the QueryState, failing fast on unknown tokens and exceeded caps.

import logging
import re
from dataclasses import dataclass
from typing import Any

from dexsearch.data.dex import DexData
from dexsearch.data.models import COLOUR_KEYWORDS, TIER_KEYWORDS
from dexsearch.errors import EmptyQuery, EmptyQueryWithAllFlag, UnrecognizedToken
from dexsearch.search.categories import CategoryKind, QueryState

logger = logging.getLogger(__name__)

ALL_KEYWORD = "all"
TYPE_SUFFIX = " type"
MIN_SEARCH_GEN = 1
MAX_SEARCH_GEN = 5

_INTEGER_PATTERN = re.compile(r"^\d+$")


@dataclass(frozen=True)
class ClassifiedToken:
    """A query token and the filter it was recognized as.

    Attributes:
        token: The trimmed token text.
        kind: The category it belongs to, None for the "all" modifier.
        value: The member to add to that category.
    """

    token: str
    kind: CategoryKind | None
    value: Any = None


def split_query(raw: str) -> list[str]:
    """Split a raw query on commas, trimming tokens and dropping empty ones."""
    return [token.strip() for token in raw.split(",") if token.strip()]


def requests_all(raw: str) -> bool:
    """Return True if the query carries the "all" modifier.

    Callers use this to reject "all" before evaluating, e.g. when the reply
    would be broadcast.
    """
    return any(token.lower() == ALL_KEYWORD for token in split_query(raw))


def classify_token(token: str, dex: DexData) -> ClassifiedToken:
    """Classify one token; the first matching rule wins.

    Order: move, ability, tier keyword, colour keyword, generation number,
    "all", then "<name> type".

    Raises:
        UnrecognizedToken: If no rule matches.
    """
    move = dex.get_move(token)
    if move.record is not None:
        return ClassifiedToken(token, CategoryKind.MOVE, move.record)

    ability = dex.get_ability(token)
    if ability.record is not None:
        return ClassifiedToken(token, CategoryKind.ABILITY, ability.record)

    keyword = token.lower()
    if keyword in TIER_KEYWORDS:
        return ClassifiedToken(token, CategoryKind.TIER, TIER_KEYWORDS[keyword])
    if keyword in COLOUR_KEYWORDS:
        return ClassifiedToken(token, CategoryKind.COLOUR, COLOUR_KEYWORDS[keyword])

    if _INTEGER_PATTERN.match(keyword) and MIN_SEARCH_GEN <= int(keyword) <= MAX_SEARCH_GEN:
        return ClassifiedToken(token, CategoryKind.GENERATION, int(keyword))

    if keyword == ALL_KEYWORD:
        return ClassifiedToken(token, None)

    if keyword.endswith(TYPE_SUFFIX):
        type_lookup = dex.get_type(keyword[: -len(TYPE_SUFFIX)])
        if type_lookup.record is not None:
            return ClassifiedToken(token, CategoryKind.TYPE, type_lookup.record)

    raise UnrecognizedToken(token)


def parse_query(raw: str, dex: DexData) -> QueryState:
    """Classify every token of a raw query and accumulate them by kind.

    Args:
        raw: Comma-separated search parameters, e.g. "fire type, ou, flamethrower".
        dex: The dataset snapshot used for move, ability, and type lookups.

    Returns:
        The accumulated QueryState.

    Raises:
        EmptyQuery: If the query holds no tokens.
        UnrecognizedToken: If a token matches no category.
        MoveLimitExceeded: On a fifth distinct move.
        AbilityLimitExceeded: On a second distinct ability.
        TypeLimitExceeded: On a third distinct type.
        EmptyQueryWithAllFlag: If "all" is the only parameter.
    """
    tokens = split_query(raw)
    if not tokens:
        raise EmptyQuery

    state = QueryState()
    for token in tokens:
        classified = classify_token(token, dex)
        if classified.kind is None:
            state.show_all = True
        else:
            state.add(classified.kind, classified.value)

    if not state.populated():
        raise EmptyQueryWithAllFlag

    logger.debug(
        "Parsed %r into %s",
        raw,
        {category.kind.value: category.count for category in state.populated()},
    )
    return state
