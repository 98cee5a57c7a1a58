# ABOUTME: Per-kind filter categories accumulated while classifying a search query.
# ABOUTME: Each category keeps an explicit {members, count} pair and enforces its cardinality cap.

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dexsearch.errors import (
    AbilityLimitExceeded,
    InputParseError,
    InternalInconsistency,
    MoveLimitExceeded,
    TypeLimitExceeded,
)

MAX_MOVES = 4
MAX_ABILITIES = 1
MAX_TYPES = 2


class CategoryKind(str, Enum):
    """A filter dimension of the species search."""

    TYPE = "type"
    TIER = "tier"
    ABILITY = "ability"
    COLOUR = "colour"
    MOVE = "move"
    GENERATION = "gen"


# Categories narrow the working set in this order
EVALUATION_ORDER: tuple[CategoryKind, ...] = (
    CategoryKind.TYPE,
    CategoryKind.TIER,
    CategoryKind.ABILITY,
    CategoryKind.COLOUR,
    CategoryKind.MOVE,
    CategoryKind.GENERATION,
)

_LIMITS: dict[CategoryKind, tuple[int, Callable[[], InputParseError]]] = {
    CategoryKind.MOVE: (MAX_MOVES, lambda: MoveLimitExceeded(MAX_MOVES)),
    CategoryKind.ABILITY: (MAX_ABILITIES, AbilityLimitExceeded),
    CategoryKind.TYPE: (MAX_TYPES, lambda: TypeLimitExceeded(MAX_TYPES)),
}


@dataclass
class Category:
    """Members requested for one filter kind.

    Attributes:
        kind: The filter dimension.
        members: Distinct requested values.
        count: Number of members, kept alongside the set and checked against it.
        limit: Maximum number of members, None for no cap.
    """

    kind: CategoryKind
    members: set[Any] = field(default_factory=set)
    count: int = 0
    limit: int | None = None
    _overflow: Callable[[], InputParseError] | None = field(default=None, repr=False)

    @classmethod
    def for_kind(cls, kind: CategoryKind) -> "Category":
        """Create an empty category with the cap that applies to its kind."""
        if kind in _LIMITS:
            limit, overflow = _LIMITS[kind]
            return cls(kind=kind, limit=limit, _overflow=overflow)
        return cls(kind=kind)

    @property
    def populated(self) -> bool:
        return self.count > 0

    def add(self, member: Hashable) -> None:
        """Add a member; repeating one already present changes nothing.

        Raises:
            InputParseError: The subclass for this kind's cap when a new member would exceed it.
        """
        if member in self.members:
            return
        if self.limit is not None and self.count >= self.limit:
            raise self._overflow() if self._overflow else InputParseError(f"Too many {self.kind.value} parameters.")
        self.members.add(member)
        self.count += 1

    def verify(self) -> None:
        """Check the bookkeeping invariant.

        Raises:
            InternalInconsistency: If count no longer matches the members or exceeds the cap.
        """
        if self.count != len(self.members):
            raise InternalInconsistency(
                f"{self.kind.value} category counts {self.count} of {len(self.members)} members"
            )
        if self.limit is not None and self.count > self.limit:
            raise InternalInconsistency(f"{self.kind.value} category holds {self.count} members, cap is {self.limit}")


@dataclass
class QueryState:
    """Every category requested by one search query, plus the "all" modifier."""

    categories: dict[CategoryKind, Category] = field(default_factory=dict)
    show_all: bool = False

    def add(self, kind: CategoryKind, member: Hashable) -> None:
        """Add a classified member to the category of its kind, creating it on first use."""
        if kind not in self.categories:
            self.categories[kind] = Category.for_kind(kind)
        self.categories[kind].add(member)

    def members(self, kind: CategoryKind) -> frozenset[Any]:
        """Return the members requested for a kind, empty if it was never requested."""
        category = self.categories.get(kind)
        return frozenset(category.members) if category else frozenset()

    def populated(self) -> list[Category]:
        """Return populated categories in evaluation order."""
        return [
            self.categories[kind]
            for kind in EVALUATION_ORDER
            if kind in self.categories and self.categories[kind].populated
        ]
