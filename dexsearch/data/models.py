"""ABOUTME: Immutable records making up a dex snapshot, plus lookup and legality result types.
ABOUTME: Contains Tier, Colour, SpeciesRecord, MoveRecord, AbilityRecord, Lookup, and LearnsetContext."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Tier(str, Enum):
    """Competitive viability classification of a species."""

    UBER = "Uber"
    OU = "OU"
    BL = "BL"
    UU = "UU"
    BL2 = "BL2"
    RU = "RU"
    NU = "NU"
    NFE = "NFE"
    LC = "LC"
    CAP = "CAP"
    LIMBO = "Limbo"
    ILLEGAL = "Illegal"

    @property
    def keyword(self) -> str:
        """Lower-cased name accepted in search queries."""
        return self.value.lower()


class Colour(str, Enum):
    """Pokedex colour of a species."""

    GREEN = "Green"
    RED = "Red"
    BLUE = "Blue"
    WHITE = "White"
    BROWN = "Brown"
    YELLOW = "Yellow"
    PURPLE = "Purple"
    PINK = "Pink"
    GRAY = "Gray"
    BLACK = "Black"

    @property
    def keyword(self) -> str:
        """Lower-cased name accepted in search queries."""
        return self.value.lower()


# Illegal species can never be searched for, so "illegal" is not a keyword
TIER_KEYWORDS: dict[str, Tier] = {tier.keyword: tier for tier in Tier if tier is not Tier.ILLEGAL}
COLOUR_KEYWORDS: dict[str, Colour] = {colour.keyword: colour for colour in Colour}


@dataclass(frozen=True)
class SpeciesRecord:
    """A single species of the catalog.

    Attributes:
        id: Normalized lookup key (e.g., "mrmime").
        name: Display name (e.g., "Mr. Mime").
        types: One or two type names, primary first.
        tier: Competitive tier.
        colour: Pokedex colour.
        abilities: Ids of every ability the species can have.
        gen: Generation the species was introduced in.
        learnset_id: Key of the species' learnset in the learnset table.
        prevo: Id of the pre-evolution, None for unevolved species.
        male_only_hidden: True when the hidden ability was only ever released on males.
    """

    id: str
    name: str
    types: tuple[str, ...]
    tier: Tier
    colour: Colour
    abilities: frozenset[str]
    gen: int
    learnset_id: str
    prevo: str | None = None
    male_only_hidden: bool = False


@dataclass(frozen=True)
class MoveRecord:
    """A move that species can learn."""

    id: str
    name: str
    type: str


@dataclass(frozen=True)
class AbilityRecord:
    """An ability a species can have."""

    id: str
    name: str


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of resolving a free-text name against a dex snapshot.

    Attributes:
        query: The text as it was given.
        id: The normalized id that was looked up.
        record: The matching record, None if nothing matched.
    """

    query: str
    id: str
    record: T | None = None

    @property
    def found(self) -> bool:
        return self.record is not None


@dataclass
class LearnsetContext:
    """Per-request state shared by consecutive legality checks.

    Attributes:
        level: Only level-up sources at or below this level count, None for no limit.
        no_transfer: Only sources from the current generation count.
        sources: Restricted sources (e.g. "5E", "4S1") every checked move is compatible with.
        sources_before: Every generation up to and including this one is compatible, 0 for none.
        restricted: True once a checked move limited how the species must be obtained.
    """

    level: int | None = None
    no_transfer: bool = False
    sources: list[str] = field(default_factory=list)
    sources_before: int = 0
    restricted: bool = False


@dataclass(frozen=True)
class LearnsetProblem:
    """Why a species cannot learn a move.

    Attributes:
        move_id: The move that failed.
        reason: "invalid" when the move is not learnable at all, "incompatible" when its
            sources rule out the sources required by previously checked moves.
    """

    move_id: str
    reason: str
