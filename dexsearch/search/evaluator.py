# ABOUTME: Evaluates a QueryState against one dataset snapshot.
# ABOUTME: AND across populated categories, OR within each (except two types and multiple moves).

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from dexsearch.data.dex import DexData
from dexsearch.data.models import LearnsetContext, MoveRecord, SpeciesRecord, Tier
from dexsearch.errors import InternalInconsistency, UnknownMove
from dexsearch.search.categories import Category, CategoryKind, QueryState

logger = logging.getLogger(__name__)

SpeciesPredicate = Callable[[SpeciesRecord], bool]


@dataclass(frozen=True)
class ResultSet:
    """Species matching a query, deduplicated and in catalog order."""

    species: tuple[SpeciesRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.species)

    def __iter__(self) -> Iterator[SpeciesRecord]:
        return iter(self.species)

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(s.id for s in self.species)

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.species]


class QueryEvaluator:
    """Narrows the catalog of one snapshot category by category.

    The snapshot is fixed at construction; every lookup made while evaluating
    goes to that same object.
    """

    def __init__(self, dex: DexData) -> None:
        self.dex = dex

    def _initial_species(self, state: QueryState) -> list[SpeciesRecord]:
        """Full catalog minus Illegal species, and minus CAP species unless CAP was requested."""
        include_cap = Tier.CAP in state.members(CategoryKind.TIER)
        return [
            species
            for species in self.dex.get_catalog()
            if species.tier is not Tier.ILLEGAL and (species.tier is not Tier.CAP or include_cap)
        ]

    def _resolve_moves(self, state: QueryState) -> list[MoveRecord]:
        """Look every requested move up in the snapshot.

        Raises:
            UnknownMove: If a requested move does not exist in the snapshot.
        """
        resolved: list[MoveRecord] = []
        for move in sorted(state.members(CategoryKind.MOVE), key=lambda m: m.id):
            lookup = self.dex.get_move(move.id)
            if lookup.record is None:
                raise UnknownMove(move.name)
            resolved.append(lookup.record)
        return resolved

    def _learns_all(self, species: SpeciesRecord, moves: list[MoveRecord]) -> bool:
        """True if the species can learn every move together."""
        context = LearnsetContext()
        return all(self.dex.check_learnset(move, species, context) is None for move in moves)

    def _predicate(self, category: Category, moves: list[MoveRecord]) -> SpeciesPredicate:
        """Build the membership test for one populated category."""
        members = frozenset(category.members)

        if category.kind is CategoryKind.TYPE:
            if category.count == 1:
                return lambda s: any(t in members for t in s.types)
            # Two requested types: the species needs both, in either slot
            return lambda s: members <= set(s.types)

        if category.kind is CategoryKind.TIER:
            keywords = {tier.keyword for tier in members}
            return lambda s: s.tier.value.lower() in keywords

        if category.kind is CategoryKind.ABILITY:
            (ability,) = members
            return lambda s: ability.id in s.abilities

        if category.kind is CategoryKind.COLOUR:
            return lambda s: s.colour in members

        if category.kind is CategoryKind.MOVE:
            return lambda s: self._learns_all(s, moves)

        if category.kind is CategoryKind.GENERATION:
            return lambda s: s.gen in members

        raise InternalInconsistency(f"No filter for category {category.kind!r}")

    def evaluate(self, state: QueryState) -> ResultSet:
        """Apply every populated category once, in evaluation order.

        Args:
            state: The parsed query.

        Returns:
            Species satisfying every populated category.

        Raises:
            UnknownMove: If a requested move is missing from the snapshot.
            InternalInconsistency: If category bookkeeping is corrupted.
        """
        categories = state.populated()
        for category in categories:
            category.verify()

        moves = self._resolve_moves(state)
        working = self._initial_species(state)

        for category in categories:
            predicate = self._predicate(category, moves)
            before = len(working)
            working = [species for species in working if predicate(species)]
            logger.debug("Applied %s filter: %d -> %d species", category.kind.value, before, len(working))

        return ResultSet(species=tuple(working))
