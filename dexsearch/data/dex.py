# ABOUTME: Read-only dataset facade over species, moves, abilities, types, and learnsets.
# ABOUTME: Defines the DexData protocol consumed by the search engine and its in-memory Dex implementation.

from collections.abc import Iterable, Sequence
from types import MappingProxyType
from typing import Protocol

from dexsearch.data.learnsets import LearnsetTable
from dexsearch.data.models import (
    AbilityRecord,
    LearnsetContext,
    LearnsetProblem,
    Lookup,
    MoveRecord,
    SpeciesRecord,
)
from dexsearch.utils.normalize import to_id
from dexsearch.utils.type_chart import TYPES, get_effectiveness_exponent, is_immune


class DexData(Protocol):
    """Everything the search engine and lookup commands read from a dataset snapshot."""

    def get_catalog(self) -> tuple[SpeciesRecord, ...]: ...

    def get_types(self) -> tuple[str, ...]: ...

    def get_species(self, name: str) -> Lookup[SpeciesRecord]: ...

    def get_move(self, name: str) -> Lookup[MoveRecord]: ...

    def get_ability(self, name: str) -> Lookup[AbilityRecord]: ...

    def get_type(self, name: str) -> Lookup[str]: ...

    def check_learnset(
        self, move: MoveRecord, species: SpeciesRecord, context: LearnsetContext
    ) -> LearnsetProblem | None: ...

    def type_effectiveness(self, attack_type: str, defender_types: Sequence[str]) -> int: ...

    def type_immunity(self, attack_type: str, defender_types: Sequence[str]) -> bool: ...


class Dex:
    """Immutable in-memory dataset snapshot.

    A Dex is never mutated after construction; a new dataset is published by
    building a new Dex and swapping it into a DexHolder.
    """

    def __init__(
        self,
        species: Iterable[SpeciesRecord],
        moves: Iterable[MoveRecord],
        abilities: Iterable[AbilityRecord],
        learnsets: LearnsetTable,
        types: Sequence[str] = TYPES,
    ) -> None:
        self._catalog = tuple(species)
        self._species = MappingProxyType({s.id: s for s in self._catalog})
        self._moves = MappingProxyType({m.id: m for m in moves})
        self._abilities = MappingProxyType({a.id: a for a in abilities})
        self._types = tuple(types)
        self._type_ids = MappingProxyType({to_id(t): t for t in self._types})
        self._learnsets = learnsets

    def __repr__(self) -> str:
        return (
            f"<Dex species={len(self._catalog)} moves={len(self._moves)} "
            f"abilities={len(self._abilities)} learnsets={len(self._learnsets)}>"
        )

    def get_catalog(self) -> tuple[SpeciesRecord, ...]:
        """Return every species in catalog order."""
        return self._catalog

    def get_types(self) -> tuple[str, ...]:
        return self._types

    def get_species(self, name: str) -> Lookup[SpeciesRecord]:
        key = to_id(name)
        return Lookup(query=name, id=key, record=self._species.get(key))

    def get_move(self, name: str) -> Lookup[MoveRecord]:
        key = to_id(name)
        return Lookup(query=name, id=key, record=self._moves.get(key))

    def get_ability(self, name: str) -> Lookup[AbilityRecord]:
        key = to_id(name)
        return Lookup(query=name, id=key, record=self._abilities.get(key))

    def get_type(self, name: str) -> Lookup[str]:
        """Resolve a type name case-insensitively to its canonical spelling."""
        key = to_id(name)
        return Lookup(query=name, id=key, record=self._type_ids.get(key))

    def check_learnset(
        self, move: MoveRecord, species: SpeciesRecord, context: LearnsetContext
    ) -> LearnsetProblem | None:
        """Check move legality; None means legal. See LearnsetTable.check."""
        return self._learnsets.check(move, species, context, self._species.get)

    def type_effectiveness(self, attack_type: str, defender_types: Sequence[str]) -> int:
        """Return the power-of-two effectiveness exponent, not counting immunities."""
        return get_effectiveness_exponent(attack_type, defender_types)

    def type_immunity(self, attack_type: str, defender_types: Sequence[str]) -> bool:
        """Return True when the defender takes no damage from attack_type."""
        return is_immune(attack_type, defender_types)
