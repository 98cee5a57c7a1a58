"""Contains configurations for the test run."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from dexsearch.data.dex import Dex
from dexsearch.data.holder import DexHolder
from dexsearch.data.learnsets import LearnsetTable
from dexsearch.data.loader import load_dex
from dexsearch.data.models import AbilityRecord, Colour, MoveRecord, SpeciesRecord, Tier
from dexsearch.utils.normalize import to_id

SpeciesFactory = Callable[..., SpeciesRecord]
DexFactory = Callable[..., Dex]


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture(scope="session")
def dex_dir(resources_folder: Path) -> Path:
    """Directory of the sample CSV dataset."""
    return resources_folder / "dex"


@pytest.fixture(scope="session")
def sample_dex(dex_dir: Path) -> Dex:
    """The sample dataset loaded once for the whole run (a Dex is immutable)."""
    return load_dex(dex_dir, current_gen=6)


@pytest.fixture
def sample_holder(sample_dex: Dex) -> DexHolder:
    return DexHolder(sample_dex)


def _build_species(
    name: str,
    types: tuple[str, ...] = ("Normal",),
    tier: Tier = Tier.OU,
    colour: Colour = Colour.RED,
    abilities: Iterable[str] = ("Pressure",),
    gen: int = 1,
    prevo: str | None = None,
    male_only_hidden: bool = False,
) -> SpeciesRecord:
    species_id = to_id(name)
    return SpeciesRecord(
        id=species_id,
        name=name,
        types=types,
        tier=tier,
        colour=colour,
        abilities=frozenset(to_id(a) for a in abilities),
        gen=gen,
        learnset_id=species_id,
        prevo=to_id(prevo) if prevo else None,
        male_only_hidden=male_only_hidden,
    )


@pytest.fixture
def build_species() -> SpeciesFactory:
    """Factory for SpeciesRecords with sensible defaults."""
    return _build_species


@pytest.fixture
def build_dex() -> DexFactory:
    """Factory for small in-memory Dex snapshots.

    Moves are given as {name: type}; learnsets as {species name: {move name: [sources]}}.
    Abilities default to every ability some species has.
    """

    def _build(
        species: Iterable[SpeciesRecord],
        moves: dict[str, str] | None = None,
        learnsets: dict[str, dict[str, list[str]]] | None = None,
        abilities: Iterable[str] | None = None,
        current_gen: int = 6,
    ) -> Dex:
        species = list(species)
        if abilities is None:
            ability_ids = sorted({a for s in species for a in s.abilities})
            ability_records = [AbilityRecord(id=a, name=a.title()) for a in ability_ids]
        else:
            ability_records = [AbilityRecord(id=to_id(a), name=a) for a in abilities]

        move_records = [MoveRecord(id=to_id(name), name=name, type=t) for name, t in (moves or {}).items()]
        entries = {
            to_id(species_name): {to_id(move): tuple(sources) for move, sources in by_move.items()}
            for species_name, by_move in (learnsets or {}).items()
        }
        return Dex(
            species=species,
            moves=move_records,
            abilities=ability_records,
            learnsets=LearnsetTable(entries, current_gen=current_gen),
        )

    return _build
