"""ABOUTME: Loads the CSV dataset into an immutable Dex snapshot.
ABOUTME: Reads species, moves, abilities, and learnsets with Polars and validates enums and source codes."""

import logging
from pathlib import Path
from typing import Any

import polars as pl

from dexsearch.data.dex import Dex
from dexsearch.data.learnsets import SOURCE_PATTERN, LearnsetTable
from dexsearch.data.models import AbilityRecord, Colour, MoveRecord, SpeciesRecord, Tier
from dexsearch.settings import settings
from dexsearch.utils.normalize import to_id
from dexsearch.utils.type_chart import TYPES

logger = logging.getLogger(__name__)

SPECIES_COLUMNS = ("name", "type1", "type2", "tier", "color", "ability1", "ability2", "hidden_ability", "gen")
MOVE_COLUMNS = ("name", "type")
ABILITY_COLUMNS = ("name",)
LEARNSET_COLUMNS = ("species", "move", "source")

_TRUE_VALUES = frozenset({"1", "true", "yes", "y"})


def _read_csv(path: Path, required_columns: tuple[str, ...]) -> pl.DataFrame:
    """Read a dataset CSV with every column as string.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If a required column is missing.
    """
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    df = pl.read_csv(path, infer_schema_length=0)
    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        raise ValueError(f"{path.name}: missing columns {', '.join(missing)}")
    return df


def _with_id(df: pl.DataFrame, source_col: str = "name", target_col: str = "id") -> pl.DataFrame:
    """Add a normalized id column derived from a name column."""
    return df.with_columns(pl.col(source_col).map_elements(to_id, return_dtype=pl.String).alias(target_col))


def _strip(value: Any) -> str | None:
    """Return a trimmed string, None for empty cells."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_species_row(row: dict[str, Any], line: int) -> SpeciesRecord:
    """Convert one species CSV row to a SpeciesRecord.

    Raises:
        ValueError: If an enum, type, or generation value is invalid.
    """
    name = _strip(row["name"])
    if not name:
        raise ValueError(f"species.csv row {line}: missing name")

    types = tuple(t for t in (_strip(row["type1"]), _strip(row["type2"])) if t)
    if not types or any(t not in TYPES for t in types):
        raise ValueError(f"species.csv row {line}: invalid types {types!r} for {name}")

    try:
        tier = Tier(_strip(row["tier"]))
        colour = Colour(_strip(row["color"]))
        gen = int(row["gen"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"species.csv row {line}: {e}") from None

    abilities = frozenset(
        to_id(a) for a in (_strip(row["ability1"]), _strip(row["ability2"]), _strip(row["hidden_ability"])) if a
    )
    species_id = row["id"]
    prevo = _strip(row.get("prevo"))
    male_only_hidden = (_strip(row.get("male_only_hidden")) or "").lower() in _TRUE_VALUES

    return SpeciesRecord(
        id=species_id,
        name=name,
        types=types,
        tier=tier,
        colour=colour,
        abilities=abilities,
        gen=gen,
        learnset_id=to_id(_strip(row.get("learnset")) or "") or species_id,
        prevo=to_id(prevo) if prevo else None,
        male_only_hidden=male_only_hidden,
    )


def load_species(path: Path) -> list[SpeciesRecord]:
    """Load species.csv into SpeciesRecords in file order."""
    df = _with_id(_read_csv(path, SPECIES_COLUMNS))
    return [_parse_species_row(row, line) for line, row in enumerate(df.iter_rows(named=True), start=2)]


def load_moves(path: Path) -> list[MoveRecord]:
    """Load moves.csv into MoveRecords."""
    df = _with_id(_read_csv(path, MOVE_COLUMNS))
    bad = df.filter(~pl.col("type").is_in(list(TYPES)))
    if bad.height:
        raise ValueError(f"moves.csv: unknown move types for {', '.join(bad['name'].to_list())}")
    return [MoveRecord(id=row["id"], name=row["name"], type=row["type"]) for row in df.iter_rows(named=True)]


def load_abilities(path: Path) -> list[AbilityRecord]:
    """Load abilities.csv into AbilityRecords."""
    df = _with_id(_read_csv(path, ABILITY_COLUMNS))
    return [AbilityRecord(id=row["id"], name=row["name"]) for row in df.iter_rows(named=True)]


def load_learnsets(path: Path, current_gen: int) -> LearnsetTable:
    """Load learnsets.csv (one row per species, move, source code) into a LearnsetTable.

    Raises:
        ValueError: If a source code is malformed.
    """
    df = _read_csv(path, LEARNSET_COLUMNS)
    df = df.with_columns(
        pl.col("species").map_elements(to_id, return_dtype=pl.String),
        pl.col("move").map_elements(to_id, return_dtype=pl.String),
        pl.col("source").fill_null("").str.strip_chars(),
    )

    bad = df.filter(~pl.col("source").str.contains(SOURCE_PATTERN.pattern))
    if bad.height:
        first = bad.row(0, named=True)
        raise ValueError(f"learnsets.csv: invalid source code {first['source']!r} for {first['species']}")

    grouped = df.group_by(["species", "move"], maintain_order=True).agg(pl.col("source"))

    entries: dict[str, dict[str, tuple[str, ...]]] = {}
    for row in grouped.iter_rows(named=True):
        entries.setdefault(row["species"], {})[row["move"]] = tuple(row["source"])

    return LearnsetTable(entries, current_gen=current_gen)


def load_dex(dex_dir: Path | None = None, current_gen: int | None = None) -> Dex:
    """Load a complete Dex snapshot from a dataset directory.

    Args:
        dex_dir: Directory with species.csv, moves.csv, abilities.csv, learnsets.csv.
            Defaults to settings.dex_dir.
        current_gen: Generation treated as current by the legality engine.
            Defaults to settings.CURRENT_GEN.

    Returns:
        A new immutable Dex.

    Raises:
        FileNotFoundError: If a dataset file is missing.
        ValueError: If a dataset file is invalid.
    """
    if dex_dir is None:
        dex_dir = settings.dex_dir
    if current_gen is None:
        current_gen = settings.CURRENT_GEN

    species = load_species(dex_dir / "species.csv")
    moves = load_moves(dex_dir / "moves.csv")
    abilities = load_abilities(dex_dir / "abilities.csv")
    learnsets = load_learnsets(dex_dir / "learnsets.csv", current_gen)

    dex = Dex(species=species, moves=moves, abilities=abilities, learnsets=learnsets)
    logger.info("Loaded %r from %s", dex, dex_dir)
    return dex
