"""ABOUTME: Tests for the CSV dataset loader.
ABOUTME: Verifies parsing of the sample dataset and validation of malformed files."""

import shutil
from pathlib import Path

import pytest

from dexsearch.data.loader import load_dex, load_learnsets, load_moves, load_species
from dexsearch.data.models import Colour, Tier


@pytest.fixture
def dex_copy(dex_dir: Path, tmp_path: Path) -> Path:
    """A writable copy of the sample dataset."""
    target = tmp_path / "dex"
    shutil.copytree(dex_dir, target)
    return target


class TestLoadSpecies:
    """Tests for load_species function."""

    def test_loads_every_row_in_file_order(self, dex_dir: Path) -> None:
        species = load_species(dex_dir / "species.csv")

        assert len(species) == 26
        assert species[0].name == "Bulbasaur"
        assert species[-1].name == "Missingno."

    def test_parses_record_fields(self, dex_dir: Path) -> None:
        charizard = next(s for s in load_species(dex_dir / "species.csv") if s.name == "Charizard")

        assert charizard.id == "charizard"
        assert charizard.types == ("Fire", "Flying")
        assert charizard.tier is Tier.RU
        assert charizard.colour is Colour.RED
        assert charizard.abilities == frozenset({"blaze", "solarpower"})
        assert charizard.gen == 1
        assert charizard.prevo == "charmeleon"
        assert charizard.learnset_id == "charizard"
        assert charizard.male_only_hidden

    def test_single_type_species(self, dex_dir: Path) -> None:
        pichu = next(s for s in load_species(dex_dir / "species.csv") if s.name == "Pichu")

        assert pichu.types == ("Electric",)
        assert pichu.prevo is None
        assert not pichu.male_only_hidden

    def test_punctuated_names_normalized(self, dex_dir: Path) -> None:
        ids = {s.id for s in load_species(dex_dir / "species.csv")}

        assert "hooh" in ids
        assert "missingno" in ids

    def test_invalid_tier_rejected(self, dex_copy: Path) -> None:
        path = dex_copy / "species.csv"
        path.write_text(path.read_text(encoding="utf-8").replace("Gengar,Ghost,Poison,OU", "Gengar,Ghost,Poison,ZU"))

        with pytest.raises(ValueError, match="species.csv row"):
            load_species(path)

    def test_invalid_type_rejected(self, dex_copy: Path) -> None:
        path = dex_copy / "species.csv"
        path.write_text(path.read_text(encoding="utf-8").replace("Gengar,Ghost,Poison", "Gengar,Ghost,Shadow"))

        with pytest.raises(ValueError, match="invalid types"):
            load_species(path)

    def test_missing_columns_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "species.csv"
        path.write_text("name,type1\nBulbasaur,Grass\n")

        with pytest.raises(ValueError, match="missing columns"):
            load_species(path)


class TestLoadMovesAndLearnsets:
    """Tests for load_moves and load_learnsets functions."""

    def test_moves_loaded(self, dex_dir: Path) -> None:
        moves = {m.id: m for m in load_moves(dex_dir / "moves.csv")}

        assert len(moves) == 20
        assert moves["willowisp"].name == "Will-O-Wisp"
        assert moves["willowisp"].type == "Fire"

    def test_unknown_move_type_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "moves.csv"
        path.write_text("name,type\nShadow Rush,Shadow\n")

        with pytest.raises(ValueError, match="Shadow Rush"):
            load_moves(path)

    def test_learnsets_grouped_by_species_and_move(self, dex_dir: Path) -> None:
        table = load_learnsets(dex_dir / "learnsets.csv", current_gen=6)

        assert table.sources_for("pikachu", "fly") == ("3S3", "3S4", "3S5", "3S6", "3S7", "4S8")
        assert table.sources_for("pikachu", "tackle") == ()
        assert table.sources_for("unknown", "tackle") == ()

    def test_malformed_source_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "learnsets.csv"
        path.write_text("species,move,source\nbulbasaur,tackle,L1\n")

        with pytest.raises(ValueError, match="invalid source code"):
            load_learnsets(path, current_gen=6)


class TestLoadDex:
    """Tests for load_dex function."""

    def test_loads_complete_snapshot(self, sample_dex) -> None:
        assert len(sample_dex.get_catalog()) == 26
        assert sample_dex.get_move("Flamethrower").found
        assert sample_dex.get_ability("Solar Power").found

    def test_missing_file_raises(self, dex_copy: Path) -> None:
        (dex_copy / "abilities.csv").unlink()

        with pytest.raises(FileNotFoundError):
            load_dex(dex_copy)
