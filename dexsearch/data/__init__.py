# ABOUTME: Data package for the read-only dataset facade.
# ABOUTME: Contains records, the Dex snapshot, its holder, the CSV loader, and the legality engine.

from dexsearch.data.dex import Dex, DexData
from dexsearch.data.holder import DexHolder
from dexsearch.data.learnsets import LearnsetTable
from dexsearch.data.models import (
    COLOUR_KEYWORDS,
    TIER_KEYWORDS,
    AbilityRecord,
    Colour,
    LearnsetContext,
    LearnsetProblem,
    Lookup,
    MoveRecord,
    SpeciesRecord,
    Tier,
)

__all__ = [
    "COLOUR_KEYWORDS",
    "TIER_KEYWORDS",
    "AbilityRecord",
    "Colour",
    "Dex",
    "DexData",
    "DexHolder",
    "LearnsetContext",
    "LearnsetProblem",
    "LearnsetTable",
    "Lookup",
    "MoveRecord",
    "SpeciesRecord",
    "Tier",
]
