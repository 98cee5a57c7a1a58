# ABOUTME: Pokemon type effectiveness chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Provides exponent, immunity, and multiplier helpers for type matchups.

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TypeMatchups:
    """How one attacking type fares against each defending type."""

    super_effective: frozenset[str] = frozenset()
    resisted_by: frozenset[str] = frozenset()
    no_effect_on: frozenset[str] = frozenset()


def _matchups(super_effective: str = "", resisted_by: str = "", no_effect_on: str = "") -> TypeMatchups:
    return TypeMatchups(
        super_effective=frozenset(super_effective.split()),
        resisted_by=frozenset(resisted_by.split()),
        no_effect_on=frozenset(no_effect_on.split()),
    )


TYPES: tuple[str, ...] = (
    "Normal",
    "Fire",
    "Water",
    "Electric",
    "Grass",
    "Ice",
    "Fighting",
    "Poison",
    "Ground",
    "Flying",
    "Psychic",
    "Bug",
    "Rock",
    "Ghost",
    "Dragon",
    "Dark",
    "Steel",
    "Fairy",
)

# TYPE_CHART[attacking_type] -> matchups against defending types
TYPE_CHART: dict[str, TypeMatchups] = {
    "Normal": _matchups("", "Rock Steel", "Ghost"),
    "Fire": _matchups("Grass Ice Bug Steel", "Fire Water Rock Dragon"),
    "Water": _matchups("Fire Ground Rock", "Water Grass Dragon"),
    "Electric": _matchups("Water Flying", "Electric Grass Dragon", "Ground"),
    "Grass": _matchups("Water Ground Rock", "Fire Grass Poison Flying Bug Dragon Steel"),
    "Ice": _matchups("Grass Ground Flying Dragon", "Fire Water Ice Steel"),
    "Fighting": _matchups("Normal Ice Rock Dark Steel", "Poison Flying Psychic Bug Fairy", "Ghost"),
    "Poison": _matchups("Grass Fairy", "Poison Ground Rock Ghost", "Steel"),
    "Ground": _matchups("Fire Electric Poison Rock Steel", "Grass Bug", "Flying"),
    "Flying": _matchups("Grass Fighting Bug", "Electric Rock Steel"),
    "Psychic": _matchups("Fighting Poison", "Psychic Steel", "Dark"),
    "Bug": _matchups("Grass Psychic Dark", "Fire Fighting Poison Flying Ghost Steel Fairy"),
    "Rock": _matchups("Fire Ice Flying Bug", "Fighting Ground Steel"),
    "Ghost": _matchups("Psychic Ghost", "Dark", "Normal"),
    "Dragon": _matchups("Dragon", "Steel", "Fairy"),
    "Dark": _matchups("Psychic Ghost", "Fighting Dark Fairy"),
    "Steel": _matchups("Ice Rock Fairy", "Fire Water Electric Steel"),
    "Fairy": _matchups("Fighting Dragon Dark", "Fire Poison Steel"),
}


def _distinct(defender_types: Sequence[str]) -> list[str]:
    """Drop repeated defending types so Fire/Fire counts as a monotype."""
    return list(dict.fromkeys(defender_types))


def get_effectiveness_exponent(atk_type: str, defender_types: Sequence[str]) -> int:
    """Return the power-of-two exponent of an attack against a typing, ignoring immunities.

    Args:
        atk_type: The attacking type (e.g., "Fire").
        defender_types: One or two defending types.

    Returns:
        Sum of +1 per weakness and -1 per resistance: -2 to 2.

    Raises:
        KeyError: If atk_type is not a known type.
    """
    matchups = TYPE_CHART[atk_type]
    exponent = 0
    for def_type in _distinct(defender_types):
        if def_type in matchups.super_effective:
            exponent += 1
        elif def_type in matchups.resisted_by:
            exponent -= 1
    return exponent


def is_immune(atk_type: str, defender_types: Sequence[str]) -> bool:
    """Return True when any defending type takes no damage from atk_type."""
    matchups = TYPE_CHART[atk_type]
    return any(def_type in matchups.no_effect_on for def_type in defender_types)


def get_effectiveness(atk_type: str, def_type1: str, def_type2: str | None = None) -> float:
    """Calculate type effectiveness multiplier.

    Args:
        atk_type: The attacking type (e.g., "Fire").
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.
    """
    defender_types = [def_type1] if def_type2 is None else [def_type1, def_type2]
    if is_immune(atk_type, defender_types):
        return 0.0
    return float(2 ** get_effectiveness_exponent(atk_type, defender_types))
