# ABOUTME: Type matchup lookups: what a species or typing is weak to, and single attack effectiveness.
# ABOUTME: Reads type effectiveness and immunity through the dataset facade.

import re
from collections.abc import Sequence
from dataclasses import dataclass

from dexsearch import markup
from dexsearch.data.dex import DexData
from dexsearch.errors import MissingArgument, UnknownCombination, UnknownTarget

_WEAKNESS_SEPARATORS = re.compile(r"[ ,/]")
_MATCHUP_SEPARATORS = re.compile(r"[,/]")


@dataclass(frozen=True)
class Defender:
    """A typing to evaluate attacks against, with the label used in replies."""

    types: tuple[str, ...]
    label: str


def _resolve_types(dex: DexData, names: Sequence[str]) -> tuple[str, ...] | None:
    """Resolve every name to a type, None if any of them is not a type."""
    types: list[str] = []
    for name in names:
        lookup = dex.get_type(name)
        if lookup.record is None:
            return None
        types.append(lookup.record)
    return tuple(types)


def _weakness_defender(dex: DexData, target: str) -> Defender:
    """Resolve a weakness target: a species, or one or two types.

    Raises:
        UnknownTarget: If the target is neither.
    """
    species = dex.get_species(target)
    if species.record is not None:
        return Defender(types=species.record.types, label=species.record.name)

    parts = [part for part in _WEAKNESS_SEPARATORS.split(target) if part.strip()]
    types = _resolve_types(dex, parts) if 1 <= len(parts) <= 2 else None
    if not types:
        raise UnknownTarget(target.strip())
    return Defender(types=types, label="/".join(types))


def weakness(dex: DexData, target: str) -> str:
    """List the attacking types a species or typing is weak to.

    Doubly super effective types (4x) are bolded; immunities are skipped.

    Args:
        dex: Dataset snapshot to read from.
        target: Species name, or one or two type names separated by space, comma, or slash.

    Returns:
        Reply markup.

    Raises:
        UnknownTarget: If the target is not a species or typing.
    """
    defender = _weakness_defender(dex, target)

    weaknesses: list[str] = []
    for atk_type in dex.get_types():
        if dex.type_immunity(atk_type, defender.types):
            continue
        exponent = dex.type_effectiveness(atk_type, defender.types)
        if exponent == 1:
            weaknesses.append(markup.text(atk_type))
        elif exponent >= 2:
            weaknesses.append(markup.bold(markup.text(atk_type)))

    label = markup.text(defender.label)
    if not weaknesses:
        return f"{label} has no weaknesses."
    return f"{label} is weak to: {', '.join(weaknesses)} (not counting abilities)."


def _matchup_defender(dex: DexData, parts: Sequence[str]) -> tuple[str, Defender] | None:
    """Try species + type in both orders; return (attacking type, defender) or None."""
    for species_name, type_name in ((parts[0], parts[1]), (parts[1], parts[0])):
        species = dex.get_species(species_name)
        atk_type = dex.get_type(type_name)
        if species.record is not None and atk_type.record is not None:
            label = f"{species.record.name} (not counting abilities)"
            return atk_type.record, Defender(types=species.record.types, label=label)
    return None


def effectiveness(dex: DexData, target: str) -> str:
    """Report how effective an attacking type is against a species or typing.

    Accepted forms: "species, type", "type, species", "type, type", and
    "type, type, type" (attacker first, then a dual-typed defender).

    Args:
        dex: Dataset snapshot to read from.
        target: The arguments separated by commas or slashes.

    Returns:
        Reply markup with the damage multiplier.

    Raises:
        MissingArgument: If only one argument was given.
        UnknownCombination: If the arguments match none of the accepted forms.
    """
    parts = [part.strip() for part in _MATCHUP_SEPARATORS.split(target)]
    if len(parts) < 2 or not parts[1]:
        raise MissingArgument("Attacker and defender must be separated with a comma.")

    matched = _matchup_defender(dex, parts)
    if matched is None:
        atk_type = dex.get_type(parts[0]).record
        defender_types = _resolve_types(dex, parts[1:2])
        if atk_type is None or defender_types is None:
            raise UnknownCombination(parts[0], parts[1])
        if len(parts) > 2:
            second = dex.get_type(parts[2]).record
            if second is not None:
                defender_types = (*defender_types, second)
        matched = atk_type, Defender(types=defender_types, label="/".join(defender_types))

    atk_type, defender = matched
    factor = 0.0
    if not dex.type_immunity(atk_type, defender.types):
        factor = 2.0 ** dex.type_effectiveness(atk_type, defender.types)

    return f"{markup.text(atk_type)} attacks are {factor:g}x effective against {markup.text(defender.label)}."
