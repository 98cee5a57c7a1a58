# ABOUTME: Learnset query: can a species learn a list of moves, and how must it be obtained.
# ABOUTME: Formats the legality engine's restricted sources, truncating long runs unless exhaustive.

from collections.abc import Sequence
from itertools import groupby

from dexsearch import markup
from dexsearch.data.dex import DexData
from dexsearch.data.models import LearnsetContext, MoveRecord, SpeciesRecord
from dexsearch.errors import MissingArgument, UnknownMove, UnknownSpecies

SOURCE_NAMES = {"E": "egg", "S": "event", "D": "dream world"}
DETAILS_SHOWN = 3


def _source_items(species: SpeciesRecord, context: LearnsetContext, exhaustive: bool) -> list[str]:
    """Render restricted sources grouped by generation and method.

    Sources sharing their first two characters (e.g. "5S") become one list item;
    their details are joined and cut after DETAILS_SHOWN entries unless exhaustive.
    """
    items: list[str] = []
    for prefix, group in groupby(sorted(context.sources), key=lambda source: source[:2]):
        details = [source[2:] for source in group if source[2:]]
        item = f"gen {prefix[0]} {SOURCE_NAMES.get(prefix[1], prefix[1])}"
        if prefix == "5E" and species.male_only_hidden:
            item += " (cannot have hidden ability)"
        if details:
            shown = details if exhaustive else details[:DETAILS_SHOWN]
            if len(shown) < len(details):
                shown = [*shown, "..."]
            item += ": " + ", ".join(markup.text(detail) for detail in shown)
        items.append(item)

    if context.sources_before:
        items.append(f"any generation before {context.sources_before + 1}")
    return items


def _resolve_moves(dex: DexData, move_names: Sequence[str]) -> list[MoveRecord]:
    """Look up every requested move.

    Raises:
        MissingArgument: If no move was given.
        UnknownMove: On the first name that is not a move.
    """
    names = [name.strip() for name in move_names if name.strip()]
    if not names:
        raise MissingArgument("You must specify at least one move.")

    moves: list[MoveRecord] = []
    for name in names:
        lookup = dex.get_move(name)
        if lookup.record is None:
            raise UnknownMove(lookup.id or name)
        moves.append(lookup.record)
    return moves


def learn(
    dex: DexData,
    species_name: str,
    move_names: Sequence[str],
    context: LearnsetContext | None = None,
    exhaustive: bool = False,
) -> str:
    """Explain whether a species can learn the given moves together.

    Args:
        dex: Dataset snapshot to read from.
        species_name: Species to check.
        move_names: Moves to check, in order; checking stops at the first illegal one.
        context: Legality options (level cap, no transfer). A fresh context is used if None.
        exhaustive: List every source detail instead of truncating after three.

    Returns:
        Reply markup saying the species can or can't learn the moves.

    Raises:
        UnknownSpecies: If the species does not exist.
        MissingArgument: If no move was given.
        UnknownMove: If a move does not exist.
    """
    species_lookup = dex.get_species(species_name)
    if species_lookup.record is None:
        raise UnknownSpecies(species_lookup.id or species_name.strip())
    species = species_lookup.record

    moves = _resolve_moves(dex, move_names)
    if context is None:
        context = LearnsetContext()

    problem = None
    for move in moves:
        problem = dex.check_learnset(move, species, context)
        if problem is not None:
            break

    verb = (
        markup.span("can't", "message-learn-cannotlearn")
        if problem is not None
        else markup.span("can", "message-learn-canlearn")
    )
    reply = f"{markup.text(species.name)} {verb} learn {', '.join(markup.text(m.name) for m in moves)}"

    if problem is None and (context.sources or context.sources_before):
        items = _source_items(species, context, exhaustive)
        reply += " only when obtained from:" + markup.bullet_list(items, "message-learn-list")

    return reply
