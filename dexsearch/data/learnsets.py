# ABOUTME: Move legality engine over per-species learnset source codes.
# ABOUTME: Decides whether a species can learn a move and records how it must be obtained.

import logging
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from dexsearch.data.models import LearnsetContext, LearnsetProblem, MoveRecord, SpeciesRecord

logger = logging.getLogger(__name__)

# "<gen><method><detail>", e.g. "5L20" (level 20 in gen 5), "4M" (TM in gen 4), "3S1" (gen 3 event #1)
SOURCE_PATTERN = re.compile(r"^([1-9])([LMTESD])(.*)$")

# Methods available to any copy of the species in that generation
UNRESTRICTED_METHODS = frozenset("LMT")

# Methods that tie the species to a specific origin (egg, event, dream world)
RESTRICTED_METHODS = frozenset("ESD")

SpeciesResolver = Callable[[str], SpeciesRecord | None]


def is_valid_source(source: str) -> bool:
    """Check that a source code is well formed."""
    return SOURCE_PATTERN.match(source) is not None


def source_gen(source: str) -> int:
    """Return the generation digit of a source code."""
    return int(source[0])


class LearnsetTable:
    """Read-only mapping of learnset id -> move id -> source codes, with the legality check."""

    def __init__(self, entries: Mapping[str, Mapping[str, tuple[str, ...]]], current_gen: int) -> None:
        self._entries = MappingProxyType({key: MappingProxyType(dict(moves)) for key, moves in entries.items()})
        self.current_gen = current_gen

    def __len__(self) -> int:
        return len(self._entries)

    def sources_for(self, learnset_id: str, move_id: str) -> tuple[str, ...]:
        """Return the raw source codes of one move in one learnset."""
        moves = self._entries.get(learnset_id)
        if moves is None:
            return ()
        return moves.get(move_id, ())

    def _collect(
        self,
        move: MoveRecord,
        species: SpeciesRecord,
        context: LearnsetContext,
        resolve: SpeciesResolver,
    ) -> tuple[list[str], int] | None:
        """Gather the sources of a move across a species and its pre-evolutions.

        Returns:
            None when the move is learnable in the current generation without restriction,
            otherwise (restricted sources, latest unrestricted older generation).
        """
        restricted: list[str] = []
        sources_before = 0
        seen: set[str] = set()
        template: SpeciesRecord | None = species

        while template is not None and template.id not in seen:
            seen.add(template.id)
            for source in self.sources_for(template.learnset_id, move.id):
                gen = source_gen(source)
                method = source[1]
                detail = source[2:]

                if context.no_transfer and gen < self.current_gen:
                    continue
                if method == "L" and context.level is not None and detail.isdigit() and int(detail) > context.level:
                    continue

                if method in UNRESTRICTED_METHODS:
                    if gen >= self.current_gen:
                        return None
                    sources_before = max(sources_before, gen)
                elif method in RESTRICTED_METHODS and source not in restricted:
                    restricted.append(source)

            template = resolve(template.prevo) if template.prevo else None

        return restricted, sources_before

    def check(
        self,
        move: MoveRecord,
        species: SpeciesRecord,
        context: LearnsetContext,
        resolve: SpeciesResolver,
    ) -> LearnsetProblem | None:
        """Check whether a species can learn a move given what earlier checks required.

        The context is updated in place so that successive calls intersect their
        restrictions, e.g. an egg move and an event-only move are incompatible.

        Args:
            move: The move to check.
            species: The species that should learn it.
            context: Shared per-request state; updated with the new restrictions.
            resolve: Looks up pre-evolutions by id.

        Returns:
            None if the move is legal together with every previously checked move,
            otherwise the problem found.
        """
        collected = self._collect(move, species, context, resolve)
        if collected is None:
            return None

        sources, sources_before = collected
        if not sources and not sources_before:
            return LearnsetProblem(move_id=move.id, reason="invalid")

        if not context.restricted:
            context.sources = sorted(sources)
            context.sources_before = sources_before
            context.restricted = True
            return None

        # Having sources_before is the same as having every source of those generations
        kept = [src for src in context.sources if src in sources or source_gen(src) <= sources_before]
        kept += [
            src for src in sources if src not in context.sources and source_gen(src) <= context.sources_before
        ]
        merged_before = min(context.sources_before, sources_before)

        if not kept and not merged_before:
            logger.debug("%s: %s incompatible with %s", species.id, move.id, context.sources)
            return LearnsetProblem(move_id=move.id, reason="incompatible")

        context.sources = sorted(kept)
        context.sources_before = merged_before
        return None
