"""ABOUTME: Text-command processor dispatching "/cmd args" and "!cmd args" lines to the dex commands.
ABOUTME: Turns every command into exactly one reply, or none when errors go to the caller's error sink."""

import logging
import random
import re
from collections.abc import Callable
from dataclasses import dataclass

from dexsearch.data.holder import DexHolder
from dexsearch.data.models import LearnsetContext
from dexsearch.errors import BroadcastRejected, DexSearchError, InputParseError, InternalInconsistency, MissingArgument
from dexsearch.lookups.learn import learn
from dexsearch.lookups.matchup import effectiveness, weakness
from dexsearch.search.engine import DexSearchEngine

logger = logging.getLogger(__name__)

COMMAND_PATTERN = re.compile(r"^([/!])(\w+)(?:\s+(.*))?$", re.DOTALL)

GENERIC_FAILURE_MESSAGE = "Something went wrong while running this command."

ALIASES = {
    "ds": "dexsearch",
    "learnset": "learn",
    "learnall": "learn",
    "learn5": "learn",
    "g6learn": "learn",
    "weak": "weakness",
    "matchup": "effectiveness",
}

ErrorSink = Callable[[str], None]


class UnknownCommand(InputParseError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The command '/{name}' was unrecognized.")


@dataclass(frozen=True)
class Reply:
    """One reply to a command.

    Attributes:
        text: Reply text, possibly carrying reply markup.
        markup: True when text uses the markup vocabulary and should be shown as a box.
    """

    text: str
    markup: bool = False


@dataclass(frozen=True)
class Command:
    """A parsed command line.

    Attributes:
        name: The command name as typed, lower-cased (may be an alias).
        target: Everything after the command name.
        broadcast: True for "!cmd", whose reply is shown to everyone.
    """

    name: str
    target: str
    broadcast: bool = False


def parse_command(line: str) -> Command | None:
    """Parse "/name target" or "!name target"; None if the line is not a command."""
    match = COMMAND_PATTERN.match(line.strip())
    if not match:
        return None
    prefix, name, target = match.groups()
    return Command(name=name.lower(), target=(target or "").strip(), broadcast=prefix == "!")


class CommandProcessor:
    """Runs dex commands against the snapshot currently held by a DexHolder.

    Args:
        holder: Holds the dataset snapshot.
        rng: Random generator for sampling search results.
        error_sink: When given, error messages are passed to it and handle()
            returns None instead of an error reply.
    """

    def __init__(
        self,
        holder: DexHolder,
        rng: random.Random | None = None,
        error_sink: ErrorSink | None = None,
    ) -> None:
        self.holder = holder
        self.search_engine = DexSearchEngine(holder, rng)
        self.error_sink = error_sink
        self._handlers: dict[str, Callable[[Command], Reply]] = {
            "dexsearch": self._dexsearch,
            "learn": self._learn,
            "weakness": self._weakness,
            "effectiveness": self._effectiveness,
        }

    @property
    def command_names(self) -> list[str]:
        """Every accepted command name, aliases included."""
        return sorted([*self._handlers, *ALIASES])

    def handle(self, line: str) -> Reply | None:
        """Run one command line.

        Returns:
            The reply, or None when the line was not a command or the error
            was reported through the error sink.
        """
        command = parse_command(line)
        if command is None:
            return None

        try:
            handler = self._handlers.get(ALIASES.get(command.name, command.name))
            if handler is None:
                raise UnknownCommand(command.name)
            return handler(command)
        except InternalInconsistency:
            logger.exception("Internal failure running %r", line)
            return self._error(GENERIC_FAILURE_MESSAGE)
        except DexSearchError as e:
            logger.info("Rejected %r: %s", line, e)
            return self._error(str(e))

    def _error(self, message: str) -> Reply | None:
        if self.error_sink is not None:
            self.error_sink(message)
            return None
        return Reply(text=message)

    def _dexsearch(self, command: Command) -> Reply:
        if command.broadcast and self.search_engine.query_requests_all(command.target):
            raise BroadcastRejected
        return Reply(text=self.search_engine.evaluate(command.target), markup=True)

    def _learn(self, command: Command) -> Reply:
        if not command.target:
            raise MissingArgument("Usage: /learn [pokemon], [move, move, ...]")

        context = LearnsetContext()
        if command.name == "learn5":
            context.level = 5
        elif command.name == "g6learn":
            context.no_transfer = True

        species_name, *move_names = command.target.split(",")
        text = learn(
            self.holder.snapshot(),
            species_name,
            move_names,
            context=context,
            exhaustive=command.name == "learnall",
        )
        return Reply(text=text, markup=True)

    def _weakness(self, command: Command) -> Reply:
        if not command.target:
            raise MissingArgument("Usage: /weakness [pokemon or type(s)]")
        return Reply(text=weakness(self.holder.snapshot(), command.target), markup=True)

    def _effectiveness(self, command: Command) -> Reply:
        return Reply(text=effectiveness(self.holder.snapshot(), command.target), markup=True)
