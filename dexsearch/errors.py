# ABOUTME: Exception hierarchy for query parsing, dex lookups, and internal failures.
# ABOUTME: Every message is a complete, user-facing reply.


class DexSearchError(Exception):
    """Base class for every error a dex command can raise."""


class InputParseError(DexSearchError):
    """The command arguments could not be turned into a valid query."""


class EmptyQuery(InputParseError):
    def __init__(self) -> None:
        super().__init__("No search parameters were given.")


class UnrecognizedToken(InputParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'"{token}" could not be found in any of the search categories.')


class MoveLimitExceeded(InputParseError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"Specify a maximum of {limit} moves.")


class AbilityLimitExceeded(InputParseError):
    def __init__(self) -> None:
        super().__init__("Specify only one ability.")


class TypeLimitExceeded(InputParseError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"Specify a maximum of {limit} types.")


class EmptyQueryWithAllFlag(InputParseError):
    def __init__(self) -> None:
        super().__init__('No search parameters other than "all" were found.')


class MissingArgument(InputParseError):
    """A command was called without an argument it cannot do without."""


class BroadcastRejected(InputParseError):
    def __init__(self) -> None:
        super().__init__('A search with the parameter "all" cannot be broadcast.')


class DexLookupError(DexSearchError, LookupError):
    """A name did not resolve to any record of the dataset snapshot."""

    kind = "Entry"

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f'{self.kind} "{name}" not found.')


class UnknownMove(DexLookupError):
    kind = "Move"


class UnknownAbility(DexLookupError):
    kind = "Ability"


class UnknownType(DexLookupError):
    kind = "Type"


class UnknownSpecies(DexLookupError):
    kind = "Pokemon"


class UnknownTarget(DexLookupError):
    """Neither a species nor a type combination matched."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"{name} isn't a recognized type or pokemon.")


class UnknownCombination(DexLookupError):
    """Two matchup arguments that are neither species + type nor type + type."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(first, f"'{first}' and '{second}' aren't a recognized combination.")
        self.second = second


class InternalInconsistency(DexSearchError):
    """Category bookkeeping no longer matches its members."""
