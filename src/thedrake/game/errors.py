"""Error types raised by The Drake rules engine.

The engine never recovers locally: every violation aborts the single call
that caused it and the state the call was made on stays intact.
"""


class GameError(Exception):
    """Base class for all rules engine errors."""


class IllegalArgumentError(GameError, ValueError):
    """An argument does not make sense for the current value.

    Raised e.g. when placing onto an occupied cell or passing OFF_BOARD
    where a concrete position is required.
    """


class IllegalMoveError(IllegalArgumentError):
    """A move whose legality predicate does not hold against the state."""


class IllegalGameStateError(GameError, RuntimeError):
    """The operation is not allowed in the current phase of the game.

    Raised e.g. when moving troops before the leader and its guards are
    placed, or when acting in a game that already ended.
    """


class UnsupportedOperationError(GameError, NotImplementedError):
    """A positional accessor was invoked on the OFF_BOARD sentinel."""
