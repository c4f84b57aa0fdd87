"""Move definitions for The Drake.

A move only carries coordinates. It is bound to a state when executed, and
executing it re-validates it against that state.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from thedrake.game.positions import BoardPos

if TYPE_CHECKING:
    from thedrake.game.state import GameState


@dataclass(frozen=True)
class PlaceFromStack:
    """Place the first troop of the mover's stack onto ``target``."""

    target: BoardPos

    def execute(self, state: "GameState") -> "GameState":
        return state.place_from_stack(self.target)

    def __str__(self) -> str:
        return f"{type(self).__name__}(->{self.target})"


@dataclass(frozen=True)
class _BoardMove:
    """A move of a troop already on the board.

    Attributes:
        origin: Position of the acting troop
        target: Position the troop steps to or strikes at
    """

    origin: BoardPos
    target: BoardPos

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.origin}->{self.target})"


@dataclass(frozen=True)
class StepOnly(_BoardMove):
    """Move a troop onto an empty cell."""

    def execute(self, state: "GameState") -> "GameState":
        return state.step_only(self.origin, self.target)


@dataclass(frozen=True)
class StepAndCapture(_BoardMove):
    """Move a troop onto an enemy troop, capturing it."""

    def execute(self, state: "GameState") -> "GameState":
        return state.step_and_capture(self.origin, self.target)


@dataclass(frozen=True)
class CaptureOnly(_BoardMove):
    """Capture an enemy troop without moving; the striking troop flips."""

    def execute(self, state: "GameState") -> "GameState":
        return state.capture_only(self.origin, self.target)


BoardMove: TypeAlias = StepOnly | StepAndCapture | CaptureOnly
Move: TypeAlias = PlaceFromStack | BoardMove
