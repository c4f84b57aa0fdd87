"""Troop actions: the per-piece rules that generate candidate moves.

An action is a kind (shift, slide or strike) plus an offset authored from
BLUE's point of view. Actions never change the state; they only ask the
state's legality predicates which moves are possible.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from thedrake.game.moves import CaptureOnly, Move, StepAndCapture, StepOnly
from thedrake.game.positions import BoardPos, Offset, PlayingSide, TilePos

if TYPE_CHECKING:
    from thedrake.game.state import GameState


class ActionKind(Enum):
    """Kinds of troop actions."""

    SHIFT = "shift"  # One step; steps or captures by stepping
    SLIDE = "slide"  # Repeated steps in one direction
    STRIKE = "strike"  # Captures at a distance without moving


@dataclass(frozen=True)
class TroopAction:
    """A single movement rule of a troop face.

    Attributes:
        kind: How the offset is applied
        offset: Direction relative to the troop, seen from BLUE's side
    """

    kind: ActionKind
    offset: Offset

    def moves_from(self, origin: BoardPos, side: PlayingSide, state: "GameState") -> list[Move]:
        """Generate the moves this action allows for a troop at ``origin``.

        Args:
            origin: Position of the troop
            side: Side owning the troop (ORANGE mirrors the offset)
            state: State the moves are generated against

        Returns:
            List of legal moves, possibly empty
        """
        match self.kind:
            case ActionKind.SHIFT:
                return _shift_moves(self.offset, origin, side, state)
            case ActionKind.SLIDE:
                return _slide_moves(self.offset, origin, side, state)
            case ActionKind.STRIKE:
                return _strike_moves(self.offset, origin, side, state)


def shift(x: int, y: int) -> TroopAction:
    return TroopAction(ActionKind.SHIFT, Offset(x, y))


def slide(x: int, y: int) -> TroopAction:
    return TroopAction(ActionKind.SLIDE, Offset(x, y))


def strike(x: int, y: int) -> TroopAction:
    return TroopAction(ActionKind.STRIKE, Offset(x, y))


def _shift_moves(
    offset: Offset,
    origin: BoardPos,
    side: PlayingSide,
    state: "GameState",
) -> list[Move]:
    target = origin.step_by_playing_side(offset, side)
    if state.can_step(origin, target):
        return [StepOnly(origin, target)]
    if state.can_capture(origin, target):
        return [StepAndCapture(origin, target)]
    return []


def _slide_moves(
    offset: Offset,
    origin: BoardPos,
    side: PlayingSide,
    state: "GameState",
) -> list[Move]:
    """Step repeatedly until the first cell that cannot be stepped on.

    The capture check is made against the first cell of the run, not the
    cell where the run stops.
    """
    result: list[Move] = []
    target = origin.step_by_playing_side(offset, side)
    current: TilePos = target
    while state.can_step(origin, current):
        result.append(StepOnly(origin, current))
        current = current.step_by_playing_side(offset, side)
    if state.can_capture(origin, target):
        result.append(StepAndCapture(origin, target))
    return result


def _strike_moves(
    offset: Offset,
    origin: BoardPos,
    side: PlayingSide,
    state: "GameState",
) -> list[Move]:
    target = origin.step_by_playing_side(offset, side)
    if state.can_capture(origin, target):
        return [CaptureOnly(origin, target)]
    return []
