"""Army: everything one side owns."""

from collections.abc import Sequence
from dataclasses import dataclass

from thedrake.game.errors import IllegalArgumentError, IllegalGameStateError
from thedrake.game.positions import OFF_BOARD, BoardPos, PlayingSide, TilePos
from thedrake.game.troops import BoardTroops, Troop


@dataclass(frozen=True)
class Army:
    """One side's placed troops together with its stack and captured pile.

    Attributes:
        board_troops: Troops on the board
        stack: Troops not yet placed; the first one is placed next
        captured: Enemy troops this side has captured
    """

    board_troops: BoardTroops
    stack: tuple[Troop, ...] = ()
    captured: tuple[Troop, ...] = ()

    @classmethod
    def create(cls, side: PlayingSide, stack: Sequence[Troop]) -> "Army":
        """Create an army with an empty board and the given stack."""
        return cls(BoardTroops(side), tuple(stack), ())

    @property
    def side(self) -> PlayingSide:
        return self.board_troops.side

    def place_from_stack(self, target: TilePos) -> "Army":
        """Place the first troop of the stack.

        Raises:
            IllegalArgumentError: If the target is OFF_BOARD
            IllegalGameStateError: If the stack is empty or the target is occupied
        """
        if target == OFF_BOARD:
            raise IllegalArgumentError("Cannot place a troop off the board")
        if not self.stack:
            raise IllegalGameStateError(f"{self.side} has no troops left in the stack")
        if self.board_troops.at(target) is not None:
            raise IllegalGameStateError(f"Target position {target} is already occupied")

        return Army(
            self.board_troops.place_troop(self.stack[0], target),
            self.stack[1:],
            self.captured,
        )

    def troop_step(self, origin: BoardPos, target: BoardPos) -> "Army":
        return Army(self.board_troops.troop_step(origin, target), self.stack, self.captured)

    def troop_flip(self, origin: BoardPos) -> "Army":
        return Army(self.board_troops.troop_flip(origin), self.stack, self.captured)

    def remove_troop(self, target: BoardPos) -> "Army":
        return Army(self.board_troops.remove_troop(target), self.stack, self.captured)

    def capture(self, troop: Troop) -> "Army":
        """Add an enemy troop to the captured pile."""
        return Army(self.board_troops, self.stack, self.captured + (troop,))
