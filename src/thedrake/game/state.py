"""Game state for The Drake.

The state is immutable. Every command (``step_only``, ``place_from_stack``,
``resign``, ...) validates itself against the legality predicates and
returns a new state; the state it was called on is never modified.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, NoReturn, TypeAlias

from thedrake.game.army import Army
from thedrake.game.board import Board, BoardTile
from thedrake.game.errors import IllegalGameStateError, IllegalMoveError
from thedrake.game.positions import OFF_BOARD, BoardPos, PlayingSide, TilePos
from thedrake.game.snapshot import GameSnapshot
from thedrake.game.troops import Troop, TroopTile

logger = logging.getLogger(__name__)

Tile: TypeAlias = TroopTile | BoardTile


class GameResult(Enum):
    """Game lifecycle result. VICTORY and DRAW are terminal."""

    IN_PLAY = "IN_PLAY"
    VICTORY = "VICTORY"
    DRAW = "DRAW"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GameState:
    """Complete state of a game of The Drake.

    Attributes:
        board: Board terrain
        blue_army: BLUE's army
        orange_army: ORANGE's army
        side_on_turn: Side allowed to act next
        result: Game result
        winner: Winning side once the result is VICTORY, otherwise None
    """

    board: Board
    blue_army: Army
    orange_army: Army
    side_on_turn: PlayingSide = PlayingSide.BLUE
    result: GameResult = GameResult.IN_PLAY
    winner: PlayingSide | None = None

    @classmethod
    def new_game(cls, board: Board, blue_army: Army, orange_army: Army) -> "GameState":
        """Create a game with BLUE on turn."""
        return cls(board=board, blue_army=blue_army, orange_army=orange_army)

    def army(self, side: PlayingSide) -> Army:
        return self.blue_army if side is PlayingSide.BLUE else self.orange_army

    @property
    def army_on_turn(self) -> Army:
        return self.army(self.side_on_turn)

    @property
    def army_not_on_turn(self) -> Army:
        return self.army(self.side_on_turn.opposite)

    @property
    def is_in_play(self) -> bool:
        return self.result is GameResult.IN_PLAY

    def tile_at(self, pos: TilePos) -> Tile:
        """Get what occupies a position: a troop of either side, else the terrain."""
        blue_troop = self.blue_army.board_troops.at(pos)
        if blue_troop is not None:
            return blue_troop
        orange_troop = self.orange_army.board_troops.at(pos)
        if orange_troop is not None:
            return orange_troop
        return self.board.at(pos)

    # Legality predicates

    def _can_step_from(self, origin: TilePos) -> bool:
        if origin == OFF_BOARD:
            return False
        if not self.is_in_play or not isinstance(self.tile_at(origin), TroopTile):
            return False
        if self.army_not_on_turn.board_troops.at(origin) is not None:
            return False
        troops = self.army_on_turn.board_troops
        return (
            troops.at(origin) is not None
            and troops.is_leader_placed
            and not troops.is_placing_guards
        )

    def _can_step_to(self, target: TilePos) -> bool:
        if target == OFF_BOARD or not self.is_in_play:
            return False
        match self.tile_at(target):
            case TroopTile():
                return False
            case BoardTile.EMPTY:
                return True
            case BoardTile.MOUNTAIN:
                return False

    def _can_capture_on(self, target: TilePos) -> bool:
        if target == OFF_BOARD or not self.is_in_play:
            return False
        return self.army_not_on_turn.board_troops.at(target) is not None

    def can_step(self, origin: TilePos, target: TilePos) -> bool:
        """Check whether the troop at ``origin`` may move onto an empty ``target``."""
        return self._can_step_from(origin) and self._can_step_to(target)

    def can_capture(self, origin: TilePos, target: TilePos) -> bool:
        """Check whether the troop at ``origin`` may capture the enemy at ``target``."""
        return self._can_step_from(origin) and self._can_capture_on(target)

    def can_place_from_stack(self, target: TilePos) -> bool:
        """Check whether the side on turn may place its next stack troop on ``target``.

        The leader goes on the side's home row (row 1 for BLUE, the last row
        for ORANGE), the guards next to the leader, and every later troop next
        to any troop of the same side.
        """
        if target == OFF_BOARD:
            return False
        if not self.is_in_play or not self.army_on_turn.stack or not self._can_step_to(target):
            return False

        troops = self.army_on_turn.board_troops
        if not troops.is_leader_placed:
            home_row = 1 if self.side_on_turn is PlayingSide.BLUE else self.board.dimension
            return target.row == home_row
        if troops.is_placing_guards:
            return target.is_next_to(troops.leader_position)
        return any(target.is_next_to(pos) for pos in troops.troop_positions)

    # Commands

    def step_only(self, origin: BoardPos, target: BoardPos) -> "GameState":
        """Move a troop of the side on turn onto an empty cell."""
        if not self.can_step(origin, target):
            self._reject_board_move(f"{self.side_on_turn} cannot step {origin}->{target}")

        logger.debug(f"{self.side_on_turn} steps {origin}->{target}")
        return self._next_turn(
            self.army_on_turn.troop_step(origin, target),
            self.army_not_on_turn,
            GameResult.IN_PLAY,
        )

    def step_and_capture(self, origin: BoardPos, target: BoardPos) -> "GameState":
        """Move a troop onto an enemy troop and capture it.

        Capturing the enemy leader wins the game.
        """
        if not self.can_capture(origin, target):
            self._reject_board_move(f"{self.side_on_turn} cannot capture {origin}->{target}")

        defender, captured, result = self._capture_on(target)
        logger.debug(f"{self.side_on_turn} steps {origin}->{target} capturing {captured}")
        return self._next_turn(
            self.army_on_turn.troop_step(origin, target).capture(captured),
            defender,
            result,
        )

    def capture_only(self, origin: BoardPos, target: BoardPos) -> "GameState":
        """Capture an enemy troop without moving; the striking troop flips.

        Capturing the enemy leader wins the game.
        """
        if not self.can_capture(origin, target):
            self._reject_board_move(f"{self.side_on_turn} cannot capture {origin}->{target}")

        defender, captured, result = self._capture_on(target)
        logger.debug(f"{self.side_on_turn} strikes {origin}->{target} capturing {captured}")
        return self._next_turn(
            self.army_on_turn.troop_flip(origin).capture(captured),
            defender,
            result,
        )

    def place_from_stack(self, target: BoardPos) -> "GameState":
        """Place the next stack troop of the side on turn."""
        if not self.can_place_from_stack(target):
            self._reject_placement(f"{self.side_on_turn} cannot place a troop on {target}")

        logger.debug(f"{self.side_on_turn} places {self.army_on_turn.stack[0]} on {target}")
        return self._next_turn(
            self.army_on_turn.place_from_stack(target),
            self.army_not_on_turn,
            GameResult.IN_PLAY,
        )

    def resign(self) -> "GameState":
        """Give up; the side not on turn wins."""
        self._check_in_play()
        logger.debug(f"{self.side_on_turn} resigns")
        return self._next_turn(
            self.army_on_turn,
            self.army_not_on_turn,
            GameResult.VICTORY,
            winner=self.side_on_turn.opposite,
        )

    def draw(self) -> "GameState":
        """End the game in a draw. The side on turn does not change."""
        self._check_in_play()
        logger.debug(f"Game drawn with {self.side_on_turn} on turn")
        return GameState(
            board=self.board,
            blue_army=self.blue_army,
            orange_army=self.orange_army,
            side_on_turn=self.side_on_turn,
            result=GameResult.DRAW,
        )

    def _check_in_play(self) -> None:
        if not self.is_in_play:
            raise IllegalGameStateError(f"The game is already over ({self.result})")

    def _reject_board_move(self, message: str) -> NoReturn:
        """Raise the error explaining why a board move is not legal."""
        self._check_in_play()
        troops = self.army_on_turn.board_troops
        if not troops.is_leader_placed:
            raise IllegalGameStateError(f"{self.side_on_turn} has not placed its leader yet")
        if troops.is_placing_guards:
            raise IllegalGameStateError(f"{self.side_on_turn} is still placing guards")
        raise IllegalMoveError(message)

    def _reject_placement(self, message: str) -> NoReturn:
        """Raise the error explaining why a placement is not legal."""
        self._check_in_play()
        if not self.army_on_turn.stack:
            raise IllegalGameStateError(f"{self.side_on_turn} has no troops left in the stack")
        raise IllegalMoveError(message)

    def _capture_on(self, target: BoardPos) -> tuple[Army, Troop, GameResult]:
        """Remove the defender's troop at ``target``.

        Returns:
            Tuple of (defender's new army, captured troop, resulting game result)
        """
        defender = self.army_not_on_turn
        tile = defender.board_troops.troop_map[target]
        result = GameResult.IN_PLAY
        if defender.board_troops.leader_position == target:
            result = GameResult.VICTORY
        return defender.remove_troop(target), tile.troop, result

    def _next_turn(
        self,
        mover: Army,
        opponent: Army,
        result: GameResult,
        winner: PlayingSide | None = None,
    ) -> "GameState":
        """Build the state after ``mover`` acted; ``opponent`` goes on turn."""
        if result is GameResult.VICTORY and winner is None:
            winner = mover.side
        if result is GameResult.VICTORY:
            logger.info(f"{winner} wins")
        armies = {mover.side: mover, opponent.side: opponent}
        return GameState(
            board=self.board,
            blue_army=armies[PlayingSide.BLUE],
            orange_army=armies[PlayingSide.ORANGE],
            side_on_turn=opponent.side,
            result=result,
            winner=winner,
        )

    # Export

    def to_dict(self) -> dict[str, Any]:
        """Serialize the game state to a dictionary."""
        return GameSnapshot.from_state(self).model_dump(by_alias=True)

    def to_json(self) -> str:
        """Serialize the game state to compact JSON."""
        return GameSnapshot.from_state(self).model_dump_json(by_alias=True)
