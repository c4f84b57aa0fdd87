"""Move generation entry point used by front ends."""

from thedrake.game.board import BoardTile
from thedrake.game.moves import Move, PlaceFromStack
from thedrake.game.positions import BoardPos
from thedrake.game.state import GameState
from thedrake.game.troops import TroopTile


class ValidMoves:
    """Lists the legal moves of the side on turn in a given state."""

    def __init__(self, state: GameState) -> None:
        self.state = state

    def board_moves(self, position: BoardPos) -> list[Move]:
        """Get the moves of the troop on turn at ``position``.

        Terrain and enemy troops produce no moves.
        """
        match self.state.tile_at(position):
            case TroopTile(side=side) as tile if side is self.state.side_on_turn:
                return tile.moves_from(position, self.state)
            case TroopTile() | BoardTile():
                return []

    def moves_from_stack(self) -> list[Move]:
        """Get a placement move for every position the next stack troop may go to."""
        factory = self.state.board.position_factory()
        return [
            PlaceFromStack(pos)
            for pos in factory.positions()
            if self.state.can_place_from_stack(pos)
        ]

    def all_moves(self) -> list[Move]:
        """Get every board move of the side on turn followed by the placement moves."""
        moves: list[Move] = []
        for pos in sorted(self.state.army_on_turn.board_troops.troop_positions, key=_board_order):
            moves.extend(self.board_moves(pos))
        moves.extend(self.moves_from_stack())
        return moves


def _board_order(pos: BoardPos) -> tuple[int, int]:
    return (pos.i, pos.j)
