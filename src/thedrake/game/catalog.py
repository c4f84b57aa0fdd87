"""Standard troop set and game setup for The Drake.

Offsets are given from BLUE's point of view: ``(x, y)`` with positive ``y``
pointing away from BLUE's home row.
"""

from collections.abc import Iterable

from thedrake.game.actions import shift, slide, strike
from thedrake.game.army import Army
from thedrake.game.board import Board, BoardTile, TileAt
from thedrake.game.positions import Offset, PlayingSide
from thedrake.game.state import GameState
from thedrake.game.troops import Troop

DRAKE = Troop(
    "Drake",
    avers_actions=(slide(1, 0), slide(-1, 0)),
    revers_actions=(slide(0, 1), slide(0, -1)),
)

CLUBMAN = Troop(
    "Clubman",
    avers_actions=(shift(1, 0), shift(-1, 0), shift(0, 1), shift(0, -1)),
    revers_actions=(shift(1, 1), shift(-1, 1), shift(1, -1), shift(-1, -1)),
)

MONK = Troop(
    "Monk",
    avers_actions=(slide(1, 1), slide(-1, 1), slide(1, -1), slide(-1, -1)),
    revers_actions=(shift(1, 0), shift(-1, 0), shift(0, 1), shift(0, -1)),
)

SPEARMAN = Troop(
    "Spearman",
    avers_actions=(shift(0, 1), strike(1, 2), strike(-1, 2)),
    revers_actions=(shift(1, 1), shift(-1, 1), shift(0, -1)),
    avers_pivot=Offset(1, 2),
)

SWORDSMAN = Troop(
    "Swordsman",
    avers_actions=(strike(1, 0), strike(-1, 0), shift(0, 1), shift(0, -1)),
    revers_actions=(shift(1, 0), shift(-1, 0), shift(0, -1)),
)

ARCHER = Troop(
    "Archer",
    avers_actions=(shift(1, 0), shift(-1, 0), shift(0, -1)),
    revers_actions=(shift(0, 1), strike(-1, 1), strike(1, 1), strike(2, 0), strike(-2, 0)),
)

TROOPS_BY_NAME: dict[str, Troop] = {
    troop.name: troop for troop in (DRAKE, CLUBMAN, MONK, SPEARMAN, SWORDSMAN, ARCHER)
}

# Order in which each side's troops are placed; the Drake is always the leader
STANDARD_STACK: tuple[Troop, ...] = (DRAKE, CLUBMAN, CLUBMAN, MONK, SPEARMAN, SWORDSMAN, ARCHER)


def sample_board(dimension: int = 4, mountains: Iterable[str] = ("b2",)) -> Board:
    """Create a board with mountains at the given display positions."""
    board = Board(dimension)
    factory = board.position_factory()
    return board.with_tiles(*(TileAt(factory.parse(pos), BoardTile.MOUNTAIN) for pos in mountains))


class StandardDrakeSetup:
    """Creates games with the standard troop set."""

    def __init__(self, stack: Iterable[Troop] = STANDARD_STACK) -> None:
        self.stack = tuple(stack)

    def troop(self, name: str) -> Troop:
        """Look up a troop of the standard set by name.

        Raises:
            KeyError: If there is no such troop
        """
        return TROOPS_BY_NAME[name]

    def start_state(self, board: Board) -> GameState:
        """Create a game in which both sides start with the full stack."""
        return GameState.new_game(
            board,
            Army.create(PlayingSide.BLUE, self.stack),
            Army.create(PlayingSide.ORANGE, self.stack),
        )
