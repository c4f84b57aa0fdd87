"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable
from types import MappingProxyType

# Run tests against the default configuration regardless of the local environment
for _name in list(os.environ):
    if _name.startswith("THEDRAKE_"):
        del os.environ[_name]

from thedrake.settings import get_settings  # noqa: E402

get_settings.cache_clear()

import pytest  # noqa: E402

from thedrake.game import (  # noqa: E402
    OFF_BOARD,
    Army,
    Board,
    BoardTroops,
    GameState,
    PlayingSide,
    PositionFactory,
    StandardDrakeSetup,
    Troop,
    TroopTile,
)

StateBuilder = Callable[..., GameState]


@pytest.fixture
def pos() -> PositionFactory:
    """Position factory for a 4x4 board."""
    return PositionFactory(4)


@pytest.fixture
def board() -> Board:
    """Empty 4x4 board."""
    return Board(4)


@pytest.fixture
def opened_state(board: Board, pos: PositionFactory) -> GameState:
    """Standard game with both leaders and their guards placed; BLUE on turn.

    BLUE: Drake a1 (leader), Clubman a2, Clubman b1
    ORANGE: Drake d4 (leader), Clubman d3, Clubman c4
    """
    return (
        StandardDrakeSetup()
        .start_state(board)
        .place_from_stack(pos.parse("a1"))
        .place_from_stack(pos.parse("d4"))
        .place_from_stack(pos.parse("a2"))
        .place_from_stack(pos.parse("d3"))
        .place_from_stack(pos.parse("b1"))
        .place_from_stack(pos.parse("c4"))
    )


def _board_troops(
    side: PlayingSide,
    troops: dict[str, Troop],
    leader: str | None,
    factory: PositionFactory,
) -> BoardTroops:
    troop_map = {factory.parse(key): TroopTile(troop, side) for key, troop in troops.items()}
    leader_position = factory.parse(leader) if leader is not None else OFF_BOARD
    guards = 2 if leader is not None else 0
    return BoardTroops(side, MappingProxyType(troop_map), leader_position, guards)


@pytest.fixture
def build_state() -> StateBuilder:
    """Build a mid-game state with troops at given positions.

    Both sides are past the guard phase. The leader defaults to the first
    troop listed for each side.
    """

    def _build(
        blue: dict[str, Troop],
        orange: dict[str, Troop],
        side_on_turn: PlayingSide = PlayingSide.BLUE,
        board: Board | None = None,
        blue_leader: str | None = None,
        orange_leader: str | None = None,
    ) -> GameState:
        board = board or Board(4)
        factory = board.position_factory()
        blue_leader = blue_leader or next(iter(blue), None)
        orange_leader = orange_leader or next(iter(orange), None)
        return GameState(
            board=board,
            blue_army=Army(_board_troops(PlayingSide.BLUE, blue, blue_leader, factory)),
            orange_army=Army(_board_troops(PlayingSide.ORANGE, orange, orange_leader, factory)),
            side_on_turn=side_on_turn,
        )

    return _build
