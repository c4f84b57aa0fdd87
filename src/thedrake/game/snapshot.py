"""One-way export of a game state to JSON.

The models mirror the exported document shape. Field names are written in
snake case and exported with camelCase aliases (``blueArmy``,
``leaderPosition``, ...). There is no loader: snapshots are for state export
only.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from thedrake.game.army import Army
from thedrake.game.board import Board
from thedrake.game.troops import BoardTroops, TroopTile

if TYPE_CHECKING:
    from thedrake.game.state import GameState


class SnapshotModel(BaseModel):
    """Base for all snapshot models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BoardSnapshot(SnapshotModel):
    """Board terrain, listed row by row."""

    dimension: int
    tiles: list[str]

    @classmethod
    def from_board(cls, board: Board) -> "BoardSnapshot":
        return cls(dimension=board.dimension, tiles=[str(tile) for tile in board.tiles_by_row()])


class TroopTileSnapshot(SnapshotModel):
    """A placed troop."""

    troop: str
    side: str
    face: str

    @classmethod
    def from_tile(cls, tile: TroopTile) -> "TroopTileSnapshot":
        return cls(troop=tile.troop.name, side=str(tile.side), face=str(tile.face))


class BoardTroopsSnapshot(SnapshotModel):
    """One side's placement ledger.

    ``troop_map`` keys are position display strings in lexicographic order.
    """

    side: str
    leader_position: str
    guards: int
    troop_map: dict[str, TroopTileSnapshot]

    @classmethod
    def from_board_troops(cls, board_troops: BoardTroops) -> "BoardTroopsSnapshot":
        by_key = {str(pos): tile for pos, tile in board_troops.troop_map.items()}
        return cls(
            side=str(board_troops.side),
            leader_position=str(board_troops.leader_position),
            guards=board_troops.guards,
            troop_map={key: TroopTileSnapshot.from_tile(by_key[key]) for key in sorted(by_key)},
        )


class ArmySnapshot(SnapshotModel):
    """One side's army."""

    board_troops: BoardTroopsSnapshot
    stack: list[str]
    captured: list[str]

    @classmethod
    def from_army(cls, army: Army) -> "ArmySnapshot":
        return cls(
            board_troops=BoardTroopsSnapshot.from_board_troops(army.board_troops),
            stack=[troop.name for troop in army.stack],
            captured=[troop.name for troop in army.captured],
        )


class GameSnapshot(SnapshotModel):
    """Complete exported game state."""

    result: str
    board: BoardSnapshot
    blue_army: ArmySnapshot
    orange_army: ArmySnapshot

    @classmethod
    def from_state(cls, state: "GameState") -> "GameSnapshot":
        return cls(
            result=str(state.result),
            board=BoardSnapshot.from_board(state.board),
            blue_army=ArmySnapshot.from_army(state.blue_army),
            orange_army=ArmySnapshot.from_army(state.orange_army),
        )
