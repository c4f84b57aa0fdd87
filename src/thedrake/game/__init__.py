"""Rules engine for The Drake."""

from thedrake.game.actions import ActionKind, TroopAction, shift, slide, strike
from thedrake.game.army import Army
from thedrake.game.board import Board, BoardTile, TileAt
from thedrake.game.catalog import (
    STANDARD_STACK,
    TROOPS_BY_NAME,
    StandardDrakeSetup,
    sample_board,
)
from thedrake.game.errors import (
    GameError,
    IllegalArgumentError,
    IllegalGameStateError,
    IllegalMoveError,
    UnsupportedOperationError,
)
from thedrake.game.moves import (
    BoardMove,
    CaptureOnly,
    Move,
    PlaceFromStack,
    StepAndCapture,
    StepOnly,
)
from thedrake.game.positions import (
    OFF_BOARD,
    BoardPos,
    OffBoard,
    Offset,
    PlayingSide,
    PositionFactory,
    TilePos,
)
from thedrake.game.snapshot import GameSnapshot
from thedrake.game.state import GameResult, GameState, Tile
from thedrake.game.troops import BoardTroops, Troop, TroopFace, TroopTile
from thedrake.game.valid_moves import ValidMoves

__all__ = [
    # Geometry
    "Offset",
    "BoardPos",
    "OffBoard",
    "OFF_BOARD",
    "TilePos",
    "PositionFactory",
    "PlayingSide",
    # Board
    "Board",
    "BoardTile",
    "TileAt",
    # Actions
    "ActionKind",
    "TroopAction",
    "shift",
    "slide",
    "strike",
    # Troops
    "Troop",
    "TroopFace",
    "TroopTile",
    "BoardTroops",
    "Army",
    # Moves
    "Move",
    "BoardMove",
    "PlaceFromStack",
    "StepOnly",
    "StepAndCapture",
    "CaptureOnly",
    "ValidMoves",
    # State
    "GameState",
    "GameResult",
    "GameSnapshot",
    "Tile",
    # Setup
    "StandardDrakeSetup",
    "STANDARD_STACK",
    "TROOPS_BY_NAME",
    "sample_board",
    # Errors
    "GameError",
    "IllegalArgumentError",
    "IllegalMoveError",
    "IllegalGameStateError",
    "UnsupportedOperationError",
]
