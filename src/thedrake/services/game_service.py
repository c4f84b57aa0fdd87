"""Game service for holding the current state of running games.

The rules engine is purely functional; this service keeps the "current"
state of every game in memory and swaps it whenever a move succeeds.
"""

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime

from thedrake.game.board import Board
from thedrake.game.catalog import StandardDrakeSetup, sample_board
from thedrake.game.errors import GameError
from thedrake.game.moves import Move
from thedrake.game.positions import BoardPos
from thedrake.game.state import GameState
from thedrake.game.valid_moves import ValidMoves
from thedrake.settings import get_settings

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Result of attempting to make a move."""

    success: bool
    error: str | None = None
    message: str | None = None
    state: GameState | None = None


@dataclass
class ManagedGame:
    """A game being managed by the service.

    Attributes:
        state: The current game state
        created_at: When the game was created
        last_activity: When the game was last accessed
    """

    state: GameState
    created_at: datetime = field(default_factory=datetime.now)
    last_activity: datetime = field(default_factory=datetime.now)


def _generate_game_id() -> str:
    """Generate a unique game ID."""
    return secrets.token_urlsafe(6).upper()[:8]


class GameService:
    """Manages active games and their current state."""

    def __init__(self, setup: StandardDrakeSetup | None = None) -> None:
        self.setup = setup or StandardDrakeSetup()
        self.games: dict[str, ManagedGame] = {}

    def create_game(self, board: Board | None = None) -> str:
        """Create a new game.

        Args:
            board: Board to play on (defaults to the configured sample board)

        Returns:
            The new game ID
        """
        if board is None:
            settings = get_settings()
            board = sample_board(settings.board_dimension, settings.mountains)

        game_id = _generate_game_id()
        while game_id in self.games:
            game_id = _generate_game_id()

        self.games[game_id] = ManagedGame(state=self.setup.start_state(board))
        logger.info(f"Game {game_id} created on a {board.dimension}x{board.dimension} board")
        return game_id

    def get_game(self, game_id: str) -> GameState | None:
        """Get the current state of a game, or None if not found."""
        managed_game = self.games.get(game_id)
        if managed_game is None:
            return None

        managed_game.last_activity = datetime.now()
        return managed_game.state

    def moves_at(self, game_id: str, position: BoardPos) -> list[Move]:
        """Get the legal moves of the troop at a position (empty if the game is unknown)."""
        state = self.get_game(game_id)
        if state is None:
            return []
        return ValidMoves(state).board_moves(position)

    def stack_moves(self, game_id: str) -> list[Move]:
        """Get the legal placements of the next stack troop (empty if the game is unknown)."""
        state = self.get_game(game_id)
        if state is None:
            return []
        return ValidMoves(state).moves_from_stack()

    def all_moves(self, game_id: str) -> list[Move]:
        """Get every legal move of the side on turn (empty if the game is unknown)."""
        state = self.get_game(game_id)
        if state is None:
            return []
        return ValidMoves(state).all_moves()

    def make_move(self, game_id: str, move: Move) -> MoveResult:
        """Execute a move against the current state of a game.

        On failure the stored state is left as it was.
        """
        managed_game = self.games.get(game_id)
        if managed_game is None:
            return MoveResult(success=False, error="not_found", message="Game not found")

        try:
            new_state = move.execute(managed_game.state)
        except GameError as e:
            logger.warning(f"Move {move} rejected in game {game_id}: {e}")
            return MoveResult(success=False, error=type(e).__name__, message=str(e))

        return self._update(game_id, managed_game, new_state)

    def resign(self, game_id: str) -> MoveResult:
        """Resign on behalf of the side on turn."""
        managed_game = self.games.get(game_id)
        if managed_game is None:
            return MoveResult(success=False, error="not_found", message="Game not found")

        try:
            new_state = managed_game.state.resign()
        except GameError as e:
            return MoveResult(success=False, error=type(e).__name__, message=str(e))

        return self._update(game_id, managed_game, new_state)

    def draw(self, game_id: str) -> MoveResult:
        """End a game in a draw."""
        managed_game = self.games.get(game_id)
        if managed_game is None:
            return MoveResult(success=False, error="not_found", message="Game not found")

        try:
            new_state = managed_game.state.draw()
        except GameError as e:
            return MoveResult(success=False, error=type(e).__name__, message=str(e))

        return self._update(game_id, managed_game, new_state)

    def remove_game(self, game_id: str) -> bool:
        """Remove a game. Returns True if it existed."""
        return self.games.pop(game_id, None) is not None

    def _update(self, game_id: str, managed_game: ManagedGame, new_state: GameState) -> MoveResult:
        managed_game.state = new_state
        managed_game.last_activity = datetime.now()
        if not new_state.is_in_play:
            logger.info(f"Game {game_id} finished: {new_state.result} (winner={new_state.winner})")
        return MoveResult(success=True, state=new_state)


# Global service instance
_game_service: GameService | None = None


def get_game_service() -> GameService:
    """Get the global game service instance."""
    global _game_service
    if _game_service is None:
        _game_service = GameService()
    return _game_service
