"""Command line entry point.

Builds the sample game (standard setup, sample board, both leaders and
their guards placed) and prints its JSON snapshot.
"""

import argparse
import logging
import sys

from thedrake.game.catalog import sample_board
from thedrake.game.errors import GameError, IllegalMoveError
from thedrake.game.moves import PlaceFromStack
from thedrake.services.game_service import GameService, get_game_service
from thedrake.settings import get_settings

logger = logging.getLogger(__name__)

# Column letters run from a to z; the six opening placements need at least 3x3
MIN_DIMENSION = 3
MAX_DIMENSION = 26


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Logs go to stderr so that stdout only carries the snapshot
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger("thedrake").setLevel(level)


def create_sample_game(service: GameService, dimension: int, mountains: list[str]) -> str:
    """Create a game with both leaders and their guards already placed.

    Returns:
        The new game ID

    Raises:
        GameError: If the sample board or an opening placement is not legal
    """
    board = sample_board(dimension, mountains)
    factory = board.position_factory()
    last = dimension - 1
    openings = [(0, 0), (last, last), (0, 1), (last, last - 1), (1, 0), (last - 1, last)]

    game_id = service.create_game(board)
    for i, j in openings:
        result = service.make_move(game_id, PlaceFromStack(factory.pos(i, j)))
        if not result.success:
            service.remove_game(game_id)
            raise IllegalMoveError(f"Cannot set up the sample game: {result.message}")
    return game_id


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="thedrake", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--dimension",
        type=int,
        default=settings.board_dimension,
        help=f"board size (default: {settings.board_dimension})",
    )
    parser.add_argument(
        "--moves",
        action="store_true",
        help="also list the legal moves of the side on turn",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)
    if not MIN_DIMENSION <= args.dimension <= MAX_DIMENSION:
        parser.error(f"--dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}")

    logger.info(f"Creating sample game on a {args.dimension}x{args.dimension} board")
    service = get_game_service()
    try:
        game_id = create_sample_game(service, args.dimension, settings.mountains)
    except GameError as e:
        parser.error(str(e))

    print(service.get_game(game_id).to_json())

    if args.moves:
        for move in service.all_moves(game_id):
            print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())
