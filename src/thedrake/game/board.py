"""Board terrain for The Drake."""

from dataclasses import dataclass, field
from enum import Enum

from thedrake.game.errors import IllegalArgumentError
from thedrake.game.positions import BoardPos, PositionFactory, TilePos


class BoardTile(Enum):
    """Terrain of a single board cell."""

    EMPTY = "empty"  # Troops can step here
    MOUNTAIN = "mountain"  # Impassable

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TileAt:
    """A terrain override used by ``Board.with_tiles``."""

    pos: BoardPos
    tile: BoardTile


def _empty_grid(dimension: int) -> tuple[tuple[BoardTile, ...], ...]:
    return tuple(tuple(BoardTile.EMPTY for _ in range(dimension)) for _ in range(dimension))


@dataclass(frozen=True)
class Board:
    """Square grid of terrain tiles.

    Boards are immutable; ``with_tiles`` returns a modified copy.

    Attributes:
        dimension: Number of rows and columns
        tiles: Terrain indexed as ``tiles[i][j]`` (column, then row)
    """

    dimension: int
    tiles: tuple[tuple[BoardTile, ...], ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.dimension <= 0:
            raise IllegalArgumentError("The dimension needs to be positive.")
        if not self.tiles:
            object.__setattr__(self, "tiles", _empty_grid(self.dimension))

    def at(self, pos: TilePos) -> BoardTile:
        """Get the terrain at a position.

        Raises:
            UnsupportedOperationError: If ``pos`` is OFF_BOARD
        """
        return self.tiles[pos.i][pos.j]

    def with_tiles(self, *ats: TileAt) -> "Board":
        """Create a copy of the board with the given cells replaced."""
        grid = [list(column) for column in self.tiles]
        for at in ats:
            grid[at.pos.i][at.pos.j] = at.tile
        return Board(self.dimension, tuple(tuple(column) for column in grid))

    def position_factory(self) -> PositionFactory:
        """Get a position factory for this board's dimension."""
        return PositionFactory(self.dimension)

    def tiles_by_row(self) -> list[BoardTile]:
        """List all tiles row by row (a1, b1, c1, ..., a2, ...)."""
        return [self.tiles[i][j] for j in range(self.dimension) for i in range(self.dimension)]
