"""Board geometry for The Drake.

Positions are addressed by a zero-based column index ``i`` and row index
``j``. For display, columns are letters starting at ``a`` and rows are
numbered from 1, so ``BoardPos(4, 0, 0)`` is shown as ``a1``.

Stepping off the grid never raises; it yields the ``OFF_BOARD`` sentinel.
Every accessor of ``OFF_BOARD`` other than equality raises
``UnsupportedOperationError``, so boundary checks read as plain position
comparisons throughout the rules code.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import NoReturn, TypeAlias

from thedrake.game.errors import IllegalArgumentError, UnsupportedOperationError


class PlayingSide(Enum):
    """The two sides of the game. BLUE always moves first."""

    BLUE = "BLUE"
    ORANGE = "ORANGE"

    def __str__(self) -> str:
        return self.value

    @property
    def opposite(self) -> "PlayingSide":
        """Get the other side."""
        return PlayingSide.ORANGE if self is PlayingSide.BLUE else PlayingSide.BLUE


@dataclass(frozen=True)
class Offset:
    """A relative (column, row) displacement.

    Attributes:
        x: Column delta
        y: Row delta (positive is towards ORANGE's home row)
    """

    x: int
    y: int

    def equals_to(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y

    def y_flipped(self) -> "Offset":
        """Mirror the offset vertically (the same move seen from the other side)."""
        return Offset(self.x, -self.y)


@dataclass(frozen=True)
class BoardPos:
    """A valid position on a square board.

    Equality and hashing only consider the coordinates, so positions built
    by different factories for the same board compare equal.

    Attributes:
        dimension: Size of the board the position belongs to
        i: Zero-based column index
        j: Zero-based row index
    """

    dimension: int = field(compare=False)
    i: int
    j: int

    @property
    def column(self) -> str:
        """Column letter used for display."""
        return chr(ord("a") + self.i)

    @property
    def row(self) -> int:
        """One-based row number used for display."""
        return self.j + 1

    def step_by(self, column_step: int, row_step: int) -> "TilePos":
        """Step by the given deltas, or return OFF_BOARD when leaving the grid."""
        new_i = self.i + column_step
        new_j = self.j + row_step
        if 0 <= new_i < self.dimension and 0 <= new_j < self.dimension:
            return BoardPos(self.dimension, new_i, new_j)
        return OFF_BOARD

    def step(self, offset: Offset) -> "TilePos":
        return self.step_by(offset.x, offset.y)

    def step_by_playing_side(self, offset: Offset, side: PlayingSide) -> "TilePos":
        """Step by an offset as seen from the given side.

        Troop actions are authored from BLUE's point of view; ORANGE uses the
        vertically mirrored offset.
        """
        if side is PlayingSide.BLUE:
            return self.step(offset)
        return self.step(offset.y_flipped())

    def neighbours(self) -> list["BoardPos"]:
        """Get the orthogonally adjacent on-board positions (right, left, up, down)."""
        result: list[BoardPos] = []
        for column_step, row_step in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            pos = self.step_by(column_step, row_step)
            if isinstance(pos, BoardPos):
                result.append(pos)
        return result

    def is_next_to(self, other: "TilePos") -> bool:
        """Check whether another position shares an edge with this one."""
        if other == OFF_BOARD:
            return False
        if self.i == other.i and abs(self.j - other.j) == 1:
            return True
        if self.j == other.j and abs(self.i - other.i) == 1:
            return True
        return False

    def equals_to(self, i: int, j: int) -> bool:
        return self.i == i and self.j == j

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


class OffBoard:
    """The position outside of the board.

    Only a single instance, ``OFF_BOARD``, exists.
    """

    _instance: "OffBoard | None" = None

    def __new__(cls) -> "OffBoard":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _unsupported(self) -> NoReturn:
        raise UnsupportedOperationError("Operation is not supported on an off-board position")

    @property
    def dimension(self) -> int:
        self._unsupported()

    @property
    def i(self) -> int:
        self._unsupported()

    @property
    def j(self) -> int:
        self._unsupported()

    @property
    def column(self) -> str:
        self._unsupported()

    @property
    def row(self) -> int:
        self._unsupported()

    def step_by(self, column_step: int, row_step: int) -> "TilePos":
        self._unsupported()

    def step(self, offset: Offset) -> "TilePos":
        self._unsupported()

    def step_by_playing_side(self, offset: Offset, side: PlayingSide) -> "TilePos":
        self._unsupported()

    def neighbours(self) -> list[BoardPos]:
        self._unsupported()

    def is_next_to(self, other: "TilePos") -> bool:
        self._unsupported()

    def equals_to(self, i: int, j: int) -> bool:
        return False

    def __str__(self) -> str:
        return "off-board"

    def __repr__(self) -> str:
        return "OFF_BOARD"


OFF_BOARD = OffBoard()

TilePos: TypeAlias = BoardPos | OffBoard


@dataclass(frozen=True)
class PositionFactory:
    """Builds positions for a board of a given dimension."""

    dimension: int

    def __post_init__(self) -> None:
        if self.dimension <= 0:
            raise IllegalArgumentError("The dimension needs to be positive.")

    def pos(self, i: int, j: int) -> BoardPos:
        """Build a position from zero-based column and row indices."""
        if not (0 <= i < self.dimension and 0 <= j < self.dimension):
            raise IllegalArgumentError(
                f"Position ({i}, {j}) is outside of a {self.dimension}x{self.dimension} board"
            )
        return BoardPos(self.dimension, i, j)

    def pos_at(self, column: str, row: int) -> BoardPos:
        """Build a position from a column letter and a one-based row number."""
        return self.pos(ord(column) - ord("a"), row - 1)

    def parse(self, text: str) -> BoardPos:
        """Build a position from its display string, e.g. ``"c3"``."""
        if len(text) < 2 or not text[1:].isdigit():
            raise IllegalArgumentError(f"Invalid position: {text!r}")
        return self.pos_at(text[0], int(text[1:]))

    def positions(self) -> Iterator[BoardPos]:
        """Iterate all positions column by column (a1, a2, ..., b1, ...)."""
        for i in range(self.dimension):
            for j in range(self.dimension):
                yield BoardPos(self.dimension, i, j)
