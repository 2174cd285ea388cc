"""
Board Coordinates

A Coordinate names one cell of the 8x8 grid.

Orientation:
    - x = file, 0 = A-file, 7 = H-file
    - y = row,  0 = rank 8 (Black's back rank), 7 = rank 1 (White's back rank)

This is the same orientation as the (row, col) layout used by
board_to_array(): row == y and col == x.
"""

from dataclasses import dataclass

import chess

BOARD_SIZE = 8


def is_on_board(x: int, y: int) -> bool:
    """Return True if (x, y) lies inside the 8x8 grid."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(frozen=True)
class Coordinate:
    """
    Immutable board cell.

    Attributes:
        x: File index (0-7)
        y: Row index (0-7), 0 is rank 8

    Raises:
        ValueError: If either axis is outside [0, 7]
    """

    x: int
    y: int

    def __post_init__(self):
        if not is_on_board(self.x, self.y):
            raise ValueError(f"Coordinate out of range: ({self.x},{self.y})")

    @property
    def square(self) -> chess.Square:
        """python-chess square index for this cell."""
        return chess.square(self.x, BOARD_SIZE - 1 - self.y)

    @property
    def square_name(self) -> str:
        """Algebraic name, e.g. Coordinate(4, 6) -> 'e2'."""
        return chess.square_name(self.square)

    @classmethod
    def from_square(cls, square: chess.Square) -> "Coordinate":
        return cls(chess.square_file(square), BOARD_SIZE - 1 - chess.square_rank(square))

    @classmethod
    def from_square_name(cls, name: str) -> "Coordinate":
        """
        Parse an algebraic square name.

        Raises:
            ValueError: If name is not a valid square
        """
        return cls.from_square(chess.parse_square(name))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
