"""
Chess Pieces

A piece carries its color, its kind and where it currently stands. Kinds are
an IntEnum whose values are the material weights used by the evaluator:

    Pawn = 1, Knight = 2, Bishop = 3, Rook = 5, Queen = 9, King = 200

The signed value (positive for White, negative for Black) is derived from
kind and color instead of being stored.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import chess

from pawnstorm.board.coordinate import Coordinate


class PieceKind(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 5
    QUEEN = 9
    KING = 200

    @classmethod
    def from_value(cls, value: int) -> "PieceKind":
        """
        Resolve a (possibly signed) piece value to its kind.

        Raises:
            ValueError: If abs(value) is not one of the six piece values
        """
        return cls(abs(value))


# Mapping between our kinds and python-chess piece types
KIND_TO_PIECE_TYPE = {
    PieceKind.PAWN: chess.PAWN,
    PieceKind.KNIGHT: chess.KNIGHT,
    PieceKind.BISHOP: chess.BISHOP,
    PieceKind.ROOK: chess.ROOK,
    PieceKind.QUEEN: chess.QUEEN,
    PieceKind.KING: chess.KING,
}
PIECE_TYPE_TO_KIND = {v: k for k, v in KIND_TO_PIECE_TYPE.items()}


@dataclass
class Piece:
    """
    A piece on the board.

    Attributes:
        color: chess.WHITE (True) or chess.BLACK (False)
        kind: PieceKind
        location: Current Coordinate, updated by Board.move_piece()
        handle: Opaque visual handle owned by the presentation layer
    """

    color: chess.Color
    kind: PieceKind
    location: Coordinate
    handle: Any = None

    @property
    def is_white(self) -> bool:
        return self.color == chess.WHITE

    @property
    def value(self) -> int:
        """Signed value: positive for White, negative for Black."""
        return int(self.kind) if self.color == chess.WHITE else -int(self.kind)

    @property
    def symbol(self) -> str:
        """FEN letter for this piece (uppercase White)."""
        return chess.Piece(KIND_TO_PIECE_TYPE[self.kind], self.color).symbol()

    def copy(self) -> "Piece":
        # Coordinates are immutable, so sharing location is safe
        return Piece(self.color, self.kind, self.location, self.handle)
