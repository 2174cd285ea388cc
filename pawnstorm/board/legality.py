"""
Legality Filter

A pseudo-legal move is legal if, once played, the mover's own king is not
attacked. Each candidate is tried on a copy of the board.
"""

from typing import TYPE_CHECKING, Iterable, List

from pawnstorm.board.coordinate import Coordinate
from pawnstorm.board.piece import Piece

if TYPE_CHECKING:
    from pawnstorm.board.chessboard import Board


def filter_legal(board: "Board", piece: Piece, candidates: Iterable[Coordinate]) -> List[Coordinate]:
    """
    Keep the candidates that do not leave `piece`'s king in check.

    Args:
        board: Current board (not modified)
        piece: Piece being moved
        candidates: Pseudo-legal destinations, in generation order

    Returns:
        Legal destinations, order preserved

    Raises:
        MissingKingError: If `piece`'s side has no king
    """
    origin = piece.location
    legal = []
    for move in candidates:
        copy = board.copy()
        copy.move_piece(origin.x, origin.y, move.x, move.y)
        if not copy.is_check(piece.color):
            legal.append(move)
    return legal
