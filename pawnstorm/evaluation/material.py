"""
Material and Mobility Evaluation

score = material + mobility

    material: sum of the signed piece values on the board
              (Pawn 1, Knight 2, Bishop 3, Rook 5, Queen 9, King 200;
              Black values negative, so both kings cancel out)
    mobility: (legal White moves - legal Black moves) / 10, truncated
              toward zero

Mobility is the expensive term: it runs the legality filter for every piece
on the board, which clones the board once per pseudo-legal move.
"""

from typing import TYPE_CHECKING

import chess

from pawnstorm.board.representation import board_to_array
from pawnstorm.evaluation.base import Evaluator

if TYPE_CHECKING:
    from pawnstorm.board.chessboard import Board

MOBILITY_WEIGHT = 10  # mobility counts 1/10 of a pawn per extra legal move


def material_score(board: "Board") -> int:
    """Signed sum of every piece value."""
    return int(board_to_array(board).sum())


def legal_move_count(board: "Board", color: chess.Color) -> int:
    return sum(len(board.reduce_and_get_moves(piece)) for piece in board.get_color_pieces(color))


def mobility_score(board: "Board") -> int:
    """
    Legal move difference scaled by 1/MOBILITY_WEIGHT.

    Raises:
        MissingKingError: If either king is missing
    """
    difference = legal_move_count(board, chess.WHITE) - legal_move_count(board, chess.BLACK)
    # Truncate toward zero, not toward -inf
    return int(difference / MOBILITY_WEIGHT)


class MaterialMobilityEvaluator(Evaluator):
    """Material balance plus scaled mobility balance."""

    def evaluate(self, board: "Board") -> int:
        return material_score(board) + mobility_score(board)
