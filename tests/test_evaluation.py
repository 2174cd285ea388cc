"""
Unit Tests for Position Evaluation

Tests cover:
    - Starting position evaluates to 0
    - Material sums signed piece values
    - Mobility is truncated toward zero
    - The Evaluator interface is swappable
"""

import chess
import pytest

from pawnstorm.board import Board, PieceKind, board_from_fen, starting_board
from pawnstorm.evaluation import (
    Evaluator,
    MaterialMobilityEvaluator,
    material_score,
    mobility_score,
)
from pawnstorm.evaluation.material import legal_move_count


def lone_rook(color):
    """
    Kings in opposite corners plus one rook on d5.

    The rook side has 3 + 14 = 17 legal moves, the other side 3.
    """
    board = Board()
    board.add_piece(chess.BLACK, 0, 0, PieceKind.KING)
    board.add_piece(chess.WHITE, 7, 7, PieceKind.KING)
    board.add_piece(color, 3, 3, PieceKind.ROOK)
    return board


class TestMaterialMobilityEvaluator:
    """Tests for MaterialMobilityEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return MaterialMobilityEvaluator()

    def test_starting_position_is_equal(self, evaluator):
        board = starting_board()
        assert material_score(board) == 0
        assert mobility_score(board) == 0
        assert evaluator.evaluate(board) == 0, "Starting position should evaluate to 0"

    def test_starting_move_counts(self):
        board = starting_board()
        assert legal_move_count(board, chess.WHITE) == 20
        assert legal_move_count(board, chess.BLACK) == 20

    def test_missing_queen(self):
        board = board_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNB1KBNR w - - 0 1")
        assert material_score(board) == -9

    def test_kings_cancel_out(self):
        board = Board()
        board.add_piece(chess.BLACK, 0, 0, PieceKind.KING)
        board.add_piece(chess.WHITE, 7, 7, PieceKind.KING)
        assert material_score(board) == 0

    def test_mobility_truncates_toward_zero(self):
        board = lone_rook(chess.BLACK)
        assert legal_move_count(board, chess.WHITE) == 3
        assert legal_move_count(board, chess.BLACK) == 17
        # -14 / 10 truncates to -1, not -2
        assert mobility_score(board) == -1

    def test_mobility_is_symmetric(self):
        assert mobility_score(lone_rook(chess.WHITE)) == 1

    def test_score_combines_terms(self, evaluator):
        board = lone_rook(chess.BLACK)
        assert evaluator.evaluate(board) == -6
        assert board.score() == -6
        assert board.material_score() == -5
        assert board.mobility_score() == -1

    def test_callable(self, evaluator):
        board = lone_rook(chess.WHITE)
        assert evaluator(board) == evaluator.evaluate(board) == 6

    def test_repr(self, evaluator):
        assert repr(evaluator) == "MaterialMobilityEvaluator()"


class TestEvaluatorInterface:
    """Tests for the abstract Evaluator."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_custom_evaluator(self):
        class MaterialOnly(Evaluator):
            def evaluate(self, board):
                return material_score(board)

        board = lone_rook(chess.BLACK)
        assert MaterialOnly().evaluate(board) == -5
