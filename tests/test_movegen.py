"""
Unit Tests for Pseudo-Legal Move Generation

Tests cover:
    - Move counts for each piece kind on an empty board
    - Generation order (search tie-breaking depends on it)
    - Ray blocking and captures
    - Pawn pushes, double pushes and diagonal captures
    - Cross-check against python-chess on positions without castling,
      en passant or promotion
"""

import chess
import pytest

from pawnstorm.board import Board, Coordinate, PieceKind, board_from_fen


def cells(*pairs):
    return [Coordinate(x, y) for x, y in pairs]


@pytest.fixture
def board():
    return Board()


class TestEmptyBoardCounts:
    """Move counts with a single piece on the board."""

    def test_rook_in_corner(self, board):
        rook = board.add_piece(chess.WHITE, 0, 0, PieceKind.ROOK)
        assert len(board.get_moves(rook)) == 14

    def test_knight_in_center(self, board):
        knight = board.add_piece(chess.WHITE, 4, 4, PieceKind.KNIGHT)
        assert len(board.get_moves(knight)) == 8

    def test_knight_in_corner(self, board):
        knight = board.add_piece(chess.BLACK, 0, 0, PieceKind.KNIGHT)
        assert board.get_moves(knight) == cells((2, 1), (1, 2))

    def test_bishop_in_center(self, board):
        bishop = board.add_piece(chess.WHITE, 3, 3, PieceKind.BISHOP)
        assert len(board.get_moves(bishop)) == 13

    def test_queen_in_center(self, board):
        queen = board.add_piece(chess.WHITE, 3, 3, PieceKind.QUEEN)
        assert len(board.get_moves(queen)) == 27

    def test_king_in_center(self, board):
        king = board.add_piece(chess.WHITE, 4, 4, PieceKind.KING)
        assert len(board.get_moves(king)) == 8

    def test_king_in_corner(self, board):
        king = board.add_piece(chess.BLACK, 0, 0, PieceKind.KING)
        assert len(board.get_moves(king)) == 3


class TestGenerationOrder:
    """Order in which destinations are produced."""

    def test_knight_order_is_clockwise(self, board):
        knight = board.add_piece(chess.WHITE, 4, 4, PieceKind.KNIGHT)
        expected = cells((5, 2), (6, 3), (6, 5), (5, 6), (3, 6), (2, 5), (2, 3), (3, 2))
        assert board.get_moves(knight) == expected

    def test_rook_order(self, board):
        """+x ray, then -x, then -y, then +y."""
        rook = board.add_piece(chess.WHITE, 6, 6, PieceKind.ROOK)
        expected = cells(
            (7, 6),
            (5, 6), (4, 6), (3, 6), (2, 6), (1, 6), (0, 6),
            (6, 5), (6, 4), (6, 3), (6, 2), (6, 1), (6, 0),
            (6, 7),
        )
        assert board.get_moves(rook) == expected

    def test_bishop_order(self, board):
        bishop = board.add_piece(chess.WHITE, 1, 1, PieceKind.BISHOP)
        moves = board.get_moves(bishop)
        # (1,1) ray first, then (1,-1), (-1,1), (-1,-1)
        assert moves[:6] == cells((2, 2), (3, 3), (4, 4), (5, 5), (6, 6), (7, 7))
        assert moves[6:] == cells((2, 0), (0, 2), (0, 0))

    def test_queen_walks_rook_rays_first(self, board):
        queen = board.add_piece(chess.WHITE, 0, 0, PieceKind.QUEEN)
        moves = board.get_moves(queen)
        assert moves[0] == Coordinate(1, 0)
        assert moves[14] == Coordinate(1, 1)
        assert len(moves) == 21

    def test_king_order(self, board):
        """dx outer, dy inner."""
        king = board.add_piece(chess.WHITE, 7, 7, PieceKind.KING)
        assert board.get_moves(king) == cells((6, 6), (6, 7), (7, 6))

        corner = board.add_piece(chess.BLACK, 0, 0, PieceKind.KING)
        assert board.get_moves(corner) == cells((0, 1), (1, 0), (1, 1))


class TestRays:
    """Sliding pieces stop at the first occupied cell."""

    def test_own_piece_blocks(self, board):
        rook = board.add_piece(chess.WHITE, 0, 0, PieceKind.ROOK)
        board.add_piece(chess.WHITE, 3, 0, PieceKind.KNIGHT)
        board.add_piece(chess.BLACK, 0, 2, PieceKind.PAWN)

        moves = board.get_moves(rook)

        assert moves == cells((1, 0), (2, 0), (0, 1), (0, 2))
        assert Coordinate(3, 0) not in moves, "Own piece must not be capturable"

    def test_step_piece_skips_own_piece(self, board):
        king = board.add_piece(chess.WHITE, 7, 7, PieceKind.KING)
        board.add_piece(chess.WHITE, 6, 6, PieceKind.PAWN)
        board.add_piece(chess.BLACK, 7, 6, PieceKind.PAWN)
        assert board.get_moves(king) == cells((6, 7), (7, 6))


class TestPawnMoves:
    """Pawn pushes and captures."""

    def test_white_pawn_double_push(self, board):
        pawn = board.add_piece(chess.WHITE, 4, 6, PieceKind.PAWN)
        assert board.get_moves(pawn) == cells((4, 5), (4, 4))

    def test_black_pawn_double_push(self, board):
        pawn = board.add_piece(chess.BLACK, 4, 1, PieceKind.PAWN)
        assert board.get_moves(pawn) == cells((4, 2), (4, 3))

    def test_single_push_off_start_row(self, board):
        pawn = board.add_piece(chess.WHITE, 4, 5, PieceKind.PAWN)
        assert board.get_moves(pawn) == cells((4, 4))

    def test_blocked_pawn(self, board):
        pawn = board.add_piece(chess.WHITE, 4, 6, PieceKind.PAWN)
        board.add_piece(chess.BLACK, 4, 5, PieceKind.KNIGHT)
        assert board.get_moves(pawn) == []

    def test_double_push_needs_both_cells_empty(self, board):
        pawn = board.add_piece(chess.WHITE, 4, 6, PieceKind.PAWN)
        board.add_piece(chess.BLACK, 4, 4, PieceKind.KNIGHT)
        assert board.get_moves(pawn) == cells((4, 5))

    def test_diagonal_captures_left_first(self, board):
        pawn = board.add_piece(chess.WHITE, 4, 4, PieceKind.PAWN)
        board.add_piece(chess.BLACK, 5, 3, PieceKind.ROOK)
        board.add_piece(chess.BLACK, 3, 3, PieceKind.ROOK)
        assert board.get_moves(pawn) == cells((4, 3), (3, 3), (5, 3))

    def test_no_capture_of_own_piece(self, board):
        pawn = board.add_piece(chess.BLACK, 4, 4, PieceKind.PAWN)
        board.add_piece(chess.BLACK, 3, 5, PieceKind.KNIGHT)
        board.add_piece(chess.WHITE, 5, 5, PieceKind.KNIGHT)
        assert board.get_moves(pawn) == cells((4, 5), (5, 5))

    def test_edge_pawn_captures_one_side(self, board):
        pawn = board.add_piece(chess.WHITE, 0, 4, PieceKind.PAWN)
        board.add_piece(chess.BLACK, 0, 3, PieceKind.KNIGHT)
        board.add_piece(chess.BLACK, 1, 3, PieceKind.KNIGHT)
        assert board.get_moves(pawn) == cells((1, 3))

    def test_pawn_on_far_rank_has_no_moves(self, board):
        pawn = board.add_piece(chess.WHITE, 0, 0, PieceKind.PAWN)
        assert board.get_moves(pawn) == []


# Positions without castling rights, en passant squares or promotions
REFERENCE_FENS = [
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1",
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b - - 0 1",
    "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w - - 0 1",
    "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b - - 0 1",
    "4k3/8/8/8/1b6/8/3P4/4K3 w - - 0 1",
    "4k3/8/8/8/8/8/4r3/4K3 w - - 0 1",
    "4k3/8/8/8/8/4p3/4P3/4K3 w - - 0 1",
    "r5k1/5ppp/8/8/8/8/5PPP/6K1 b - - 0 1",
]


def engine_moves(board, color, legal=True):
    moves = set()
    for piece in board.get_color_pieces(color):
        destinations = board.reduce_and_get_moves(piece) if legal else board.get_moves(piece)
        for destination in destinations:
            moves.add(piece.location.square_name + destination.square_name)
    return moves


class TestAgainstPythonChess:
    """Cross-check move generation with python-chess."""

    @pytest.mark.parametrize("fen", REFERENCE_FENS)
    def test_legal_moves_match(self, fen):
        reference = chess.Board(fen)
        expected = {move.uci() for move in reference.legal_moves}

        assert engine_moves(board_from_fen(fen), reference.turn) == expected

    @pytest.mark.parametrize("fen", REFERENCE_FENS)
    def test_pseudo_legal_moves_match(self, fen):
        reference = chess.Board(fen)
        expected = {move.uci() for move in reference.pseudo_legal_moves}

        assert engine_moves(board_from_fen(fen), reference.turn, legal=False) == expected
