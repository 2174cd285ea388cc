"""
Board Representation Bridges

Conversions between our Board and other representations:

    Board <-> FEN (via python-chess)
    Board  -> (8, 8) numpy array of signed piece values

Array orientation:
    - Row 0 = Rank 8 (Black's back rank) = y 0
    - Row 7 = Rank 1 (White's back rank) = y 7
    - Column 0 = A-file = x 0
    - Column 7 = H-file = x 7

Only piece placement is converted. Castling rights, en passant squares and
move counters in a FEN are ignored since the engine does not model them.
"""

from typing import Tuple

import chess
import numpy as np

from pawnstorm.board.chessboard import Board
from pawnstorm.board.coordinate import BOARD_SIZE, Coordinate
from pawnstorm.board.piece import KIND_TO_PIECE_TYPE, PIECE_TYPE_TO_KIND, PieceKind

BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def starting_board() -> Board:
    """
    Board with the 32 pieces in their starting cells.

    Black occupies rows 0-1 and White rows 6-7, kings on the e-file.
    """
    board = Board()
    for x in range(BOARD_SIZE):
        board.add_piece(chess.BLACK, x, 1, PieceKind.PAWN)
        board.add_piece(chess.WHITE, x, 6, PieceKind.PAWN)
        board.add_piece(chess.BLACK, x, 0, BACK_RANK[x])
        board.add_piece(chess.WHITE, x, 7, BACK_RANK[x])
    return board


def board_from_fen(fen: str) -> Board:
    """
    Build a Board from a FEN string (full FEN or placement field only).

    Raises:
        ValueError: If the FEN placement is invalid
    """
    placement = fen.split()[0] if fen.strip() else fen
    reference = chess.BaseBoard(placement)

    board = Board()
    for square, piece in reference.piece_map().items():
        cell = Coordinate.from_square(square)
        board.add_piece(piece.color, cell.x, cell.y, PIECE_TYPE_TO_KIND[piece.piece_type])
    return board


def board_to_fen(board: Board) -> str:
    """Piece placement field of the FEN for `board`."""
    return to_chess_board(board).board_fen()


def to_chess_board(board: Board, turn: chess.Color = chess.WHITE) -> chess.Board:
    """
    python-chess Board with the same placement and no castling rights.

    Useful for cross-checking move generation and for display.
    """
    reference = chess.Board(None)
    for piece in board.iter_pieces():
        reference.set_piece_at(
            piece.location.square,
            chess.Piece(KIND_TO_PIECE_TYPE[piece.kind], piece.color),
        )
    reference.turn = turn
    return reference


def coordinates_to_square(x: int, y: int) -> chess.Square:
    return Coordinate(x, y).square


def square_to_coordinates(square: chess.Square) -> Tuple[int, int]:
    cell = Coordinate.from_square(square)
    return cell.x, cell.y


def board_to_array(board: Board) -> np.ndarray:
    """
    Signed piece values as an (8, 8) int32 array indexed [row, col].

    Empty cells are 0, White pieces positive, Black pieces negative.
    """
    array = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int32)
    for piece in board.iter_pieces():
        array[piece.location.y, piece.location.x] = piece.value
    return array
