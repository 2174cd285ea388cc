"""
Board Module

This module holds the board model and everything that only needs the board
to answer: move generation, the legality filter and check detection.

Key Components:
    - Coordinate: Immutable (x, y) cell, 0..7 on each axis
    - Piece / PieceKind: Color, kind and location of a piece
    - Board: 8x8 grid, move application, check / out-of-moves queries
    - generate_moves: Pseudo-legal destinations per piece kind
    - filter_legal: Drops moves that leave the own king attacked
    - Representation bridges: FEN and numpy array conversion

Data Flow:
    Board + Piece -> generate_moves() -> filter_legal() -> legal destinations
"""

from pawnstorm.board.coordinate import Coordinate, is_on_board
from pawnstorm.board.piece import Piece, PieceKind
from pawnstorm.board.chessboard import Board, MissingKingError, MoveResult
from pawnstorm.board.movegen import generate_moves
from pawnstorm.board.legality import filter_legal
from pawnstorm.board.representation import (
    board_from_fen,
    board_to_array,
    board_to_fen,
    starting_board,
    to_chess_board,
)

__all__ = [
    'Coordinate',
    'is_on_board',
    'Piece',
    'PieceKind',
    'Board',
    'MissingKingError',
    'MoveResult',
    'generate_moves',
    'filter_legal',
    'board_from_fen',
    'board_to_array',
    'board_to_fen',
    'starting_board',
    'to_chess_board',
]
