"""
Pseudo-Legal Move Generation

Produces destination squares for a piece following its movement geometry
only. Whether the move would leave the mover's own king attacked is decided
later by the legality filter.

Generation order matters: the search keeps the first (or last) of several
equally scored moves, so every generator below walks its directions in a
fixed order.

Not supported: castling, en passant, under-promotion.
"""

from typing import TYPE_CHECKING, List, Tuple

import chess

from pawnstorm.board.coordinate import BOARD_SIZE, Coordinate, is_on_board
from pawnstorm.board.piece import Piece, PieceKind

if TYPE_CHECKING:
    from pawnstorm.board.chessboard import Board

# Clockwise from 1 o'clock
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, -2), (2, -1), (2, 1), (1, 2),
    (-1, 2), (-2, 1), (-2, -1), (-1, -2),
)

# Right, left, up, down
ORTHOGONAL_RAYS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (0, 1))

# Down-right, up-right, down-left, up-left
DIAGONAL_RAYS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

# x outer, y inner
KING_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)

PAWN_START_ROW = {chess.WHITE: 6, chess.BLACK: 1}
PAWN_DIRECTION = {chess.WHITE: -1, chess.BLACK: 1}


def generate_moves(board: "Board", piece: Piece) -> List[Coordinate]:
    """
    Pseudo-legal destinations for `piece` on `board`.

    Args:
        board: Board the piece stands on
        piece: Piece to move

    Returns:
        List of destination Coordinates in generation order
    """
    kind = piece.kind
    if kind == PieceKind.PAWN:
        return pawn_moves(board, piece)
    if kind == PieceKind.KNIGHT:
        return step_moves(board, piece, KNIGHT_OFFSETS)
    if kind == PieceKind.BISHOP:
        return ray_moves(board, piece, DIAGONAL_RAYS)
    if kind == PieceKind.ROOK:
        return ray_moves(board, piece, ORTHOGONAL_RAYS)
    if kind == PieceKind.QUEEN:
        return ray_moves(board, piece, ORTHOGONAL_RAYS + DIAGONAL_RAYS)
    if kind == PieceKind.KING:
        return step_moves(board, piece, KING_OFFSETS)
    raise ValueError(f"Unknown piece kind: {kind!r}")


def pawn_moves(board: "Board", piece: Piece) -> List[Coordinate]:
    """
    Forward one, forward two from the start row (both cells empty), and a
    diagonal capture on each side (left first) onto an opponent piece.
    """
    moves = []
    grid = board.pieces
    x, y = piece.location.x, piece.location.y
    direction = PAWN_DIRECTION[piece.color]
    y1 = y + direction
    y2 = y + 2 * direction

    if not 0 <= y1 < BOARD_SIZE:
        # Pawn already on its far rank
        return moves

    if grid[x][y1] is None:
        moves.append(Coordinate(x, y1))
        if y == PAWN_START_ROW[piece.color] and grid[x][y2] is None:
            moves.append(Coordinate(x, y2))

    for dx in (-1, 1):
        tx = x + dx
        if 0 <= tx < BOARD_SIZE:
            target = grid[tx][y1]
            if target is not None and target.color != piece.color:
                moves.append(Coordinate(tx, y1))

    return moves


def step_moves(board: "Board", piece: Piece, offsets) -> List[Coordinate]:
    """Single-step moves onto empty or opponent-occupied cells."""
    moves = []
    grid = board.pieces
    x, y = piece.location.x, piece.location.y
    for dx, dy in offsets:
        tx, ty = x + dx, y + dy
        if not is_on_board(tx, ty):
            continue
        target = grid[tx][ty]
        if target is None or target.color != piece.color:
            moves.append(Coordinate(tx, ty))
    return moves


def ray_moves(board: "Board", piece: Piece, rays) -> List[Coordinate]:
    """
    Sliding moves.

    Each ray is walked outward until the board edge or the first occupied
    cell; an opponent on that cell is included as a capture, an own piece
    is not.
    """
    moves = []
    grid = board.pieces
    x, y = piece.location.x, piece.location.y
    for dx, dy in rays:
        tx, ty = x + dx, y + dy
        while is_on_board(tx, ty):
            target = grid[tx][ty]
            if target is None:
                moves.append(Coordinate(tx, ty))
            else:
                if target.color != piece.color:
                    moves.append(Coordinate(tx, ty))
                break
            tx += dx
            ty += dy
    return moves
