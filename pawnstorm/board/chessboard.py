"""
Board State

The Board owns piece placement. It is also the unit of simulation: every
speculative move made by the legality filter or the search is applied to a
copy() of the board, never to the board itself, so no undo logic exists.

Grid layout:
    pieces[x][y] holds the Piece on file x, row y (or None)
    labels[x][y] holds the presentation layer's cell handle (or None)

Scan order for every "all pieces" query is x outer, y inner. Search
tie-breaking depends on this order.
"""

from typing import Any, Iterator, List, Optional

import chess

from pawnstorm.board.coordinate import BOARD_SIZE, Coordinate, is_on_board
from pawnstorm.board.legality import filter_legal
from pawnstorm.board.movegen import generate_moves
from pawnstorm.board.piece import Piece, PieceKind


class MissingKingError(LookupError):
    """Raised when a king lookup fails: every check query needs one king per side."""


class MoveResult:
    """
    Side effects of Board.move_piece().

    Attributes:
        captured_piece: The piece that stood on the destination, if any
        promotion_reached: True if a pawn landed on its far rank
    """

    __slots__ = ("captured_piece", "promotion_reached")

    def __init__(self, captured_piece: Optional[Piece], promotion_reached: bool):
        self.captured_piece = captured_piece
        self.promotion_reached = promotion_reached

    @property
    def captured(self) -> bool:
        return self.captured_piece is not None

    def __iter__(self):
        # Allows `captured, promoted = board.move_piece(...)`
        yield self.captured
        yield self.promotion_reached

    def __repr__(self) -> str:
        return (
            f"MoveResult(captured={self.captured}, "
            f"promotion_reached={self.promotion_reached})"
        )


class Board:
    """
    8x8 chess board.

    Methods:
        piece_at / label_at: Direct lookup
        add_piece / add_label: Setup-time placement
        move_piece: Unconditional relocation, no legality check
        get_moves / reduce_and_get_moves: Pseudo-legal / legal destinations
        is_check / out_of_moves: Game state queries
        score: Evaluation from White's perspective
    """

    def __init__(self):
        self.pieces: List[List[Optional[Piece]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.labels: List[List[Any]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def copy(self) -> "Board":
        """
        Deep copy of the piece grid.

        Pieces are cloned so that moving a piece on the copy leaves this board
        untouched. Label handles themselves are shared, not cloned.
        """
        board = Board.__new__(Board)
        board.pieces = [
            [piece.copy() if piece is not None else None for piece in column]
            for column in self.pieces
        ]
        board.labels = [list(column) for column in self.labels]
        return board

    __copy__ = copy

    # ------------------------------------------------------------------
    # Placement and lookup
    # ------------------------------------------------------------------

    def add_piece(
        self,
        color: chess.Color,
        x: int,
        y: int,
        kind: int,
        handle: Any = None,
    ) -> Piece:
        """
        Place a new piece at (x, y), replacing any occupant.

        Args:
            color: chess.WHITE or chess.BLACK
            x, y: Destination cell
            kind: PieceKind or a signed piece value (e.g. -5 for a Black rook)
            handle: Opaque visual handle for the presentation layer

        Returns:
            The placed Piece
        """
        piece = Piece(color, PieceKind.from_value(kind), Coordinate(x, y), handle)
        self.pieces[x][y] = piece
        return piece

    def add_label(self, x: int, y: int, handle: Any):
        self._check_bounds(x, y)
        self.labels[x][y] = handle

    def piece_at(self, x: int, y: int) -> Optional[Piece]:
        """
        Raises:
            IndexError: If (x, y) is off the board
        """
        self._check_bounds(x, y)
        return self.pieces[x][y]

    def label_at(self, x: int, y: int) -> Any:
        self._check_bounds(x, y)
        return self.labels[x][y]

    def get_piece(self, handle: Any) -> Optional[Piece]:
        """Find the piece whose visual handle is `handle`."""
        for piece in self.iter_pieces():
            if piece.handle is not None and piece.handle == handle:
                return piece
        return None

    def get_label(self, handle: Any) -> Optional[Coordinate]:
        """Find the coordinate of the cell whose label is `handle`."""
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                if self.labels[x][y] is not None and self.labels[x][y] == handle:
                    return Coordinate(x, y)
        return None

    def iter_pieces(self) -> Iterator[Piece]:
        """All pieces in scan order (x outer, y inner)."""
        for column in self.pieces:
            for piece in column:
                if piece is not None:
                    yield piece

    def get_color_pieces(self, color: chess.Color) -> List[Piece]:
        return [piece for piece in self.iter_pieces() if piece.color == color]

    def get_king(self, color: chess.Color) -> Piece:
        """
        Raises:
            MissingKingError: If `color` has no king on the board
        """
        for piece in self.iter_pieces():
            if piece.kind == PieceKind.KING and piece.color == color:
                return piece
        side = "White" if color == chess.WHITE else "Black"
        raise MissingKingError(f"Invariant violated: no {side} king on the board")

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def move_piece(self, from_x: int, from_y: int, to_x: int, to_y: int) -> MoveResult:
        """
        Relocate the piece at (from_x, from_y) to (to_x, to_y).

        No legality check is made here. Any occupant of the destination is
        removed from the board and returned as the captured piece.

        Raises:
            ValueError: If there is no piece on the origin cell
            IndexError: If either cell is off the board
        """
        piece = self.piece_at(from_x, from_y)
        if piece is None:
            raise ValueError(f"No piece at ({from_x},{from_y})")
        opponent = self.piece_at(to_x, to_y)

        self.pieces[from_x][from_y] = None
        self.pieces[to_x][to_y] = piece
        piece.location = Coordinate(to_x, to_y)

        pawn_at_end = piece.kind == PieceKind.PAWN and (
            (piece.color == chess.WHITE and to_y == 0)
            or (piece.color == chess.BLACK and to_y == BOARD_SIZE - 1)
        )
        return MoveResult(opponent, pawn_at_end)

    def promote(self, x: int, y: int, kind: PieceKind = PieceKind.QUEEN, handle: Any = None) -> Piece:
        """Replace the pawn at (x, y) with a piece of `kind` and the same color."""
        pawn = self.piece_at(x, y)
        if pawn is None or pawn.kind != PieceKind.PAWN:
            raise ValueError(f"No pawn to promote at ({x},{y})")
        return self.add_piece(pawn.color, x, y, kind, handle)

    def get_moves(self, piece: Piece) -> List[Coordinate]:
        """Pseudo-legal destinations (own king safety ignored)."""
        return generate_moves(self, piece)

    def reduce_and_get_moves(self, piece: Piece) -> List[Coordinate]:
        """Legal destinations: pseudo-legal moves that keep the own king safe."""
        return filter_legal(self, piece, generate_moves(self, piece))

    # ------------------------------------------------------------------
    # Game state
    # ------------------------------------------------------------------

    def is_check(self, color: chess.Color) -> bool:
        """True if any opposing pseudo-legal move lands on `color`'s king."""
        king_square = self.get_king(color).location
        for piece in self.get_color_pieces(not color):
            if king_square in generate_moves(self, piece):
                return True
        return False

    def out_of_moves(self, color: chess.Color) -> bool:
        """True if no piece of `color` has a legal move (mate or stalemate)."""
        for piece in self.get_color_pieces(color):
            if self.reduce_and_get_moves(piece):
                return False
        return True

    def is_checkmate(self, color: chess.Color) -> bool:
        return self.is_check(color) and self.out_of_moves(color)

    def is_stalemate(self, color: chess.Color) -> bool:
        return not self.is_check(color) and self.out_of_moves(color)

    # ------------------------------------------------------------------
    # Evaluation hooks
    # ------------------------------------------------------------------

    def material_score(self) -> int:
        from pawnstorm.evaluation.material import material_score
        return material_score(self)

    def mobility_score(self) -> int:
        from pawnstorm.evaluation.material import mobility_score
        return mobility_score(self)

    def score(self) -> int:
        """Material plus mobility, positive favours White."""
        return self.material_score() + self.mobility_score()

    def best_move(self, depth: int, color: Optional[chess.Color] = None):
        """
        Search this board for a move.

        Without `color` the engine plays Black and keeps the first of tied
        moves; with `color` either side can be searched and the last of tied
        moves is kept. See pawnstorm.search.minimax.
        """
        from pawnstorm.search.minimax import best_move, best_move_for
        if color is None:
            return best_move(self, depth)
        return best_move_for(self, depth, color)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_key(self) -> str:
        """
        Canonical position key.

        One entry per cell in scan order: '0' for an empty cell, otherwise
        the piece's signed value as text (so the key is at least 64 chars).
        """
        parts = []
        for column in self.pieces:
            for piece in column:
                parts.append("0" if piece is None else str(piece.value))
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_key()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.to_key() == other.to_key()

    # Boards are mutable; key by to_key() when a hashable form is needed
    __hash__ = None

    @staticmethod
    def _check_bounds(x: int, y: int):
        if not is_on_board(x, y):
            raise IndexError(f"Cell out of range: ({x},{y})")
