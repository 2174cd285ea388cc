"""
Game Session

Headless game controller: keeps the live board and whose turn it is,
validates and applies moves, promotes pawns and reports the game state.
The presentation layer (or the text protocol driver) sits on top of this.

Rules applied here:
    - White moves first
    - Only legal moves (Board.reduce_and_get_moves) are accepted
    - A pawn reaching its far rank becomes a Queen
    - The side to move is checkmated when in check with no legal move,
      stalemated when not in check with no legal move
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

import chess

from pawnstorm.board.chessboard import Board, MoveResult
from pawnstorm.board.coordinate import Coordinate
from pawnstorm.board.piece import PieceKind
from pawnstorm.board.representation import starting_board
from pawnstorm.config import EngineConfig
from pawnstorm.search.cache import FilePositionStore, PositionStore
from pawnstorm.search.minimax import SearchResult, best_move, best_move_for

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a move is out of turn or not legal on the live board."""


class GameStatus(Enum):
    """State of the game for the side to move."""
    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


class GameSession:
    """
    A game in progress.

    Attributes:
        board: The live board
        turn: Side to move (chess.WHITE or chess.BLACK)
        history: Moves played so far as (origin, destination) pairs
        config: Engine settings used by engine_move()
        store: Optional position -> move store handed to the Black search
        score_store: Optional position -> score store handed to the Black search
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        turn: chess.Color = chess.WHITE,
        config: Optional[EngineConfig] = None,
        store: Optional[PositionStore] = None,
        score_store: Optional[PositionStore] = None,
    ):
        self.board = board if board is not None else starting_board()
        self.turn = turn
        self.config = config if config else EngineConfig()
        self.history: List[Tuple[Coordinate, Coordinate]] = []

        if store is None and self.config.move_cache_path is not None:
            store = FilePositionStore(self.config.move_cache_path)
        self.store = store

        if score_store is None and self.config.score_cache_path is not None:
            score_store = FilePositionStore(self.config.score_cache_path)
        self.score_store = score_store

    def legal_moves(self) -> List[Tuple[Coordinate, Coordinate]]:
        """All legal (origin, destination) pairs for the side to move."""
        moves = []
        for piece in self.board.get_color_pieces(self.turn):
            for destination in self.board.reduce_and_get_moves(piece):
                moves.append((piece.location, destination))
        return moves

    def play(self, origin: Coordinate, destination: Coordinate) -> MoveResult:
        """
        Play a move for the side to move.

        Args:
            origin: Cell of the piece to move
            destination: Target cell

        Returns:
            MoveResult of the move (promotion already applied)

        Raises:
            IllegalMoveError: If the move is out of turn or not legal
        """
        piece = self.board.piece_at(origin.x, origin.y)
        if piece is None:
            raise IllegalMoveError(f"No piece on {origin.square_name}")
        if piece.color != self.turn:
            raise IllegalMoveError(f"Not {self._side(piece.color)}'s turn")
        if destination not in self.board.reduce_and_get_moves(piece):
            raise IllegalMoveError(
                f"Illegal move: {origin.square_name}{destination.square_name}"
            )

        result = self.board.move_piece(origin.x, origin.y, destination.x, destination.y)
        if result.promotion_reached:
            # Always a queen
            self.board.promote(destination.x, destination.y, PieceKind.QUEEN, piece.handle)
            logger.debug(f"Pawn promoted on {destination.square_name}")

        self.history.append((origin, destination))
        self.turn = not self.turn
        logger.debug(
            f"Played {origin.square_name}{destination.square_name}"
            f"{' (capture)' if result.captured else ''}"
        )
        return result

    def play_uci(self, move: str) -> MoveResult:
        """
        Play a move in coordinate notation, e.g. "e2e4" or "e7e8q".

        The promotion letter is accepted but ignored: pawns always become
        queens.

        Raises:
            IllegalMoveError: If the notation is malformed or the move illegal
        """
        if len(move) not in (4, 5):
            raise IllegalMoveError(f"Invalid move format: {move}")
        try:
            origin = Coordinate.from_square_name(move[:2])
            destination = Coordinate.from_square_name(move[2:4])
        except ValueError as e:
            raise IllegalMoveError(f"Invalid move format: {move}") from e
        return self.play(origin, destination)

    def engine_move(self, depth: Optional[int] = None) -> SearchResult:
        """
        Search for the side to move and play the result.

        Black uses the engine's own search (best_move); White uses the
        symmetric search (best_move_for).

        Raises:
            NoLegalMovesError: If the side to move cannot move
        """
        depth = depth if depth is not None else self.config.depth
        result = self.search(depth)
        self.play(result.origin, result.destination)
        return result

    def search(self, depth: int) -> SearchResult:
        """Search without playing the move."""
        if self.turn == chess.BLACK:
            return best_move(self.board, depth, store=self.store, score_store=self.score_store)
        return best_move_for(self.board, depth, chess.WHITE)

    def status(self) -> GameStatus:
        check = self.board.is_check(self.turn)
        out_of_moves = self.board.out_of_moves(self.turn)
        if check and out_of_moves:
            return GameStatus.CHECKMATE
        if out_of_moves:
            return GameStatus.STALEMATE
        if check:
            return GameStatus.CHECK
        return GameStatus.ONGOING

    def is_over(self) -> bool:
        return self.status() in (GameStatus.CHECKMATE, GameStatus.STALEMATE)

    def describe_status(self) -> str:
        """Human readable game state, as shown at the end of each move."""
        status = self.status()
        side = self._side(self.turn)
        if status == GameStatus.CHECKMATE:
            return f"Checkmate: {self._side(not self.turn)} wins!"
        if status == GameStatus.STALEMATE:
            return "Stalemate: It's a draw!"
        if status == GameStatus.CHECK:
            return f"{side} is in check!"
        return f"{side} to move"

    @staticmethod
    def _side(color: chess.Color) -> str:
        return "White" if color == chess.WHITE else "Black"
