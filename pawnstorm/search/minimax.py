"""
Minimax Search with Single-Bound Pruning

This module implements the search used to pick the engine's move.

Key Concepts:
    - Minimax: White maximizes the evaluation, Black minimizes it
    - Single-bound pruning: each node receives one bound, the best value its
      parent has found so far, and stops as soon as its own best value
      reaches it (>= for a maximizing node, <= for a minimizing node)
    - Copy-on-branch: every move is tried on a copy of the board, so no
      undo step exists

Pruning on equality cuts more than textbook alpha-beta when scores tie.
That changes which move is returned on tied subtrees, so the comparisons
below must stay exactly as written.

Move order is the board's scan order (x outer, y inner) for pieces, then
the generation order of each piece's legal moves. Nothing is reordered.

Entry points:
    - best_move(board, depth): Black to move, the engine's normal mode.
      Finite ties keep the FIRST move found; a +inf reply always replaces
      the current best, so among all-losing replies the LAST one wins.
    - best_move_for(board, depth, color): either side to move, used for
      self-play. Ties keep the LAST move found.

Algorithm Complexity:
    O(b^d) in the worst case, with b the branching factor. Every leaf runs
    the mobility term of the evaluator, which itself runs the legality
    filter for every piece.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import chess

from pawnstorm.board.chessboard import Board
from pawnstorm.board.coordinate import Coordinate
from pawnstorm.board.piece import Piece
from pawnstorm.evaluation.base import Evaluator
from pawnstorm.evaluation.material import MaterialMobilityEvaluator
from pawnstorm.search.cache import (
    PositionStore,
    decode_move,
    decode_score,
    encode_move,
    encode_score,
)

logger = logging.getLogger(__name__)

INFINITY = float("inf")

DEFAULT_EVALUATOR = MaterialMobilityEvaluator()


class NoLegalMovesError(ValueError):
    """Raised when a search is requested for a side that cannot move."""


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        piece: The piece to move (on the board that was searched)
        origin: Cell the piece moves from
        destination: Cell the piece moves to
        score: Value of the chosen move (None when served from a store
            with no recorded score)
        nodes: Number of nodes visited
    """

    piece: Piece
    origin: Coordinate
    destination: Coordinate
    score: Optional[float] = None
    nodes: int = 0

    @property
    def handle(self):
        """Visual handle of the piece to relocate."""
        return self.piece.handle

    @property
    def uci(self) -> str:
        return self.origin.square_name + self.destination.square_name


def alphabeta(
    board: Board,
    depth: int,
    maximizing: bool,
    bound: float,
    evaluator: Optional[Evaluator] = None,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Minimax value of `board` with single-bound pruning.

    Args:
        board: Position to search (not modified)
        depth: Remaining plies; 0 scores the position
        maximizing: True if White is to move
        bound: Best value found so far by the parent node
        evaluator: Leaf evaluator (default: MaterialMobilityEvaluator)
        nodes_searched: Optional mutable list [count] of visited nodes

    Returns:
        The node's value. A side with no legal move returns its starting
        sentinel: -inf for White, +inf for Black.
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    if evaluator is None:
        evaluator = DEFAULT_EVALUATOR

    # Base case: leaf node
    if depth <= 0:
        return evaluator.evaluate(board)

    minmax = -INFINITY if maximizing else INFINITY
    color = chess.WHITE if maximizing else chess.BLACK

    for piece in board.get_color_pieces(color):
        origin = piece.location
        for move in board.reduce_and_get_moves(piece):
            child = board.copy()
            child.move_piece(origin.x, origin.y, move.x, move.y)

            score = alphabeta(child, depth - 1, not maximizing, minmax, evaluator, nodes_searched)

            if maximizing:
                if score > minmax:
                    minmax = score
                if minmax >= bound:
                    return minmax
            else:
                if score < minmax:
                    minmax = score
                if minmax <= bound:
                    return minmax

    return minmax


def best_move(
    board: Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    store: Optional[PositionStore] = None,
    score_store: Optional[PositionStore] = None,
) -> SearchResult:
    """
    Find Black's best move.

    A reply replaces the current best when it scores strictly lower, or when
    it scores +inf (the starting sentinel). The first move found is therefore
    always recorded, equal finite scores keep the earlier move, and a later
    +inf reply overwrites whatever was recorded before it.

    Args:
        board: Current position, Black to move
        depth: Search depth in plies (>= 1)
        evaluator: Leaf evaluator (default: MaterialMobilityEvaluator)
        store: Optional position -> move store consulted before searching
            and updated after
        score_store: Optional position -> score store, updated after a
            search and read back on a `store` hit

    Returns:
        SearchResult for the chosen move

    Raises:
        ValueError: If depth < 1
        NoLegalMovesError: If Black has no legal move
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")

    key = board.to_key()
    if store is not None:
        cached = _lookup_move(board, store, key)
        if cached is not None:
            if score_store is not None:
                cached.score = _lookup_score(score_store, key)
            return cached

    best: Optional[SearchResult] = None
    best_score = INFINITY
    nodes = [0]

    for piece in board.get_color_pieces(chess.BLACK):
        origin = piece.location
        for move in board.reduce_and_get_moves(piece):
            child = board.copy()
            child.move_piece(origin.x, origin.y, move.x, move.y)

            score = alphabeta(child, depth - 1, True, best_score, evaluator, nodes)

            if score < best_score or score == INFINITY:
                best_score = score
                best = SearchResult(piece, origin, move)

    if best is None:
        raise NoLegalMovesError("No legal moves available for Black")

    best.score = best_score
    best.nodes = nodes[0]

    if store is not None:
        store.put(key, encode_move(best.origin, best.destination))
    if score_store is not None:
        score_store.put(key, encode_score(best_score))

    logger.debug(
        f"best_move depth={depth}: {best.uci} score={best_score} nodes={best.nodes}"
    )
    return best


def best_move_for(
    board: Board,
    depth: int,
    color: chess.Color,
    evaluator: Optional[Evaluator] = None,
) -> SearchResult:
    """
    Find the best move for `color`.

    White maximizes and Black minimizes. A move replaces the current best
    when it scores at least as well, so on ties the last move found wins.

    Raises:
        ValueError: If depth < 1
        NoLegalMovesError: If `color` has no legal move
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")

    maximizing = color == chess.WHITE
    minmax = -INFINITY if maximizing else INFINITY
    best: Optional[SearchResult] = None
    nodes = [0]

    for piece in board.get_color_pieces(color):
        origin = piece.location
        for move in board.reduce_and_get_moves(piece):
            child = board.copy()
            child.move_piece(origin.x, origin.y, move.x, move.y)

            score = alphabeta(child, depth - 1, not maximizing, minmax, evaluator, nodes)

            if maximizing:
                if score >= minmax:
                    minmax = score
                    best = SearchResult(piece, origin, move)
            else:
                if score <= minmax:
                    minmax = score
                    best = SearchResult(piece, origin, move)

    if best is None:
        side = "White" if maximizing else "Black"
        raise NoLegalMovesError(f"No legal moves available for {side}")

    best.score = minmax
    best.nodes = nodes[0]

    logger.debug(
        f"best_move_for depth={depth}: {best.uci} score={minmax} nodes={best.nodes}"
    )
    return best


def _lookup_move(board: Board, store: PositionStore, key: str) -> Optional[SearchResult]:
    """Return the stored move for `key` if it is still a legal Black move."""
    value = store.get(key)
    if value is None:
        return None

    try:
        origin, destination = decode_move(value)
    except ValueError as e:
        logger.warning(f"Ignoring stored move for {key}: {e}")
        return None

    piece = board.piece_at(origin.x, origin.y)
    if (
        piece is None
        or piece.color != chess.BLACK
        or destination not in board.reduce_and_get_moves(piece)
    ):
        logger.warning(f"Ignoring stored move {value} for {key}: not legal here")
        return None

    logger.debug(f"Position store hit: {value}")
    return SearchResult(piece, origin, destination)


def _lookup_score(score_store: PositionStore, key: str) -> Optional[float]:
    value = score_store.get(key)
    if value is None:
        return None
    try:
        return decode_score(value)
    except ValueError as e:
        logger.warning(f"Ignoring stored score for {key}: {e}")
        return None
