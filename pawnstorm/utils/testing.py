"""
Engine Testing and Benchmarking

This module provides tools for checking and timing the engine.

Tools:
    1. perft: Counts the leaves of the legal-move tree to a fixed depth.
       Comparing the counts with a reference move generator (python-chess)
       is the standard way to verify move generation. Positions used for
       comparison must not involve castling, en passant or promotion, which
       this engine does not model (or models differently).

    2. Tactical suite: small positions where Black has one clearly best
       reply at a given depth. Each entry records the depth it needs.

    3. Self-play: lets the engine play both sides through a GameSession.

Evaluation Metrics:
    - Correct Moves: Number of positions where the engine found the move
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes visited
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import chess

from pawnstorm.board.chessboard import Board
from pawnstorm.board.representation import board_from_fen
from pawnstorm.game.session import GameSession
from pawnstorm.search.minimax import best_move


def perft(board: Board, depth: int, color: chess.Color) -> int:
    """
    Count leaf nodes of the legal-move tree.

    Args:
        board: Starting position (not modified)
        depth: Plies to expand
        color: Side to move at the root

    Returns:
        Number of positions reached after exactly `depth` plies
    """
    if depth == 0:
        return 1

    nodes = 0
    for piece in board.get_color_pieces(color):
        origin = piece.location
        for move in board.reduce_and_get_moves(piece):
            if depth == 1:
                nodes += 1
                continue
            child = board.copy()
            child.move_piece(origin.x, origin.y, move.x, move.y)
            nodes += perft(child, depth - 1, not color)
    return nodes


@dataclass
class TacticalPosition:
    """
    A test position with the expected Black reply.

    Attributes:
        fen: Board position in FEN notation (Black to move)
        best_moves: Acceptable moves in coordinate notation
        depth: Search depth the position needs
        description: Human-readable description of the position
        id: Position identifier
    """

    fen: str
    best_moves: List[str]
    depth: int = 2
    description: str = ""
    id: str = ""


@dataclass
class TacticalResult:
    """Result of testing a single position."""

    position: TacticalPosition
    found_move: str
    score: Optional[float]
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


TACTICAL_POSITIONS = [
    TacticalPosition(
        id="PS.01",
        fen="r5k1/5ppp/8/8/8/8/5PPP/6K1 b - - 0 1",
        best_moves=["a8a1"],
        depth=2,
        description="Back-rank mate with Ra1#",
    ),
    TacticalPosition(
        id="PS.02",
        fen="k7/8/8/3q4/8/8/3Q4/K7 b - - 0 1",
        best_moves=["d5d2"],
        depth=1,
        description="Undefended queen on d2 is captured",
    ),
]


def check_position(position: TacticalPosition, depth: Optional[int] = None) -> TacticalResult:
    """
    Search one position for Black and compare with the expected moves.

    Positions with no expected move are skipped by run_tactical_suite().
    """
    depth = depth if depth is not None else position.depth
    board = board_from_fen(position.fen)

    start_time = time.time()
    result = best_move(board, depth)
    elapsed = time.time() - start_time

    return TacticalResult(
        position=position,
        found_move=result.uci,
        score=result.score,
        correct=result.uci in position.best_moves,
        time_taken=elapsed,
        nodes_searched=result.nodes,
        depth=depth,
    )


def run_tactical_suite(
    depth: Optional[int] = None,
    positions: Optional[List[TacticalPosition]] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Run the tactical suite.

    Args:
        depth: Override every position's depth
        positions: Positions to run (default: TACTICAL_POSITIONS)
        verbose: Print a line per position

    Returns:
        Dictionary with 'score', 'total', 'percentage', 'avg_time' and
        'results' (list of TacticalResult)
    """
    positions = positions if positions is not None else TACTICAL_POSITIONS
    results = []
    for position in positions:
        if not position.best_moves:
            continue
        result = check_position(position, depth)
        results.append(result)
        if verbose:
            mark = "OK " if result.correct else "BAD"
            print(
                f"{mark} {position.id}: found {result.found_move}, "
                f"expected {position.best_moves} ({result.time_taken:.2f}s)"
            )

    correct = sum(1 for r in results if r.correct)
    total = len(results)
    return {
        'score': correct,
        'total': total,
        'percentage': (100 * correct / total) if total else 0.0,
        'avg_time': (sum(r.time_taken for r in results) / total) if total else 0.0,
        'results': results,
    }


def play_self_game(
    depth: int = 1,
    max_plies: int = 20,
    session: Optional[GameSession] = None,
) -> GameSession:
    """
    Let the engine play both sides.

    Stops at checkmate, stalemate or after `max_plies` plies.

    Returns:
        The finished GameSession (history holds the moves)
    """
    session = session if session is not None else GameSession()
    for _ in range(max_plies):
        if session.is_over():
            break
        session.engine_move(depth)
    return session
