"""
Utilities Module

This module provides tools for verifying and benchmarking the engine.

Key Components:
    - perft: Move generation verification by leaf counting
    - Tactical suite: Positions with a known best Black reply
    - Self-play: The engine playing both sides

Success Metrics:
    - perft from the starting position: 20 at depth 1, 400 at depth 2,
      8902 at depth 3 (no castling, en passant or promotion occurs that
      early)
"""

from pawnstorm.utils.testing import (
    TACTICAL_POSITIONS,
    check_position,
    perft,
    play_self_game,
    run_tactical_suite,
)

__all__ = [
    'TACTICAL_POSITIONS',
    'check_position',
    'perft',
    'play_self_game',
    'run_tactical_suite',
]
