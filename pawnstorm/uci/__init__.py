"""
Text Protocol Interface

A UCI-style command loop over a GameSession, so the engine can be played
from a terminal or driven by a script.

Protocol Flow:
    Client -> "uci"
    Engine -> "id name Pawnstorm"
    Engine -> "uciok"
    Client -> "position startpos moves e2e4"
    Client -> "go depth 3"
    Engine -> "info depth 3 score cp 0 nodes 1234 time 5678"
    Engine -> "bestmove e7e5"
"""

from pawnstorm.uci.interface import UCIEngine, setup_logger

__all__ = ['UCIEngine', 'setup_logger']
