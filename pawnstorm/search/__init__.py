"""
Search Module

This module implements the move search: fixed-depth minimax with a
single-bound pruning rule, plus an optional position store that maps a board
encoding to a previously chosen move.

Key Components:
    - alphabeta: Recursive minimax with single-bound pruning
    - best_move: Root search for Black (the engine's side)
    - best_move_for: Root search for either side (self-play)
    - PositionStore: Optional board-encoding -> move cache
"""

from pawnstorm.search.minimax import (
    NoLegalMovesError,
    SearchResult,
    alphabeta,
    best_move,
    best_move_for,
)
from pawnstorm.search.cache import (
    FilePositionStore,
    InMemoryPositionStore,
    PositionStore,
    decode_move,
    decode_score,
    encode_move,
    encode_score,
)

__all__ = [
    'alphabeta',
    'best_move',
    'best_move_for',
    'NoLegalMovesError',
    'SearchResult',
    'PositionStore',
    'InMemoryPositionStore',
    'FilePositionStore',
    'encode_move',
    'decode_move',
    'encode_score',
    'decode_score',
]
