"""
Pawnstorm Chess Engine

A small chess engine that tracks board state, generates legal moves, detects
check, checkmate and stalemate, and picks moves with a fixed-depth minimax
search.

## Architecture

The engine is organized into several key modules:

1. **board**: Board model and move generation
   - Coordinate, Piece and Board
   - Pseudo-legal move generation per piece kind
   - Legality filter (own king safety) and check detection
   - FEN / numpy conversions

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialMobilityEvaluator: material balance plus mobility balance

3. **search**: Search algorithms
   - Minimax with single-bound pruning
   - Optional position store (board encoding -> best move)

4. **game**: Turns, promotion and game state on top of the board

5. **uci**: UCI-style text protocol driver

6. **utils**: perft, tactical positions and self-play

Rules not modelled: castling, en passant, under-promotion, repetition and
the fifty-move rule.

## Quick Start

### As a Python Library

```python
from pawnstorm.board import starting_board, Coordinate

board = starting_board()
board.move_piece(4, 6, 4, 4)            # White plays e2-e4
result = board.best_move(depth=3)       # Black's reply
print(result.uci, result.score)
```

### As a Text Engine

```bash
python -m pawnstorm.uci
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from pawnstorm.board import Board, Coordinate, Piece, PieceKind, starting_board
from pawnstorm.evaluation import Evaluator, MaterialMobilityEvaluator
from pawnstorm.search import alphabeta, best_move, best_move_for
from pawnstorm.game import GameSession, GameStatus

__all__ = [
    'Board',
    'Coordinate',
    'Piece',
    'PieceKind',
    'starting_board',
    'Evaluator',
    'MaterialMobilityEvaluator',
    'alphabeta',
    'best_move',
    'best_move_for',
    'GameSession',
    'GameStatus',
]
