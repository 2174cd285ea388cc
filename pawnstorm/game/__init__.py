"""
Game Module

Turn handling, pawn promotion and game-state reporting on top of the board
and search modules.
"""

from pawnstorm.game.session import GameSession, GameStatus, IllegalMoveError

__all__ = ['GameSession', 'GameStatus', 'IllegalMoveError']
