"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between evaluators without
modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always scores from White's perspective
    3. Positive = White advantage, Negative = Black advantage

Convention:
    - Scores are integers in piece-value units (pawn = 1, queen = 9)
    - Return 0 for perfectly equal positions
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pawnstorm.board.chessboard import Board


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.
    """

    @abstractmethod
    def evaluate(self, board: "Board") -> int:
        """
        Evaluate a position from White's perspective.

        Args:
            board: Board to evaluate

        Returns:
            int: Evaluation, positive favours White
        """
        pass

    def __call__(self, board: "Board") -> int:
        return self.evaluate(board)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
