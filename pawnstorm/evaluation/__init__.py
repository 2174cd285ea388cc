"""
Evaluation Module

This module provides position evaluation functions for the engine. The key
design principle is that evaluators are SWAPPABLE - the search algorithm
works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialMobilityEvaluator: Material balance plus mobility balance

Data Flow:
    Board -> evaluator.evaluate() -> int
                                     Positive = White advantage
                                     Negative = Black advantage
"""

from pawnstorm.evaluation.base import Evaluator
from pawnstorm.evaluation.material import (
    MaterialMobilityEvaluator,
    material_score,
    mobility_score,
)

__all__ = ['Evaluator', 'MaterialMobilityEvaluator', 'material_score', 'mobility_score']
