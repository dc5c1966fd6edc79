"""
Heuristic Evaluator - Scores cells for the greedy bot.

Lower scores are better. A cell is scored from its coordinates only:
- Distance: proximity to the nearest side
- Corner penalty: pure corners (two zero coordinates) are inflexible
- Balance: central cells keep several connection options open

Weights can be adjusted to create different play styles.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.coords import Coordinates


@dataclass
class EvaluationWeights:
    """
    Weights for the cell evaluator.

    Higher values = stronger penalty.
    """
    distance_to_side: int = 15  # Per unit of min(x, y, z)
    corner_penalty: int = 25  # Flat, when exactly two coordinates are zero
    imbalance: int = 5  # Per unit of max(x, y, z) - min(x, y, z)


@dataclass
class CellEvaluation:
    """
    Result of evaluating one cell.
    """
    total_score: int
    feature_breakdown: dict[str, int] = field(default_factory=dict)


class HeuristicEvaluator:
    """
    Evaluates cells using weighted heuristics.

    Stateless apart from its weights: the same cell always gets the
    same score.
    """

    def __init__(self, weights: EvaluationWeights | None = None):
        self.weights = weights or EvaluationWeights()

    def score_cell(self, coords: Coordinates) -> int:
        """Score of a cell; lower is better."""
        return self.evaluate(coords).total_score

    def evaluate(self, coords: Coordinates) -> CellEvaluation:
        """Score a cell and report each feature's contribution."""
        values = coords.as_tuple()
        low, high = min(values), max(values)

        features = {
            "distance": self.weights.distance_to_side * low,
            "corner": self.weights.corner_penalty if coords.is_corner() else 0,
            "balance": self.weights.imbalance * (high - low),
        }
        return CellEvaluation(
            total_score=sum(features.values()),
            feature_breakdown=features,
        )
