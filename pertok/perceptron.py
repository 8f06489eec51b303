"""A sparse averaged perceptron for binary boundary decisions.

The model keeps two string-keyed tables: the raw weights, and an accumulator
of ``delta * step`` for every update. Averaging at the end of training uses the
standard trick of subtracting ``accumulator / total_steps`` from the final raw
weights, which equals the mean of the weight vector over every step without
having to sum it after each example.

Both tables are sparse: a feature with no entry has weight 0, and any entry
that becomes exactly 0 is deleted.
"""
from __future__ import annotations
from typing import Dict, Iterable, Mapping

from .types import AverageAccumulator, WeightTable


def score_features(weights: Mapping[str, float], features: Iterable[str]) -> float:
    """Sums the weights of ``features``; unknown features contribute 0."""
    return sum(weights.get(f, 0.0) for f in features)


def _increment(table: Dict[str, float], key: str, amount: float) -> None:
    value = table.get(key, 0.0) + amount
    if value == 0.0:
        table.pop(key, None)
    else:
        table[key] = value


class AveragedPerceptron:
    """
    Scores feature sets and learns from its mistakes online.

    Attributes:
        weights: The raw, current weight of every feature seen with a non-zero
                 weight.
        averages: The step-weighted sum of updates per feature, used only by
                  `finalize`.
    """
    def __init__(self, weights: Mapping[str, float] | None = None):
        self.weights: WeightTable = dict(weights) if weights else {}
        self.averages: AverageAccumulator = {}

    def score(self, features: Iterable[str]) -> float:
        return score_features(self.weights, features)

    def predict(self, features: Iterable[str]) -> bool:
        """True when the features score strictly above zero (a boundary)."""
        return self.score(features) > 0

    def update(self, features: Iterable[str], delta: float, step: int) -> None:
        """
        Applies a perceptron correction to every feature in ``features``.

        Args:
            features: The features of the misclassified example.
            delta: ``+1`` for a missed boundary, ``-1`` for a false one.
            step: The global update counter at the time of the mistake. It is
                  used to weight the accumulator so that averaging favours
                  weights that survived longer.
        """
        for feature in features:
            _increment(self.weights, feature, delta)
            _increment(self.averages, feature, delta * step)

    def finalize(self, total_steps: int) -> WeightTable:
        """
        Produces the averaged weight table for deployment.

        Args:
            total_steps: The number of decisions seen during training.

        Returns:
            A new dictionary mapping each feature to
            ``weight - accumulator / total_steps``. Features whose averaged
            weight is exactly 0 are left out. With ``total_steps == 0`` nothing
            was learned and a copy of the raw weights is returned.
        """
        if total_steps <= 0:
            return dict(self.weights)
        averaged: WeightTable = {}
        for feature, weight in self.weights.items():
            value = weight - self.averages.get(feature, 0.0) / total_steps
            if value != 0.0:
                averaged[feature] = value
        return averaged
