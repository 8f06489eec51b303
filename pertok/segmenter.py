"""Rule-based token segmentation with a learned boundary classifier.

The `Segmenter` walks a string once, left to right. Whitespace and symbol
characters are handled by fixed rules; only ambiguous punctuation (see
`char_classes.BOUNDARY_DECISION_CHARS`) is handed to the averaged perceptron,
which decides whether that character starts a new token.

A segmenter never mutates its weight table, so one instance can be shared by
any number of callers.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import List, Mapping

from .char_classes import is_boundary_decision, is_single_token, is_whitespace
from .features import extract_features
from .io_utils import load_weights
from .perceptron import score_features
from .types import Span


class Segmenter:
    """
    Splits text into token spans.

    Attributes:
        weights: A read-only view of the finalized perceptron weights.
    """
    def __init__(self, weights: Mapping[str, float] | None = None):
        self.weights: Mapping[str, float] = MappingProxyType(dict(weights or {}))

    @classmethod
    def from_weights_file(cls, path: str) -> "Segmenter":
        """
        Builds a segmenter from a JSON weight file.

        Raises:
            ModelLoadError: If the model cannot be loaded. There is no fallback
                            to an untrained model.
        """
        return cls(load_weights(path))

    def score(self, text: str, position: int) -> float:
        """Returns the classifier score for a boundary before ``text[position]``."""
        return score_features(self.weights, extract_features(text, position))

    def is_boundary(self, text: str, position: int) -> bool:
        return self.score(text, position) > 0

    def segment(self, text: str) -> List[Span]:
        """
        Computes the token spans of ``text``.

        The scan keeps the start of the pending token and closes it when it
        meets whitespace, a single-token symbol, or a decision character the
        classifier marks as a boundary. A symbol is emitted as its own span. A
        decision character that triggers a boundary is not emitted on its own;
        it becomes the first character of the next token.

        Args:
            text: The input string.

        Returns:
            The ordered, non-overlapping spans. Empty for empty or
            whitespace-only input.
        """
        spans: List[Span] = []
        token_start = 0

        for j, chr_ in enumerate(text):
            if is_whitespace(chr_):
                if token_start < j:
                    spans.append(Span(token_start, j))
                token_start = j + 1
                continue
            if is_single_token(chr_):
                if token_start < j:
                    spans.append(Span(token_start, j))
                spans.append(Span(j, j + 1))
                token_start = j + 1
                continue
            if is_boundary_decision(chr_) and self.is_boundary(text, j):
                if token_start < j:
                    spans.append(Span(token_start, j))
                token_start = j

        if token_start < len(text):
            spans.append(Span(token_start, len(text)))
        return spans

    def tokenize(self, text: str) -> List[str]:
        """Returns the token strings of ``text`` in order."""
        return [span.slice(text) for span in self.segment(text)]
