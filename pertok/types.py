from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Literal

__all__ = [
    "CharClass",
    "Span",
    "FeatureSet",
    "WeightTable",
    "AverageAccumulator",
    "AnnotatedSentence",
]

CharClass = Literal["SINGLE", "DECISION", "ORDINARY"]

FeatureSet = List[str]
WeightTable = Dict[str, float]
AverageAccumulator = Dict[str, float]

@dataclass(frozen=True)
class Span:
    """
    A half-open character interval ``[start, end)`` over a text buffer.

    Spans are produced by the segmenter for a single input string and are only
    meaningful together with that string. They are ordered and never overlap.

    Attributes:
        start: Index of the first character of the token.
        end: Index one past the last character of the token.
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Returns the token text this span covers in ``text``."""
        return text[self.start:self.end]

@dataclass(frozen=True)
class AnnotatedSentence:
    """
    A training sentence with its ground-truth token boundaries.

    Built by stripping the ``|`` markers from an annotated corpus line. Each
    marker becomes an offset into the stripped text: the character at that
    offset starts a new token.

    Attributes:
        text: The sentence with all boundary markers removed.
        boundaries: Offsets in ``text`` where a token boundary was marked.
    """
    text: str
    boundaries: FrozenSet[int] = frozenset()

    def is_boundary(self, offset: int) -> bool:
        return offset in self.boundaries

