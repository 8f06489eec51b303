"""Feature extraction for boundary decisions.

A boundary decision is made at a single ambiguous punctuation character. The
classifier only sees a narrow window around it: the neighbouring characters,
the two-character windows on each side, the case of the preceding character and
whether whitespace follows. Each feature is a plain string tagged with a prefix
naming its slot, so values from different slots never share a weight.
"""
from __future__ import annotations
from dataclasses import dataclass

from .char_classes import is_whitespace
from .types import FeatureSet

SENTINEL = "_"

PREFIX_PREV_UPPER = "1u"
PREFIX_NEXT_SPACE = "1s"
PREFIX_PREV_LETTER = "1p"
PREFIX_NEXT_LETTER = "1n"
PREFIX_PREV_TWO = "2p"
PREFIX_NEXT_TWO = "2n"

@dataclass(frozen=True)
class BoundaryContext:
    """
    The local context around a candidate boundary character.

    Attributes:
        current: The candidate character itself.
        previous_letter: The character before it, or ``"_"`` at the start.
        next_letter: The character after it, or ``"_"`` at the end.
        previous_two: The two characters before it, or ``"__"``.
        next_two: The two characters after it, or ``"__"``.
    """
    current: str
    previous_letter: str
    next_letter: str
    previous_two: str
    next_two: str

    @classmethod
    def at(cls, text: str, position: int) -> "BoundaryContext":
        """
        Captures the context of ``text[position]``.

        Args:
            text: The sentence being segmented or trained on.
            position: Index of the candidate character.

        Raises:
            IndexError: If ``position`` is outside ``text``.
        """
        if not 0 <= position < len(text):
            raise IndexError(f"Position {position} out of range for text of length {len(text)}")
        n = len(text)
        return cls(
            current=text[position],
            previous_letter=text[position - 1] if position > 0 else SENTINEL,
            next_letter=text[position + 1] if position + 1 < n else SENTINEL,
            previous_two=text[position - 2:position] if position > 2 else SENTINEL * 2,
            next_two=text[position + 1:position + 3] if position + 3 <= n else SENTINEL * 2,
        )

    def features(self) -> FeatureSet:
        return [
            f"{PREFIX_PREV_UPPER}:{self.previous_letter.isupper()}",
            f"{PREFIX_NEXT_SPACE}:{is_whitespace(self.next_letter)}",
            f"{PREFIX_PREV_LETTER}:{self.previous_letter}",
            f"{PREFIX_NEXT_LETTER}:{self.next_letter}",
            f"{PREFIX_PREV_TWO}:{self.previous_two}",
            f"{PREFIX_NEXT_TWO}:{self.next_two}",
        ]

def extract_features(text: str, position: int) -> FeatureSet:
    """Returns the six boundary features for the character at ``position``."""
    return BoundaryContext.at(text, position).features()
