"""Static character-class tables used by the segmenter and the trainer.

Every character falls into exactly one of three classes:

*   ``SINGLE``: symbols and punctuation that always form a one-character token.
*   ``DECISION``: ambiguous punctuation (apostrophe, hyphen, period, ...) whose
    role depends on context and is resolved by the boundary classifier.
*   ``ORDINARY``: everything else. Whitespace is ordinary here; the segmenter
    checks for it separately.

Whitespace follows the narrower rule of `is_whitespace`: the no-break spaces
(U+00A0, U+2007, U+202F) and NEXT LINE (U+0085) are not separators, so a
number and its unit joined by a no-break space stay one token.

Membership is answered with boolean bit-vectors sized to the largest codepoint
of each literal set, so lookups are O(1) and codepoints beyond a vector are
ordinary. The two literal sets share ``+ - . / : @``; for those characters the
decision class wins, otherwise the classifier would never be consulted for
periods and hyphens.
"""
from __future__ import annotations
import numpy as np

from .types import CharClass

SINGLE_TOKEN_CHARS = (
    "!\"#$%()*+,-./:;<=>?@[\\]^_{|}~¡¢£¤¥¦§¨©ª«¬®¯"
    "°±²³´µ¶·¸¹º»¼½¾¿"
)
BOUNDARY_DECISION_CHARS = "'+-./:@&"
# Characters str.isspace accepts that must not separate tokens.
NON_BREAKING_SPACES = "\u00a0\u2007\u202f\u0085"


def build_lookup(characters: str) -> np.ndarray:
    """
    Builds a read-only boolean bit-vector marking the given characters.

    Args:
        characters: The literal set of characters to mark.

    Returns:
        A numpy ``bool`` array of length ``max(codepoint) + 1`` with ``True`` at
        each member's codepoint.
    """
    if not characters:
        return np.zeros(0, dtype=bool)
    codepoints = [ord(c) for c in characters]
    lookup = np.zeros(max(codepoints) + 1, dtype=bool)
    lookup[codepoints] = True
    lookup.setflags(write=False)
    return lookup


def _member(lookup: np.ndarray, char: str) -> bool:
    cp = ord(char)
    return cp < lookup.shape[0] and bool(lookup[cp])


_SINGLE_TOKEN_LOOKUP = build_lookup(SINGLE_TOKEN_CHARS)
_BOUNDARY_DECISION_LOOKUP = build_lookup(BOUNDARY_DECISION_CHARS)


def is_boundary_decision(char: str) -> bool:
    """True if ``char`` is ambiguous punctuation resolved by the classifier."""
    return _member(_BOUNDARY_DECISION_LOOKUP, char)


def is_single_token(char: str) -> bool:
    """True if ``char`` always becomes its own one-character token."""
    return _member(_SINGLE_TOKEN_LOOKUP, char) and not is_boundary_decision(char)


def class_of(char: str) -> CharClass:
    if is_boundary_decision(char):
        return "DECISION"
    if _member(_SINGLE_TOKEN_LOOKUP, char):
        return "SINGLE"
    return "ORDINARY"


def is_whitespace(char: str) -> bool:
    """True if ``char`` separates tokens; no-break spaces do not."""
    return char.isspace() and char not in NON_BREAKING_SPACES
