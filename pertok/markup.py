"""Parser for pipe-annotated training sentences.

Training lines mark token boundaries with ``|`` placed immediately before the
character that starts a new token::

    Dr. Smith arrived|.
    It cost 3.5 dollars|.

The parser removes the markers and records each one as an offset into the
stripped text.
"""
from __future__ import annotations

from .errors import MarkupError
from .types import AnnotatedSentence

BOUNDARY_MARKER = "|"


def parse_annotated_line(line: str) -> AnnotatedSentence:
    """
    Splits an annotated line into its clean text and boundary offsets.

    Args:
        line: A single corpus line, possibly ending in a newline.

    Returns:
        An `AnnotatedSentence` with the markers removed.

    Raises:
        MarkupError: If the line has more markers than characters, two markers
                     in a row (the same offset marked twice), or a marker
                     with no character after it.
    """
    line = line.rstrip("\r\n")
    marker_count = line.count(BOUNDARY_MARKER)
    text = line.replace(BOUNDARY_MARKER, "")

    if marker_count > len(text):
        raise MarkupError(
            f"{marker_count} boundary markers for a sentence of {len(text)} characters."
        )

    boundaries: set[int] = set()
    offset = 0
    for chr_ in line:
        if chr_ != BOUNDARY_MARKER:
            offset += 1
            continue
        if offset in boundaries:
            raise MarkupError(f"Repeated boundary marker at offset {offset}.")
        if offset >= len(text):
            raise MarkupError(f"Boundary marker at offset {offset} is not followed by a character.")
        boundaries.add(offset)

    return AnnotatedSentence(text=text, boundaries=frozenset(boundaries))
