from __future__ import annotations
from typing import Any, Dict, Iterator, List, Sequence, Tuple

from .char_classes import is_single_token, is_whitespace
from .types import Span

def iter_gaps(text: str, spans: Sequence[Span]) -> Iterator[Tuple[int, int]]:
    """
    Yields the ``(start, end)`` ranges of ``text`` not covered by any span.

    Args:
        text: The segmented text.
        spans: Its spans, in order.

    Yields:
        Half-open ranges between consecutive spans, before the first span and
        after the last one. Empty ranges are not yielded.
    """
    cursor = 0
    for span in spans:
        if span.start > cursor:
            yield (cursor, span.start)
        cursor = max(cursor, span.end)
    if cursor < len(text):
        yield (cursor, len(text))

def validate_spans(text: str, spans: Sequence[Span]) -> Dict[str, Any]:
    """
    Performs sanity checks on the output of `Segmenter.segment`.

    This function checks that:
    -   Spans lie inside the text, are in order and do not overlap.
    -   Everything between spans is whitespace, so no text was dropped.
    -   No multi-character span contains a single-token symbol.
    -   No span starts with whitespace or ends with it.

    Args:
        text: The input that was segmented.
        spans: The spans produced for it.

    Returns:
        A dictionary summarizing the validation results, containing the total
        `issue_count` and a list of `issues`, where each issue is a
        dictionary detailing the problem.
    """
    issues: List[Dict[str, Any]] = []

    # 1. Bounds and ordering
    previous_end = 0
    for i, span in enumerate(spans):
        if span.end > len(text):
            issues.append({
                "type": "out_of_range_error",
                "idx": i,
                "message": f"Span [{span.start}, {span.end}) exceeds text length {len(text)}."
            })
        if span.start < previous_end:
            issues.append({
                "type": "overlap_error",
                "idx": i,
                "message": f"Span [{span.start}, {span.end}) starts before the previous span ends at {previous_end}."
            })
        previous_end = max(previous_end, span.end)

    # 2. Coverage
    for start, end in iter_gaps(text, spans):
        gap = text[start:end]
        if not all(is_whitespace(c) for c in gap):
            issues.append({
                "type": "coverage_error",
                "start": start,
                "end": end,
                "message": f"Characters {gap!r} at [{start}, {end}) are not covered by any span."
            })

    # 3. Token content
    for i, span in enumerate(spans):
        token = span.slice(text)
        if not token:
            continue
        if is_whitespace(token[0]) or is_whitespace(token[-1]):
            issues.append({
                "type": "whitespace_edge_error",
                "idx": i,
                "message": f"Token {token!r} starts or ends with whitespace."
            })
        if len(token) > 1 and any(is_single_token(c) for c in token):
            issues.append({
                "type": "unsplit_symbol_error",
                "idx": i,
                "message": f"Token {token!r} contains a symbol that must be its own token."
            })

    return {"issue_count": len(issues), "issues": issues}
