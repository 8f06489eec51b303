"""Scores a trained segmenter against an annotated corpus.

Every ambiguous punctuation character in the corpus becomes one row of a
decision table holding the classifier's score, its verdict and the annotated
truth. Precision, recall and F1 are computed for the "boundary" outcome, both
overall and per character, so it is easy to see which punctuation the model
still struggles with.
"""
from __future__ import annotations
from typing import Any, Dict, List, Sequence
import pandas as pd
from tqdm import tqdm

from .char_classes import is_boundary_decision
from .errors import MarkupError
from .markup import parse_annotated_line
from .segmenter import Segmenter

DECISION_COLUMNS = ["line", "offset", "char", "context", "score", "predicted", "expected"]

def decision_table(segmenter: Segmenter, lines: Sequence[str]) -> pd.DataFrame:
    """
    Builds one row per boundary decision in ``lines``.

    Blank and malformed lines are skipped, as during training.

    Args:
        segmenter: The trained segmenter to evaluate.
        lines: Pipe-annotated reference lines.

    Returns:
        A DataFrame with the columns in `DECISION_COLUMNS`. ``context`` holds
        up to three characters on each side of the decision character.
    """
    rows: List[Dict[str, Any]] = []
    for line_no, line in enumerate(tqdm(lines, desc="Evaluating"), start=1):
        if not line.strip():
            continue
        try:
            sentence = parse_annotated_line(line)
        except MarkupError as e:
            print(f"\nWarning: Skipping line {line_no}: {e}")
            continue

        text = sentence.text
        for j, chr_ in enumerate(text):
            if not is_boundary_decision(chr_):
                continue
            score = segmenter.score(text, j)
            rows.append({
                "line": line_no,
                "offset": j,
                "char": chr_,
                "context": text[max(0, j - 3):j + 4],
                "score": score,
                "predicted": score > 0,
                "expected": sentence.is_boundary(j),
            })
    return pd.DataFrame(rows, columns=DECISION_COLUMNS)

def _prf(df: pd.DataFrame) -> Dict[str, float]:
    tp = int((df["predicted"] & df["expected"]).sum())
    fp = int((df["predicted"] & ~df["expected"]).sum())
    fn = int((~df["predicted"] & df["expected"]).sum())
    precision = tp / (tp + fp) if tp + fp else 0.0
    recall = tp / (tp + fn) if tp + fn else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    accuracy = float((df["predicted"] == df["expected"]).mean()) if len(df) else 0.0
    return {
        "decisions": int(len(df)),
        "accuracy": accuracy,
        "precision": precision,
        "recall": recall,
        "f1": f1,
    }

def summarize(df: pd.DataFrame) -> Dict[str, Any]:
    """
    Computes boundary precision, recall, F1 and accuracy.

    Returns:
        A dictionary with an ``overall`` entry and a ``by_char`` mapping from
        each decision character to the same metrics.
    """
    df = df.astype({"predicted": bool, "expected": bool})
    return {
        "overall": _prf(df),
        "by_char": {str(ch): _prf(group) for ch, group in df.groupby("char")},
    }

def disagreements(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Returns the rows where the verdict differs from the annotation."""
    wrong = df[df["predicted"] != df["expected"]]
    return wrong.to_dict(orient="records")
