"""Provides utility functions for reading corpora and (de)serializing models.

The boundary model is stored as a flat JSON object mapping feature strings to
weights, e.g. ``{"1p:r": 0.84, "2n:__": -1.2}``. `load_weights` validates that
shape strictly: a model file that was explicitly asked for must load cleanly or
raise `ModelLoadError`.
"""
import json
import math
from pathlib import Path
from typing import Dict, List, Mapping

from .errors import ModelLoadError

def load_corpus_lines(path: str) -> List[str]:
    """
    Reads an annotated training corpus, one sentence per line.

    Args:
        path: The path to a UTF-8 text file.

    Returns:
        The lines of the file without their line terminators. Blank lines are
        kept; the trainer decides what to skip.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Corpus file not found at: {path}")

def save_weights(path: str, weights: Mapping[str, float]) -> None:
    """
    Saves a weight table as a JSON object.

    Keys are sorted so two runs with the same result produce identical files.
    Parent directories are created as needed.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(dict(weights), f, ensure_ascii=False, indent=2, sort_keys=True)

def load_weights(path: str) -> Dict[str, float]:
    """
    Loads a weight table saved by `save_weights`.

    Args:
        path: The path to the JSON model file.

    Returns:
        A dictionary mapping feature strings to float weights.

    Raises:
        ModelLoadError: If the file is missing or unreadable, is not UTF-8 or
                        valid JSON, is not a JSON object, or holds a
                        non-numeric or non-finite weight.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ModelLoadError(f"Model file not found at: {path}")
    except json.JSONDecodeError as e:
        raise ModelLoadError(f"Error decoding JSON from {path}: {e}")
    except UnicodeDecodeError as e:
        raise ModelLoadError(f"Model file {path} is not valid UTF-8: {e}")
    except OSError as e:
        raise ModelLoadError(f"Could not read model file {path}: {e}")

    if not isinstance(data, dict):
        raise ModelLoadError(f"Expected a JSON object of feature weights in {path}")

    weights = {}
    for feature, value in data.items():
        # bool is an int subclass but never a valid weight.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ModelLoadError(f"Weight for feature '{feature}' in {path} is not a number: {value!r}")
        if not math.isfinite(value):
            raise ModelLoadError(f"Weight for feature '{feature}' in {path} is not finite.")
        if value != 0:
            weights[feature] = float(value)
    return weights

def save_tokens(path: str, tokens: List[List[str]]) -> None:
    """
    Saves tokenized lines to a JSON file under a "tokens" key.

    Args:
        path: The destination path for the output JSON file.
        tokens: One list of token strings per input line.
    """
    data = {"tokens": tokens}

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
