"""Exception types raised by the tokenizer and its training pipeline."""
from __future__ import annotations


class MarkupError(ValueError):
    """Raised when an annotated training line has malformed boundary markers."""


class ModelLoadError(RuntimeError):
    """
    Raised when a serialized weight table cannot be loaded.

    Callers that explicitly request a model must receive this error instead of
    silently getting an untrained segmenter.
    """
