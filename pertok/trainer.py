"""Online training of the boundary classifier.

`BoundaryTrainer` runs the averaged perceptron over a pipe-annotated corpus for
a fixed number of epochs. Every ambiguous punctuation character in every
sentence is one training decision: the model predicts boundary or no boundary,
the prediction is compared with the annotation, and mistakes are corrected
immediately. Updates are strictly sequential, so a run cannot be split across
workers without changing the result.
"""
from __future__ import annotations
from dataclasses import dataclass
import random
from typing import List, Sequence
from tqdm import tqdm

from .char_classes import is_boundary_decision
from .config import TrainerConfig
from .errors import MarkupError
from .features import extract_features
from .io_utils import load_corpus_lines
from .markup import parse_annotated_line
from .perceptron import AveragedPerceptron
from .segmenter import Segmenter
from .types import AnnotatedSentence

@dataclass
class EpochStats:
    """Counters collected over one pass of the corpus."""
    epoch: int
    sentences: int = 0
    decisions: int = 0
    mistakes: int = 0

    @property
    def accuracy(self) -> float:
        if not self.decisions:
            return 1.0
        return 1 - self.mistakes / self.decisions


class BoundaryTrainer:
    """
    Trains a `Segmenter` from annotated sentences.

    Attributes:
        config: The immutable settings of this run.
        model: The perceptron being trained. Owned by this trainer alone.
        step_count: The number of decisions seen so far across all epochs.
        history: One `EpochStats` per finished epoch.
        skipped_lines: Corpus line numbers (1-based) of malformed lines that
                       were left out of training.
    """
    def __init__(self, config: TrainerConfig | None = None):
        self.config = config or TrainerConfig()
        self.model = AveragedPerceptron()
        self.step_count = 0
        self.history: List[EpochStats] = []
        self.skipped_lines: List[int] = []
        self._rng = random.Random(self.config.seed)

    def train(self, lines: Sequence[str]) -> Segmenter:
        """
        Runs all epochs over ``lines`` and returns the trained segmenter.

        The corpus is parsed once before the first epoch. Blank lines are
        skipped silently. Lines with malformed markup are skipped with one
        warning naming their corpus line number, and the numbers are kept in
        `skipped_lines`. A corpus without any usable line yields a segmenter
        with no weights, which never predicts a boundary.

        Args:
            lines: Raw annotated lines, e.g. from `load_corpus_lines`.

        Returns:
            A `Segmenter` bound to the averaged weights.
        """
        sentences: List[AnnotatedSentence] = []
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                sentences.append(parse_annotated_line(line))
            except MarkupError as e:
                print(f"Warning: Skipping line {line_no}: {e}")
                self.skipped_lines.append(line_no)

        for i in range(self.config.iteration_count):
            print(f"Iteration = {i + 1}")
            if self.config.shuffle:
                self._rng.shuffle(sentences)

            stats = EpochStats(epoch=i + 1)
            for sentence in tqdm(sentences, desc=f"Epoch {i + 1}", leave=False):
                stats.sentences += 1
                self._train_sentence(sentence.text, sentence.boundaries, stats)

            print(
                f"Epoch {stats.epoch}: {stats.decisions} decisions, "
                f"{stats.mistakes} mistakes ({stats.accuracy:.2%} accuracy)"
            )
            self.history.append(stats)

        return Segmenter(self.model.finalize(self.step_count))

    def _train_sentence(self, text: str, boundaries: frozenset[int], stats: EpochStats) -> None:
        for j, chr_ in enumerate(text):
            if not is_boundary_decision(chr_):
                continue

            features = extract_features(text, j)
            score = self.model.score(features)
            self.step_count += 1
            stats.decisions += 1

            update = 0
            # Predicted no boundary, but the annotation has one.
            if score <= 0 and j in boundaries:
                update = 1
            # Predicted a boundary that the annotation does not have.
            elif score > 0 and j not in boundaries:
                update = -1

            if update != 0:
                stats.mistakes += 1
                self.model.update(features, update, self.step_count)


def train(corpus_path: str, config: TrainerConfig | None = None) -> Segmenter:
    """
    Trains a segmenter from an annotated corpus file.

    Args:
        corpus_path: Path to a UTF-8 file with one annotated sentence per line.
        config: Training settings; defaults to `TrainerConfig()`.

    Returns:
        The trained `Segmenter`.

    Raises:
        FileNotFoundError: If the corpus file does not exist.
    """
    lines = load_corpus_lines(corpus_path)
    print(f"Loaded {len(lines)} lines from {corpus_path}")
    return BoundaryTrainer(config).train(lines)
