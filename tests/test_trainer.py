"""Tests for online training of the boundary classifier."""
from __future__ import annotations

from pathlib import Path

import pytest

from pertok.config import TrainerConfig
from pertok.features import extract_features
from pertok.trainer import BoundaryTrainer, train

CORPUS = ["Dr. Smith arrived|."]


def test_learns_abbreviation_versus_sentence_end():
    trainer = BoundaryTrainer(TrainerConfig(iteration_count=5))
    seg = trainer.train(CORPUS)

    assert seg.tokenize("Dr. Smith arrived.") == ["Dr.", "Smith", "arrived", "."]
    # Two decisions per epoch; one mistake in each of the first two epochs.
    assert trainer.step_count == 10
    assert [s.mistakes for s in trainer.history] == [1, 1, 0, 0, 0]
    assert trainer.history[-1].accuracy == 1.0


def test_averaged_weights_match_update_history():
    trainer = BoundaryTrainer(TrainerConfig(iteration_count=5))
    seg = trainer.train(CORPUS)

    # Sentence-final features were set to 1 at step 2 and never touched again.
    assert seg.weights["1n:_"] == pytest.approx(1 - 2 / 10)
    # Abbreviation features were set to -1 at step 3.
    assert seg.weights["1s:True"] == pytest.approx(-1 + 3 / 10)
    # "1u:False" went +1 then -1 and is absent from the final table.
    assert "1u:False" not in seg.weights


def test_separable_feature_converges():
    # "1n:_" is present exactly on the true boundaries.
    lines = ["a-b|.", "x-y|.", "p/q|.", "k:l|."]
    seg = BoundaryTrainer(TrainerConfig(iteration_count=10)).train(lines)

    assert seg.weights["1n:_"] > 0
    for text in ("a-b.", "x-y.", "p/q.", "k:l."):
        assert seg.score(text, 1) <= 0
        assert seg.score(text, 3) > 0
        assert seg.tokenize(text) == [text[:3], "."]


def test_learned_boundary_inside_word():
    lines = ["Ankara|'da yaşıyorum", "İzmir|'de", "rock'n'roll"] * 3
    seg = BoundaryTrainer(TrainerConfig(iteration_count=10)).train(lines)

    assert seg.tokenize("Ankara'da") == ["Ankara", "'da"]
    assert seg.tokenize("rock'n'roll") == ["rock'n'roll"]


def test_no_zero_entries_after_training():
    trainer = BoundaryTrainer(TrainerConfig(iteration_count=7, shuffle=True, seed=3))
    seg = trainer.train(["a-b|.", "well-known", "Dr. Smith arrived|.", "3.5|."])

    assert all(v != 0.0 for v in trainer.model.weights.values())
    assert all(v != 0.0 for v in trainer.model.averages.values())
    assert all(v != 0.0 for v in seg.weights.values())


def test_empty_corpus_yields_untrained_segmenter():
    trainer = BoundaryTrainer()
    seg = trainer.train(["", "   "])

    assert trainer.step_count == 0
    assert dict(seg.weights) == {}
    assert seg.tokenize("a.b c-d") == ["a.b", "c-d"]


def test_zero_iterations_yields_untrained_segmenter(capsys):
    trainer = BoundaryTrainer(TrainerConfig(iteration_count=0))
    seg = trainer.train(CORPUS)

    assert trainer.step_count == 0
    assert trainer.history == []
    assert dict(seg.weights) == {}
    assert "Iteration =" not in capsys.readouterr().out
    assert seg.tokenize("Dr. Smith arrived.") == ["Dr.", "Smith", "arrived."]


def test_malformed_lines_are_skipped_with_warning(capsys):
    noisy = ["Dr. Smith arrived|.", "bad||line", "   ", "trailing|"]
    cfg = TrainerConfig(iteration_count=5)

    noisy_trainer = BoundaryTrainer(cfg)
    noisy_seg = noisy_trainer.train(noisy)
    clean_seg = BoundaryTrainer(cfg).train(CORPUS)

    assert dict(noisy_seg.weights) == dict(clean_seg.weights)
    assert noisy_trainer.skipped_lines == [2, 4]
    assert [s.sentences for s in noisy_trainer.history] == [1] * 5
    out = capsys.readouterr().out
    assert out.count("Warning: Skipping line 2:") == 1
    assert out.count("Warning: Skipping line 4:") == 1


def test_shuffled_training_reports_corpus_line_numbers(capsys):
    lines = ["a-b|.", "bad||line", "x-y|.", "Dr. Smith arrived|.", "3.5|."]
    trainer = BoundaryTrainer(TrainerConfig(iteration_count=4, shuffle=True, seed=5))

    trainer.train(lines)

    out = capsys.readouterr().out
    assert trainer.skipped_lines == [2]
    assert out.count("Warning: Skipping") == 1
    assert "Warning: Skipping line 2:" in out
    assert [s.sentences for s in trainer.history] == [4] * 4


def test_seeded_shuffle_is_reproducible():
    lines = ["a-b|.", "well-known", "Dr. Smith arrived|.", "3.5|.", "Ankara|'da"]
    cfg = TrainerConfig(iteration_count=6, shuffle=True, seed=11)

    first = BoundaryTrainer(cfg).train(lines)
    second = BoundaryTrainer(cfg).train(lines)

    assert dict(first.weights) == dict(second.weights)


def test_shuffle_does_not_modify_callers_list():
    lines = ["a|.", "b|.", "c|.", "d|."]
    BoundaryTrainer(TrainerConfig(iteration_count=3, shuffle=True, seed=1)).train(lines)

    assert lines == ["a|.", "b|.", "c|.", "d|."]


def test_trainer_only_evaluates_decision_characters():
    trainer = BoundaryTrainer(TrainerConfig(iteration_count=1))
    trainer.train(["abc def, ghi (jkl)"])

    assert trainer.step_count == 0


def test_train_from_corpus_file(tmp_path: Path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("Dr. Smith arrived|.\n\nwell-known\n", encoding="utf-8")

    seg = train(str(corpus), TrainerConfig(iteration_count=5))

    assert seg.tokenize("Dr. Smith arrived.") == ["Dr.", "Smith", "arrived", "."]
    assert seg.tokenize("well-known") == ["well-known"]


def test_train_missing_corpus_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        train(str(tmp_path / "missing.txt"))


def test_features_used_in_training_match_inference():
    seg = BoundaryTrainer(TrainerConfig(iteration_count=5)).train(CORPUS)
    text = "Dr. Smith arrived."

    expected = sum(seg.weights.get(f, 0.0) for f in extract_features(text, 17))
    assert seg.score(text, 17) == pytest.approx(expected)
