"""Manages the loading and validation of tokenizer configuration.

This module defines the `TrainerConfig` dataclass holding the knobs of a
training run and the top-level `Config` that also carries model and corpus
paths. `load_config` reads both from a YAML file, filling in defaults for any
key the file leaves out.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import yaml

DEFAULT_ITERATION_COUNT = 5
DEFAULT_SKIP_SPACE_FREQUENCY = 20
DEFAULT_LOWERCASE_FIRST_LETTER_FREQUENCY = 20

@dataclass(frozen=True)
class TrainerConfig:
    """
    Immutable settings for one boundary-classifier training run.

    Attributes:
        iteration_count: Number of passes (epochs) over the corpus. Zero is
                         allowed and yields an untrained model.
        shuffle: Whether to shuffle sentence order before every epoch.
        skip_space_frequency: Reserved for noise injection that drops spaces
                              from one in N training sentences. Not used yet.
        lowercase_first_letter_frequency: Reserved for noise injection that
                              lowercases the first letter of one in N training
                              sentences. Not used yet.
        seed: Optional seed for the shuffle, so runs can be reproduced.
    """
    iteration_count: int = DEFAULT_ITERATION_COUNT
    shuffle: bool = False
    skip_space_frequency: int = DEFAULT_SKIP_SPACE_FREQUENCY
    lowercase_first_letter_frequency: int = DEFAULT_LOWERCASE_FIRST_LETTER_FREQUENCY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.iteration_count < 0:
            raise ValueError(f"iteration_count must not be negative, got {self.iteration_count}.")
        if self.skip_space_frequency < 1 or self.lowercase_first_letter_frequency < 1:
            raise ValueError("Noise frequencies must be positive integers.")

@dataclass
class Config:
    """
    A typed configuration object for the tokenizer tools.

    Attributes:
        trainer: Settings used by `BoundaryTrainer`.
        paths: Paths to the model weights and training corpus, relative to the
               directory of the YAML file they were read from.
    """
    trainer: TrainerConfig = field(default_factory=TrainerConfig)
    paths: dict[str, str] = field(default_factory=dict)

def load_config(path: str = "config.yaml") -> Config:
    """
    Loads and validates the YAML configuration file.

    Args:
        path: The path to the `config.yaml` file.

    Returns:
        A fully populated `Config` object.

    Raises:
        FileNotFoundError: If the file cannot be found.
        ValueError: If the YAML cannot be parsed or a value is invalid.
        TypeError: If the root of the YAML file, or its `trainer` or `paths`
                   section, is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    # An empty file is a valid, all-defaults configuration.
    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    trainer_yaml = y.get("trainer", {}) or {}
    paths_yaml = y.get("paths", {}) or {}
    if not isinstance(trainer_yaml, dict) or not isinstance(paths_yaml, dict):
        raise TypeError(f"'trainer' and 'paths' in {path} must be dictionaries.")

    shuffle = trainer_yaml.get("shuffle", False)
    if not isinstance(shuffle, bool):
        raise ValueError(f"'shuffle' in {path} must be true or false, got {shuffle!r}.")

    seed = trainer_yaml.get("seed")
    try:
        trainer = TrainerConfig(
            iteration_count=int(trainer_yaml.get("iteration_count", DEFAULT_ITERATION_COUNT)),
            shuffle=shuffle,
            skip_space_frequency=int(
                trainer_yaml.get("skip_space_frequency", DEFAULT_SKIP_SPACE_FREQUENCY)
            ),
            lowercase_first_letter_frequency=int(
                trainer_yaml.get(
                    "lowercase_first_letter_frequency",
                    DEFAULT_LOWERCASE_FIRST_LETTER_FREQUENCY,
                )
            ),
            seed=int(seed) if seed is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid trainer settings in {path}: {e}")

    return Config(
        trainer=trainer,
        paths={str(k): str(v) for k, v in paths_yaml.items()},
    )
