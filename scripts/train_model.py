import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from pertok.config import Config, TrainerConfig, load_config
from pertok.io_utils import load_corpus_lines, save_weights
from pertok.trainer import BoundaryTrainer


def resolve_trainer_config(args: argparse.Namespace, cfg: Config) -> TrainerConfig:
    """Applies command-line overrides on top of the configured trainer settings."""
    overrides = {}
    if args.iterations is not None:
        overrides["iteration_count"] = args.iterations
    if args.shuffle is not None:
        overrides["shuffle"] = args.shuffle
    if args.seed is not None:
        overrides["seed"] = args.seed
    return replace(cfg.trainer, **overrides)


def main():
    """
    Main entry point for the command-line model training script.

    This script orchestrates the training process:
    1.  Parsing command-line arguments for the corpus path, output path and
        training parameters.
    2.  Loading the base configuration, when a config file is present.
    3.  Reading the pipe-annotated corpus.
    4.  Running `BoundaryTrainer` for the configured number of epochs.
    5.  Saving the averaged weights to `model_weights.json`.
    """
    parser = argparse.ArgumentParser(
        description="Train the averaged-perceptron boundary model from a pipe-annotated corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--corpus", type=str, required=True, help="Path to the annotated training corpus.")
    parser.add_argument("--weights", type=str, required=True, help="Output path for model_weights.json.")
    parser.add_argument("--config", default="config.yaml", help="Path to the configuration YAML file.")
    parser.add_argument("--iterations", type=int, help="Number of training epochs. Overrides the config.")
    parser.add_argument("--shuffle", dest="shuffle", action="store_true", help="Shuffle sentences before every epoch.")
    parser.add_argument("--no-shuffle", dest="shuffle", action="store_false", help="Keep corpus order in every epoch.")
    parser.add_argument("--seed", type=int, help="Random seed for shuffling.")
    parser.set_defaults(shuffle=None)
    args = parser.parse_args()

    try:
        if Path(args.config).exists():
            cfg = load_config(args.config)
        else:
            print(f"Warning: Config file {args.config} not found. Using default trainer settings.")
            cfg = Config()

        trainer_cfg = resolve_trainer_config(args, cfg)
        lines = load_corpus_lines(args.corpus)
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(lines)} lines from {args.corpus}.")
    print(
        f"Training for {trainer_cfg.iteration_count} iterations"
        f" (shuffle={trainer_cfg.shuffle}, seed={trainer_cfg.seed})."
    )

    trainer = BoundaryTrainer(trainer_cfg)
    segmenter = trainer.train(lines)

    if trainer_cfg.iteration_count == 0:
        print("\nWarning: Training ran for zero iterations. The saved model is empty.")
    elif trainer.step_count == 0:
        print("\nWarning: The corpus contained no boundary decisions. The saved model is empty.")

    save_weights(args.weights, segmenter.weights)
    print(f"\nSuccessfully saved {len(segmenter.weights)} feature weights to {args.weights}")

if __name__ == "__main__":
    main()
