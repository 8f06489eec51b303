import argparse
import sys
from pathlib import Path

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from pertok.config import load_config
from pertok.errors import ModelLoadError
from pertok.io_utils import load_corpus_lines, save_tokens
from pertok.segmenter import Segmenter

def main():
    """
    Main command-line interface for the tokenizer.

    This script performs the following steps:
    1.  Loads the configuration file (`config.yaml`) to find the model weights,
        unless `--weights` points at a model directly.
    2.  Loads the trained boundary model into a `Segmenter`.
    3.  Tokenizes every line of the input text file.
    4.  Writes the tokens as JSON, one list of tokens per input line.
    """
    parser = argparse.ArgumentParser(
        description="Split text into tokens using a trained boundary model.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to the input UTF-8 text file, one sentence per line."
    )
    parser.add_argument(
        "--output",
        required=True,
        help="Path to write the output tokens JSON file."
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the configuration YAML file."
    )
    parser.add_argument(
        "--weights",
        help="Path to the model weights JSON file. Overrides paths.model_weights from the config."
    )
    parser.add_argument(
        "--print",
        dest="print_tokens",
        action="store_true",
        help="Also print the tokens of each line, separated by spaces."
    )
    args = parser.parse_args()

    try:
        # 1. Locate the model
        if args.weights:
            weights_path = Path(args.weights)
        else:
            print(f"Loading configuration from {args.config}...")
            cfg = load_config(args.config)
            weights_path = Path(args.config).parent / cfg.paths["model_weights"]

        # 2. Load the model
        print(f"Loading model weights from {weights_path}...")
        segmenter = Segmenter.from_weights_file(str(weights_path))

        # 3. Tokenize
        print(f"Loading text from {args.input}...")
        lines = load_corpus_lines(args.input)
        tokens = [segmenter.tokenize(line) for line in lines]
        if args.print_tokens:
            for line_tokens in tokens:
                print(" ".join(line_tokens))

        # 4. Write output
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_tokens(str(output_path), tokens)
        print(f"\nSuccessfully wrote tokens for {len(tokens)} lines to {args.output}")

    except (FileNotFoundError, ValueError, TypeError, KeyError, ModelLoadError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
