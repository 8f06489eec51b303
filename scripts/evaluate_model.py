"""Command-line script for evaluating a trained boundary model.

The script compares the classifier's verdict at every ambiguous punctuation
character of a pipe-annotated reference corpus with the annotation, and
reports precision, recall and F1 for boundaries, overall and per character.
It can also write every disagreement to a CSV file for error analysis.
"""
import argparse
import csv
import json
import sys
from pathlib import Path

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from pertok.errors import ModelLoadError
from pertok.evaluation import DECISION_COLUMNS, decision_table, disagreements, summarize
from pertok.io_utils import load_corpus_lines
from pertok.segmenter import Segmenter

def main():
    """
    Main entry point for the command-line model evaluation script.

    Loads the model and the annotated reference corpus, builds the decision
    table, prints the metrics as JSON and optionally saves the disagreements.
    """
    parser = argparse.ArgumentParser(
        description="Evaluate boundary decisions against an annotated reference corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--corpus", required=True, help="Path to the pipe-annotated reference corpus.")
    parser.add_argument("--weights", required=True, help="Path to the model_weights.json file to evaluate.")
    parser.add_argument("--disagreements-out", help="Optional: Path to write a detailed disagreements CSV file.")
    args = parser.parse_args()

    try:
        print("Loading files...")
        segmenter = Segmenter.from_weights_file(args.weights)
        lines = load_corpus_lines(args.corpus)

        df = decision_table(segmenter, lines)
        if df.empty:
            print("\nNo boundary decisions found in the reference corpus.")
            return

        print("\n--- Boundary Metrics (vs. Reference) ---")
        report = summarize(df)
        print(json.dumps(report, indent=2, ensure_ascii=False))

        wrong = disagreements(df)
        if args.disagreements_out and wrong:
            Path(args.disagreements_out).parent.mkdir(parents=True, exist_ok=True)
            print(f"\nWriting {len(wrong)} disagreements to {args.disagreements_out}...")
            with open(args.disagreements_out, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=DECISION_COLUMNS)
                writer.writeheader()
                writer.writerows(wrong)

    except (FileNotFoundError, ValueError, ModelLoadError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
