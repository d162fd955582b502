#!/usr/bin/env python3
"""
Analyse the Wordle solution list:
  1) download (or read) the game script and pull out the word list
  2) letter frequency tables + bar charts
  3) score every (guess, target) pair in a subset of the list
  4) rank guesses by their average score

Usage:
    python -m wordle_analysis.main --subset-size 50 --out-dir wordle_output
    python -m wordle_analysis.main --source-file main.js --full --no-plots
"""

import argparse
import sys
import time
from pathlib import Path

from wordle_analysis.aggregate import overall_mean, summarize
from wordle_analysis.config import CONFIG, load_config_overrides, scoring_weights
from wordle_analysis.corpus import build_corpus, select_subset
from wordle_analysis.cross_compare import cross_compare
from wordle_analysis.errors import WordAnalysisError
from wordle_analysis.letter_stats import letter_counts, positional_counts
from wordle_analysis.plots import (
    plot_guess_ranking,
    plot_letter_frequencies,
    plot_positional_frequencies,
)
from wordle_analysis.report import (
    format_ranking,
    write_letter_stats_csv,
    write_pair_scores_csv,
    write_summaries_csv,
)
from wordle_analysis.word_source import extract_word_list, fetch_source_text, read_source_file


def load_corpus(source_file=None):
    if source_file:
        text = read_source_file(source_file)
    else:
        text = fetch_source_text(CONFIG["source_url"], CONFIG["source_timeout"])

    raw = extract_word_list(text, CONFIG["first_word"], CONFIG["last_word"])
    corpus = build_corpus(raw, CONFIG["word_length"], CONFIG["alphabet"])
    print(f"[corpus] {len(corpus)} words ({len(raw)} in source list)")
    return corpus


def run_analysis(corpus, out_dir: Path, make_plots=True, pairs_csv=False):
    """
    Run stats + cross-comparison on an already built corpus.
    Returns the ranked GuessSummary list.
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    # 1) Letter statistics over the whole corpus
    write_letter_stats_csv(corpus, out_dir / "letter_stats.csv")
    if make_plots:
        plot_letter_frequencies(letter_counts(corpus), out_dir / "letter_frequency.png")
        plot_positional_frequencies(positional_counts(corpus), out_dir / "positional_frequency.png")

    # 2) Cross-compare the subset
    subset = select_subset(
        corpus,
        CONFIG["subset_size"],
        CONFIG["subset_mode"],
        CONFIG["random_seed"],
    )
    n = len(subset)
    print(f"[score] Comparing {n} words ({n * (n - 1)} ordered pairs), "
          f"parallel={CONFIG['parallel_eval']}")
    t0 = time.perf_counter()
    pair_scores = cross_compare(
        subset,
        scoring_weights(CONFIG),
        parallel=CONFIG["parallel_eval"],
        num_workers=CONFIG["num_workers"],
    )
    elapsed = time.perf_counter() - t0
    print(f"[score] Done in {elapsed:.3f}s, overall mean score {overall_mean(pair_scores):.3f}")

    if pairs_csv:
        write_pair_scores_csv(pair_scores, out_dir / "pair_scores.csv")

    # 3) Rank guesses
    summaries = summarize(pair_scores)
    write_summaries_csv(summaries, out_dir / "guess_summary.csv")
    if make_plots:
        plot_guess_ranking(summaries, out_dir / "guess_ranking.png", CONFIG["top_k"])

    print(f"[report] Wrote outputs to {out_dir}")
    return summaries


def build_parser():
    parser = argparse.ArgumentParser(
        description="Letter statistics and guess scoring for the Wordle solution list."
    )
    parser.add_argument("--config", type=str, default=None,
                        help="JSON file with CONFIG overrides.")
    parser.add_argument("--url", type=str, default=None,
                        help="URL of the game script holding the word list.")
    parser.add_argument("--source-file", type=str, default=None,
                        help="Read the game script from a local file instead of downloading it.")
    parser.add_argument("--subset-size", type=int, default=None,
                        help="Number of words to cross-compare.")
    parser.add_argument("--full", action="store_true",
                        help="Cross-compare the whole corpus (slow).")
    parser.add_argument("--subset-mode", choices=["head", "sample"], default=None,
                        help="Take the first N words or a seeded random sample.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for --subset-mode sample.")
    parser.add_argument("--serial", action="store_true",
                        help="Disable the process pool.")
    parser.add_argument("--workers", type=int, default=None,
                        help="Number of worker processes.")
    parser.add_argument("--out-dir", type=str, default=None,
                        help="Directory for CSV and PNG outputs.")
    parser.add_argument("--top-k", type=int, default=None,
                        help="How many top guesses to show.")
    parser.add_argument("--no-plots", action="store_true",
                        help="Skip the bar charts.")
    parser.add_argument("--pairs-csv", action="store_true",
                        help="Also write every pair score to pair_scores.csv.")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose progress output.")
    return parser


def apply_args(args):
    if args.config:
        load_config_overrides(args.config)
    if args.url is not None:
        CONFIG["source_url"] = args.url
    if args.subset_size is not None:
        CONFIG["subset_size"] = args.subset_size
    if args.full:
        CONFIG["subset_size"] = None
    if args.subset_mode is not None:
        CONFIG["subset_mode"] = args.subset_mode
    if args.seed is not None:
        CONFIG["random_seed"] = args.seed
    if args.serial:
        CONFIG["parallel_eval"] = False
    if args.workers is not None:
        CONFIG["num_workers"] = args.workers
    if args.out_dir is not None:
        CONFIG["out_dir"] = args.out_dir
    if args.top_k is not None:
        CONFIG["top_k"] = args.top_k
    if args.debug:
        CONFIG["debug"] = True


def main(argv=None):
    args = build_parser().parse_args(argv)
    apply_args(args)

    try:
        corpus = load_corpus(args.source_file)
        summaries = run_analysis(
            corpus,
            Path(CONFIG["out_dir"]),
            make_plots=not args.no_plots,
            pairs_csv=args.pairs_csv,
        )
    except WordAnalysisError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print("\n=== Best guesses by average score ===")
    print(format_ranking(summaries, CONFIG["top_k"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
