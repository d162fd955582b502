#!/usr/bin/env python3
"""
Time the cross-comparison for several subset sizes and plot runtime
against the number of scored pairs.

Usage:
    python -m wordle_analysis.benchmark_runtime --source-file main.js --sizes 25 50 100 200
"""

import argparse
import time
from pathlib import Path

import matplotlib.pyplot as plt

from wordle_analysis.config import CONFIG, scoring_weights
from wordle_analysis.corpus import select_subset
from wordle_analysis.cross_compare import cross_compare
from wordle_analysis.main import load_corpus


def approx_num_pairs(subset_size: int) -> int:
    """Ordered (guess, target) pairs scored for a subset, self pairs excluded."""
    return subset_size * (subset_size - 1)


def run_benchmark(
    corpus,
    subset_sizes,
    runs_per_size: int,
    csv_path: Path,
    fig_path: Path,
    parallel: bool = False,
):
    rows = []
    x_pairs = []
    y_runtime = []
    weights = scoring_weights(CONFIG)

    for size in subset_sizes:
        subset = select_subset(corpus, size, "head")
        pairs = approx_num_pairs(len(subset))

        runtimes = []
        for r in range(runs_per_size):
            print(f"[bench] subset_size={len(subset)}, run {r+1}/{runs_per_size}")
            t0 = time.perf_counter()
            _ = cross_compare(subset, weights, parallel=parallel, num_workers=CONFIG["num_workers"])
            t1 = time.perf_counter()
            elapsed = t1 - t0
            runtimes.append(elapsed)
            rows.append((len(subset), pairs, r + 1, elapsed))

        avg_rt = sum(runtimes) / len(runtimes)
        x_pairs.append(pairs)
        y_runtime.append(avg_rt)
        print(f"[bench] n={len(subset)}: pairs={pairs}, avg_runtime={avg_rt:.3f}s")

    # Write CSV
    csv_lines = ["subset_size,num_pairs,run_idx,runtime_seconds\n"]
    for n, pairs, run_idx, rt in rows:
        csv_lines.append(f"{n},{pairs},{run_idx},{rt:.6f}\n")
    csv_path.write_text("".join(csv_lines), encoding="utf-8")
    print(f"[bench] wrote CSV to {csv_path}")

    # Plot
    plt.figure()
    plt.plot(x_pairs, y_runtime, marker="o")
    plt.xlabel("Scored (guess, target) pairs")
    plt.ylabel("Runtime per run (seconds)")
    mode = "parallel" if parallel else "serial"
    plt.title(f"Cross-comparison runtime vs pairs ({mode})")
    plt.grid(True, which="both", linestyle="--", linewidth=0.5)
    plt.tight_layout()
    plt.savefig(fig_path, dpi=200)
    plt.close()
    print(f"[bench] wrote plot to {fig_path}")
    return rows


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark cross-comparison runtime vs subset size."
    )
    parser.add_argument(
        "--source-file",
        type=str,
        default=None,
        help="Local copy of the game script (downloads it when omitted).",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[25, 50, 100, 200, 400],
        help="List of subset sizes to test.",
    )
    parser.add_argument(
        "--runs-per-size",
        type=int,
        default=3,
        help="Number of repeated runs per subset size.",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Use the process pool.",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default="cross_compare_runtime.csv",
        help="Output CSV filename.",
    )
    parser.add_argument(
        "--png",
        type=str,
        default="cross_compare_runtime.png",
        help="Output PNG filename.",
    )
    args = parser.parse_args()

    corpus = load_corpus(args.source_file)
    run_benchmark(
        corpus,
        args.sizes,
        args.runs_per_size,
        Path(args.csv),
        Path(args.png),
        parallel=args.parallel,
    )


if __name__ == "__main__":
    main()
