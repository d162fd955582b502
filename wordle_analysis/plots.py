#!/usr/bin/env python3
"""
Bar charts for the letter statistics and the guess ranking.
"""

from pathlib import Path

import matplotlib.pyplot as plt


def plot_letter_frequencies(counts, out_path="letter_frequency.png"):
    """Bar chart of overall letter counts, most common first."""
    items = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    labels = [ch for ch, _ in items]
    values = [c for _, c in items]

    plt.figure(figsize=(10, 4))
    plt.bar(labels, values)
    plt.xlabel("Letter")
    plt.ylabel("Occurrences")
    plt.title("Letter frequency across the solution list")
    plt.tight_layout()
    plt.savefig(Path(out_path), dpi=200)
    plt.close()
    print(f"[plot] Wrote {out_path}")


def plot_positional_frequencies(pos_counts, out_path="positional_frequency.png"):
    """One bar chart per letter position, letters in alphabetical order."""
    n = len(pos_counts)
    if n == 0:
        print("[plot] No positional counts to plot")
        return

    letters = sorted(set().union(*pos_counts))
    fig, axes = plt.subplots(n, 1, figsize=(10, 2.2 * n), sharex=True, squeeze=False)
    for i, counts in enumerate(pos_counts):
        ax = axes[i][0]
        ax.bar(letters, [counts.get(ch, 0) for ch in letters])
        ax.set_ylabel(f"Pos {i + 1}")
    axes[-1][0].set_xlabel("Letter")
    fig.suptitle("Letter frequency by position")
    fig.tight_layout()
    fig.savefig(Path(out_path), dpi=200)
    plt.close(fig)
    print(f"[plot] Wrote {out_path}")


def plot_guess_ranking(summaries, out_path="guess_ranking.png", top_k=10):
    """Horizontal bars of the best average scores, best at the top."""
    best = list(summaries[:top_k])
    if not best:
        print("[plot] No guess summaries to plot")
        return

    best.reverse()
    plt.figure(figsize=(8, max(3, 0.4 * len(best))))
    plt.barh([s.guess for s in best], [s.mean_score for s in best])
    plt.xlabel("Average score against other words")
    plt.title(f"Top {len(best)} guesses by average score")
    plt.grid(True, axis="x", linestyle="--", linewidth=0.5)
    plt.tight_layout()
    plt.savefig(Path(out_path), dpi=200)
    plt.close()
    print(f"[plot] Wrote {out_path}")
