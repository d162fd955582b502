#!/usr/bin/env python3
"""
CSV tables for the analysis outputs, plus a console ranking.

Files written here are the interchange format for plotting / reporting:
    guess_summary.csv   rank,guess,mean_score,num_targets
    pair_scores.csv     guess,target,pattern,score
    letter_stats.csv    letter,overall,pos_1..pos_L
"""

import csv
from pathlib import Path

from wordle_analysis.aggregate import GuessSummary
from wordle_analysis.letter_stats import letter_counts, positional_counts

SUMMARY_FIELDS = ["rank", "guess", "mean_score", "num_targets"]
PAIR_FIELDS = ["guess", "target", "pattern", "score"]


def write_summaries_csv(summaries, out_path) -> None:
    out_path = Path(out_path)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for rank, s in enumerate(summaries, start=1):
            writer.writerow({
                "rank": rank,
                "guess": s.guess,
                "mean_score": f"{s.mean_score:.6f}",
                "num_targets": s.num_targets,
            })


def read_summaries_csv(path):
    summaries = []
    with Path(path).open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            summaries.append(GuessSummary(
                guess=row["guess"],
                mean_score=float(row["mean_score"]),
                num_targets=int(row["num_targets"]),
            ))
    return summaries


def write_pair_scores_csv(pair_scores, out_path) -> None:
    out_path = Path(out_path)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=PAIR_FIELDS)
        writer.writeheader()
        for ps in pair_scores:
            writer.writerow({
                "guess": ps.guess,
                "target": ps.target,
                "pattern": ps.pattern,
                "score": ps.score,
            })


def write_letter_stats_csv(words, out_path) -> None:
    overall = letter_counts(words)
    per_pos = positional_counts(words)
    fieldnames = ["letter", "overall"] + [f"pos_{i + 1}" for i in range(len(per_pos))]

    out_path = Path(out_path)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for letter in sorted(overall):
            row = {"letter": letter, "overall": overall[letter]}
            for i, counts in enumerate(per_pos):
                row[f"pos_{i + 1}"] = counts[letter]
            writer.writerow(row)


def format_ranking(summaries, k: int) -> str:
    lines = [f"{'rank':>4}  {'guess':<8}{'mean score':>10}"]
    for rank, s in enumerate(summaries[:k], start=1):
        lines.append(f"{rank:>4}  {s.guess:<8}{s.mean_score:>10.3f}")
    return "\n".join(lines)
