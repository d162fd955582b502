#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Dict, Iterable, List

from wordle_analysis.scoring import PairScore

# =========================
# Aggregation
# =========================


@dataclass(frozen=True)
class GuessSummary:
    guess: str
    mean_score: float
    num_targets: int


def summarize(pair_scores: Iterable[PairScore]) -> List[GuessSummary]:
    """
    Average each guess's scores over the targets it was compared against.

    Sorted by mean score, highest first. Ties are ordered by the guess
    itself so the ranking is reproducible.
    """
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}
    for ps in pair_scores:
        totals[ps.guess] = totals.get(ps.guess, 0.0) + ps.score
        counts[ps.guess] = counts.get(ps.guess, 0) + 1

    summaries = [
        GuessSummary(guess, totals[guess] / counts[guess], counts[guess])
        for guess in totals
    ]
    summaries.sort(key=lambda s: (-s.mean_score, s.guess))
    return summaries


def overall_mean(pair_scores: Iterable[PairScore]) -> float:
    total = 0.0
    n = 0
    for ps in pair_scores:
        total += ps.score
        n += 1
    return total / n if n else 0.0


def top_guesses(summaries: List[GuessSummary], k: int) -> List[GuessSummary]:
    return summaries[:k]
