#!/usr/bin/env python3
import multiprocessing as mp
from typing import List, Optional, Sequence

from wordle_analysis.config import CONFIG
from wordle_analysis.scoring import DEFAULT_WEIGHTS, PairScore, ScoringWeights, score_pair

# =========================
# Cross-comparison driver
# =========================


def iter_pairs(words: Sequence[str]):
    """Every ordered (guess, target) with guess != target, row by row."""
    for guess in words:
        for target in words:
            if guess != target:
                yield guess, target


def score_row(guess: str, words: Sequence[str], weights: ScoringWeights = DEFAULT_WEIGHTS) -> List[PairScore]:
    return [score_pair(guess, target, weights) for target in words if target != guess]


def _row_worker(args):
    """
    Worker function for multiprocessing.Pool.

    Args tuple:
      (guess, words, weights)
    """
    guess, words, weights = args
    return score_row(guess, words, weights)


def cross_compare(
    words: Sequence[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    parallel: bool = CONFIG["parallel_eval"],
    num_workers: Optional[int] = CONFIG["num_workers"],
) -> List[PairScore]:
    """
    Score every ordered pair of distinct words: n * (n - 1) PairScores,
    grouped by guess in input order.

    With `parallel` the guess rows are spread over a process pool; pool.map
    keeps the row order, so the output matches the serial run exactly.
    """
    words = tuple(words)
    if len(words) < 2:
        return []

    if not parallel:
        rows = [score_row(guess, words, weights) for guess in words]
    else:
        if num_workers is None:
            num_workers = max(2, mp.cpu_count() - 1)
        num_workers = min(num_workers, len(words))
        jobs = [(guess, words, weights) for guess in words]
        with mp.Pool(processes=num_workers) as pool:
            rows = pool.map(_row_worker, jobs)

    results = [ps for row in rows for ps in row]
    if CONFIG["debug"]:
        print(f"[score] scored {len(results)} pairs over {len(words)} words")
    return results
