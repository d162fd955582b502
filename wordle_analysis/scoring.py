#!/usr/bin/env python3
from collections import Counter
from dataclasses import dataclass

# =========================
# Feedback scoring engine
# =========================

HIT = "G"      # right letter, right position
PRESENT = "Y"  # letter elsewhere in the target, budget left
ABSENT = "B"   # not in the target, or budget used up


@dataclass(frozen=True)
class ScoringWeights:
    hit: float = 3
    present: float = 1
    absent: float = 0

    def points(self, tag: str) -> float:
        if tag == HIT:
            return self.hit
        if tag == PRESENT:
            return self.present
        if tag == ABSENT:
            return self.absent
        raise ValueError(f"Unknown feedback tag {tag!r}")


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class PairScore:
    guess: str
    target: str
    pattern: str
    score: float


def feedback_pattern(guess: str, target: str) -> str:
    """
    Return the feedback the game shows for `guess` against `target`,
    one tag per position (HIT / PRESENT / ABSENT).

    Each target letter can back at most one HIT or PRESENT tag:
      - first pass: exact matches, each consumes one from the target's pool
      - second pass, left to right: PRESENT while the pool for the letter
        is positive, otherwise ABSENT

    Both words must have the same length and already be validated.
    """
    result = [ABSENT] * len(target)
    remaining = Counter(target)

    # first pass: hits
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = HIT
            remaining[g] -= 1

    # second pass: present-elsewhere, capped by what is left
    for i, g in enumerate(guess):
        if result[i] == HIT:
            continue
        if remaining[g] > 0:
            result[i] = PRESENT
            remaining[g] -= 1

    return "".join(result)


def pattern_score(pattern: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    return sum(weights.points(tag) for tag in pattern)


def score_pair(guess: str, target: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> PairScore:
    pattern = feedback_pattern(guess, target)
    return PairScore(guess, target, pattern, pattern_score(pattern, weights))
