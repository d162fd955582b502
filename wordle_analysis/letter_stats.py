#!/usr/bin/env python3
from collections import Counter

# =========================
# Letter frequency tables
# =========================


def letter_counts(words):
    return Counter("".join(words))


def positional_counts(words):
    if not words:
        return []
    length = len(words[0])
    pos_counts = [Counter() for _ in range(length)]
    for w in words:
        for i, ch in enumerate(w):
            pos_counts[i][ch] += 1
    return pos_counts


def letter_frequencies(words):
    counts = letter_counts(words)
    total = sum(counts.values()) or 1
    return {ch: c / total for ch, c in counts.items()}


def positional_frequencies(words):
    pos_freqs = []
    for counts in positional_counts(words):
        total = sum(counts.values()) or 1
        pos_freqs.append({ch: c / total for ch, c in counts.items()})
    return pos_freqs
