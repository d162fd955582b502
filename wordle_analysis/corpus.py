#!/usr/bin/env python3
import random
from typing import Iterable, Optional, Tuple

from wordle_analysis.config import CONFIG
from wordle_analysis.errors import MalformedWordError

# =========================
# Word corpus
# =========================

WORD_LEN = CONFIG["word_length"]
ALPHABET = CONFIG["alphabet"]


def normalize_word(raw: str) -> str:
    return raw.strip().upper()


def validate_word(word: str, length: int = WORD_LEN, alphabet: str = ALPHABET) -> str:
    """
    Check a normalized word:
    - exactly `length` symbols
    - every symbol in `alphabet`
    Raises MalformedWordError otherwise, returns the word unchanged.
    """
    if len(word) != length:
        raise MalformedWordError(word, f"expected {length} letters, got {len(word)}")
    bad = sorted({ch for ch in word if ch not in alphabet})
    if bad:
        raise MalformedWordError(word, "symbols outside alphabet: " + "".join(bad))
    return word


def build_corpus(
    raw_words: Iterable[str],
    length: int = WORD_LEN,
    alphabet: str = ALPHABET,
) -> Tuple[str, ...]:
    """
    Normalize + validate every word and drop repeats (first occurrence wins).
    A single malformed word aborts the whole build.
    """
    words = [validate_word(normalize_word(w), length, alphabet) for w in raw_words]
    corpus = tuple(dict.fromkeys(words))
    if CONFIG["debug"] and len(corpus) != len(words):
        print(f"[corpus] dropped {len(words) - len(corpus)} duplicate words")
    return corpus


def select_subset(
    corpus: Tuple[str, ...],
    size: Optional[int] = CONFIG["subset_size"],
    mode: str = CONFIG["subset_mode"],
    seed: int = CONFIG["random_seed"],
) -> Tuple[str, ...]:
    """
    Pick the words used for cross-comparison.
    "head"   -> first `size` words
    "sample" -> seeded random `size` words, kept in corpus order
    """
    if size is None or size >= len(corpus):
        return tuple(corpus)
    if size < 0:
        raise ValueError(f"subset size must be >= 0, got {size}")

    if mode == "head":
        return tuple(corpus[:size])
    if mode == "sample":
        rng = random.Random(seed)
        picked = set(rng.sample(range(len(corpus)), size))
        return tuple(w for i, w in enumerate(corpus) if i in picked)
    raise ValueError(f"unknown subset mode {mode!r}")
