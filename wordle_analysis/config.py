#!/usr/bin/env python3
import json
import string

from wordle_analysis.scoring import ScoringWeights

CONFIG = {
    # Word source
    "source_url": "https://www.powerlanguage.co.uk/wordle/main.e65ce0a5.js",
    "source_timeout": 10,
    # the solution list starts at the first word and ends at the last one
    "first_word": "cigar",
    "last_word": "shave",

    # Word shape
    "word_length": 5,
    "alphabet": string.ascii_uppercase,

    # Feedback scoring weights
    "hit_points": 3,
    "present_points": 1,
    "absent_points": 0,

    # Cross-comparison subset (None = whole corpus)
    "subset_size": 50,
    "subset_mode": "head",     # "head" or "sample"
    "random_seed": 42,

    # Parallel evaluation
    "parallel_eval": True,
    "num_workers": None,       # None = cpu_count() - 1

    # Output
    "out_dir": "wordle_output",
    "top_k": 10,

    # Logging
    "debug": False,
}


def load_config_overrides(filename, config=CONFIG):
    """
    Load a JSON file of overrides into `config` (in place).
    Ignores keys that are not already in the config.
    Returns the list of keys that were applied.
    """
    with open(filename, "r", encoding="utf-8") as f:
        data = json.load(f)

    applied = []
    for key, value in data.items():
        if key not in config:
            print(f"[config] ignoring unknown key {key!r} in {filename}")
            continue
        config[key] = value
        applied.append(key)
    return applied


def scoring_weights(config=CONFIG):
    return ScoringWeights(
        hit=config["hit_points"],
        present=config["present_points"],
        absent=config["absent_points"],
    )
