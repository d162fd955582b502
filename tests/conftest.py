import copy

import pytest

from wordle_analysis.config import CONFIG

# First words of the solution list, in source order
SAMPLE_WORDS = [
    "CIGAR", "REBUT", "SISSY", "HUMPH", "AWAKE", "BLUSH", "FOCAL", "EVADE",
    "NAVAL", "SERVE", "HEATH", "DWARF", "MODEL", "KARMA", "STINK", "GRADE",
    "QUIET", "BENCH", "ABATE", "FEIGN", "MAJOR", "DEATH", "FRESH", "CRUST",
    "STOOL", "COLON", "ABASE", "MARRY", "REACT", "BATTY",
]


@pytest.fixture(autouse=True)
def restore_config():
    saved = copy.deepcopy(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def source_text():
    quoted = ",".join(f'"{w.lower()}"' for w in SAMPLE_WORDS + ["SHAVE"])
    return "var x=1;var La=[" + quoted + '],Ta=["aahed","aalii"];'
