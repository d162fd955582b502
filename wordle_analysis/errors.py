#!/usr/bin/env python3

# =========================
# Errors
# =========================


class WordAnalysisError(Exception):
    """Base class for failures that halt the analysis pipeline."""


class SourceFetchError(WordAnalysisError):
    """The source text could not be downloaded."""


class WordListParseError(WordAnalysisError):
    """The word list could not be located inside the source text."""


class MalformedWordError(WordAnalysisError, ValueError):
    """A word has the wrong length or contains symbols outside the alphabet."""

    def __init__(self, word, reason):
        self.word = word
        self.reason = reason
        super().__init__(f"malformed word {word!r}: {reason}")
