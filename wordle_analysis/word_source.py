#!/usr/bin/env python3
from pathlib import Path

import requests

from wordle_analysis.config import CONFIG
from wordle_analysis.errors import SourceFetchError, WordListParseError

# =========================
# Source text + word list extraction
# =========================


def fetch_source_text(url=CONFIG["source_url"], timeout=CONFIG["source_timeout"]):
    """
    Download the game script that embeds the solution list.
    One request, no retries: any failure raises SourceFetchError.
    """
    print(f"[fetch] Downloading word source from {url} ...")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(f"failed to download {url}: {e}") from e

    resp.encoding = "utf-8"
    text = resp.text
    print(f"[fetch] Got {len(text)} characters.")
    return text


def read_source_file(path):
    """Read a previously downloaded source blob from disk."""
    path = Path(path)
    print(f"[fetch] Reading word source from {path}")
    return path.read_text(encoding="utf-8")


def extract_word_list(
    text: str,
    first_word: str = CONFIG["first_word"],
    last_word: str = CONFIG["last_word"],
):
    """
    Slice the quoted, comma-separated list out of the script text,
    from the start of `first_word` through the end of `last_word`.

    Returns the raw words in source order (not validated).
    """
    start = text.find(first_word)
    if start < 0:
        raise WordListParseError(f"first word {first_word!r} not found in source text")
    last = text.find(last_word, start)
    if last < 0:
        raise WordListParseError(
            f"last word {last_word!r} not found after {first_word!r} in source text"
        )
    end = last + len(last_word)

    chunk = text[start:end].replace('"', "")
    words = [w.strip() for w in chunk.split(",")]
    return [w for w in words if w]
