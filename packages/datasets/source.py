"""
Raw word-list sources.

The engine only ever sees a list of raw strings; this module is where those
strings come from:
  - fetch_word_list(url): HTTP GET of a JSON array of words
  - read_word_file(path): local .json array, or plain text one word per line

Transport problems raise SourceFetchError, undecodable payloads raise
SourceParseError. Neither is retried here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import requests

from packages.engine.errors import HintError

from .io import read_lines

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST_URL = "https://github.com/dragnu5/wordlesolver/raw/refs/heads/master/words.json"
FETCH_TIMEOUT = 30


class SourceFetchError(HintError):
    """The word list could not be downloaded (network error or non-2xx)."""


class SourceParseError(HintError):
    """The payload is not a JSON array of strings."""


def parse_word_list(text: str) -> List[str]:
    try:
        data = json.loads(text)
    except ValueError as e:
        raise SourceParseError(f"word list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SourceParseError(f"word list must be a JSON array, got {type(data).__name__}")
    bad = [x for x in data if not isinstance(x, str)]
    if bad:
        raise SourceParseError(f"word list has {len(bad)} non-string entries (e.g. {bad[0]!r})")
    return data


def fetch_word_list(url: str = DEFAULT_WORD_LIST_URL, *, timeout: float = FETCH_TIMEOUT) -> List[str]:
    logger.debug("fetching word list from %s", url)
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(f"could not fetch word list from {url}: {e}") from e
    return parse_word_list(r.text)


def read_word_file(path: Path | str) -> List[str]:
    """
    Load raw entries from disk. `.json` files are parsed as an array; anything
    else is read as one entry per line (blank lines skipped).
    """
    p = Path(path)
    try:
        if p.suffix.lower() == ".json":
            if not p.exists():
                raise FileNotFoundError(p)
            return parse_word_list(p.read_text(encoding="utf-8"))
        return [ln for ln in read_lines(p) if ln.strip()]
    except UnicodeDecodeError as e:
        raise SourceParseError(f"word list {p} is not valid UTF-8: {e}") from e
