from .io import read_lines
from .source import (DEFAULT_WORD_LIST_URL, SourceFetchError, SourceParseError,
                     fetch_word_list, parse_word_list, read_word_file)
from .store import DictionaryStore
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "read_lines",
    "DEFAULT_WORD_LIST_URL", "SourceFetchError", "SourceParseError",
    "fetch_word_list", "parse_word_list", "read_word_file",
    "DictionaryStore", "validate_wordlist", "pretty_summary",
]
