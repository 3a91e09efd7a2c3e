from .errors import HintError, EmptyDictionaryError
from .words import WORD_LENGTH, Dictionary, load_dictionary, is_word, normalize_word
from .constraints import ConstraintModel, PresentConstraint, filter_candidates, satisfies
from .scoring import score, is_solved

__all__ = [
    "HintError", "EmptyDictionaryError",
    "WORD_LENGTH", "Dictionary", "load_dictionary", "is_word", "normalize_word",
    "ConstraintModel", "PresentConstraint", "filter_candidates", "satisfies",
    "score", "is_solved",
]
