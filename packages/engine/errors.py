"""
Exception hierarchy shared by the engine and its collaborators.

Transforms (filtering, ranking) never raise on well-formed input; these
errors describe problems with the *inputs* handed to the engine.
"""


class HintError(Exception):
    """Base class for every domain error raised by this project."""


class EmptyDictionaryError(HintError):
    """Sanitizing a raw word source left zero usable words."""
