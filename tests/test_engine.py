import pytest
from packages.engine import (Dictionary, EmptyDictionaryError, is_word, load_dictionary,
                             score, is_solved)

# --- golden patterns (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("speed","abide","--Y-Y"),
    ("eerie","crane","--Y-G"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")

def test_is_solved():
    assert is_solved("GGGGG") is True
    assert is_solved("GGGG-") is False
    assert is_solved("") is False

@pytest.mark.parametrize("word,ok", [
    ("crane", True),
    ("CRANE", False),     # not normalized
    ("cranes", False),
    ("cr4ne", False),
    ("crâne", False),     # non-ASCII letter
    ("", False),
])
def test_is_word(word, ok):
    assert is_word(word) is ok

def test_load_dictionary_sanitizes_and_keeps_order():
    d = load_dictionary(["  Crane ", "slate", "sloths", "ab", "CRANE", "tr-ce", "House\n"])
    assert isinstance(d, Dictionary)
    assert list(d) == ["crane", "slate", "house"]
    assert len(d) == 3
    assert d[1] == "slate"
    assert "house" in d and "sloths" not in d

def test_load_dictionary_empty_raises():
    with pytest.raises(EmptyDictionaryError):
        load_dictionary(["", "toolong", "abc"])
    with pytest.raises(EmptyDictionaryError):
        load_dictionary([])

def test_dictionary_is_immutable():
    d = load_dictionary(["crane"])
    with pytest.raises(AttributeError):
        d.words = ("slate",)

def test_dictionary_constructor_copies_to_tuple():
    src = ["crane", "slate"]
    d = Dictionary(src)
    src.append("house")
    assert d.words == ("crane", "slate")
    assert "house" not in d

@pytest.mark.parametrize("words", [["CRANE"], ["ab"], ["crane", "crane"]])
def test_dictionary_constructor_rejects_bad_members(words):
    with pytest.raises(ValueError):
        Dictionary(words)
