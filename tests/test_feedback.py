import pytest
from packages.engine import ConstraintModel, PresentConstraint, filter_candidates, load_dictionary, score
from packages.feedback import (TileState, constraints_from_history, constraints_from_rows,
                               parse_feedback_line, read_feedback_file, row_from_pattern)


def test_rows_build_model():
    rows = [
        [("c", "absent"), ("r", "correct"), ("a", "present"), ("n", "absent"), ("e", "absent")],
        [("s", TileState.ABSENT), ("", TileState.EMPTY), ("l", TileState.TBD)],
    ]
    c = constraints_from_rows(rows)
    assert c.correct == (None, "r", None, None, None)
    assert c.present == {PresentConstraint("a", 2)}
    assert c.absent == {"c", "n", "e", "s"}

def test_later_rows_overwrite_correct_slots():
    c = constraints_from_rows([[("a", "correct")], [("b", "correct")]])
    assert c.correct[0] == "b"

def test_min_counts_from_confirmed_tiles():
    # one row proves two e's; another row only one
    rows = [
        [("e", "present"), ("e", "correct"), ("r", "absent"), ("i", "absent"), ("e", "absent")],
        [("g", "absent"), ("e", "correct"), ("n", "absent"), ("r", "absent"), ("e", "absent")],
    ]
    c = constraints_from_rows(rows)
    assert c.min_counts == {"e": 2}

def test_rows_reject_unknown_state_and_long_rows():
    with pytest.raises(ValueError):
        constraints_from_rows([[("a", "green")]])
    with pytest.raises(ValueError):
        constraints_from_rows([[("a", "absent")] * 6])

def test_history_uses_pattern_alphabet():
    c = constraints_from_history([("crane", "-GY--")])
    assert c == ConstraintModel(correct=(None, "r", None, None, None),
                                present={("a", 2)}, absent={"c", "n", "e"},
                                min_counts={"r": 1, "a": 1})

@pytest.mark.parametrize("guess,pattern", [("crane", "-GX--"), ("crane", "-GY-")])
def test_row_from_pattern_rejects_bad_input(guess, pattern):
    with pytest.raises(ValueError):
        row_from_pattern(guess, pattern)

@pytest.mark.parametrize("guesses,answer", [
    (["speed"], "abide"),
    (["eerie"], "crane"),
    (["belle"], "level"),
    (["stare", "clone"], "crane"),
    (["geese", "those"], "these"),
])
def test_true_answer_always_survives(guesses, answer):
    d = load_dictionary(["abide", "crane", "level", "these", "speed", "eerie", "belle"])
    history = [(g, score(g, answer)) for g in guesses]
    assert answer in filter_candidates(d, constraints_from_history(history))

@pytest.mark.parametrize("line,expected", [
    ("crane -GY--", ("crane", "-GY--")),
    ("  CRANE   -gy--  ", ("crane", "-GY--")),
    ("sloth:--Y-G", ("sloth", "--Y-G")),
    ("adieu=Y---G  # second row", ("adieu", "Y---G")),
    ("", None),
    ("   # just a note", None),
])
def test_parse_feedback_line(line, expected):
    assert parse_feedback_line(line) == expected

@pytest.mark.parametrize("line", ["crane", "cranes -----", "crane -GX--", "cr4ne -----"])
def test_parse_feedback_line_rejects(line):
    with pytest.raises(ValueError):
        parse_feedback_line(line)

def test_read_feedback_file(tmp_path):
    p = tmp_path / "board.txt"
    p.write_text("# round log\ncrane -GY--\n\nsloth --Y-G\n", encoding="utf-8")
    assert read_feedback_file(p) == [("crane", "-GY--"), ("sloth", "--Y-G")]

def test_read_feedback_file_reports_line_number(tmp_path):
    p = tmp_path / "board.txt"
    p.write_text("crane -GY--\nsloth ??\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        read_feedback_file(p)
