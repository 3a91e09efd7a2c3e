import json

import requests

from apps.cli import hint, run
from packages.engine import ConstraintModel, load_dictionary
from packages.engine.hints import compute_hints

D = load_dictionary(["crane", "trace", "slate", "house", "mouse"])


def test_compute_hints_round():
    h = compute_hints(D, ConstraintModel(absent={"o"}), top_n=4)
    assert h.candidates == ("crane", "trace", "slate")
    assert [r.word for r in h.best] == ["trace", "crane", "slate"]
    assert len(h.exploration) == 4
    assert h.solved is False

def test_render_best_and_az():
    h = compute_hints(D, ConstraintModel(absent={"o"}))
    out = hint.render(h, limit=2)
    assert out.startswith("Found: 3 possible")
    assert "  1. trace" in out and "...and 1 more" in out
    out = hint.render(h, sort="az")
    assert out.index("  1. crane") < out.index("  2. slate") < out.index("  3. trace")

def test_main_with_local_words(tmp_path, capsys):
    words = tmp_path / "words.json"
    words.write_text(json.dumps(list(D)), encoding="utf-8")
    assert hint.main(["--words", str(words), "--guess", "house:-----"]) == 0
    out = capsys.readouterr().out
    assert "Found: 0 possible" in out

    board = tmp_path / "board.txt"
    board.write_text("mouse ----G\n", encoding="utf-8")
    assert hint.main(["--words", str(words), "--feedback", str(board), "--top-n", "2"]) == 0
    assert "Found: 2 possible" in capsys.readouterr().out

def test_main_reports_unusable_sources(tmp_path, capsys, monkeypatch):
    empty = tmp_path / "words.txt"
    empty.write_text("toolong\n", encoding="utf-8")
    assert hint.main(["--words", str(empty)]) == 1
    assert "Cannot operate" in capsys.readouterr().err

    def boom(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", boom)
    assert hint.main(["--url", "https://example.test/words.json"]) == 1

def test_main_rejects_bad_feedback(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(D) + "\n", encoding="utf-8")
    assert hint.main(["--words", str(words), "--guess", "crane:-GX--"]) == 2
    assert "Bad feedback" in capsys.readouterr().err

def test_run_cli_writes_outputs(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(["crane", "raise", "stare", "trace", "cared"]) + "\n",
                     encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = run.main(["--words", str(words), "--outdir", str(outdir), "--progress", "off",
                   "--sample", "3"])
    assert rc == 0
    assert len(list(outdir.glob("run_*.csv"))) == 1
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert json.loads(manifests[0].read_text(encoding="utf-8"))["num_cases"] == 3
    assert "solved 3/3" in capsys.readouterr().out

def test_undecodable_word_file_cannot_operate(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_bytes(b"crane\nsl\xffte\n")
    assert hint.main(["--words", str(words)]) == 1
    assert "Cannot operate" in capsys.readouterr().err
    assert run.main(["--words", str(words), "--outdir", str(tmp_path / "out"),
                     "--progress", "off"]) == 1
