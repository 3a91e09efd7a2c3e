import pytest
from packages.feedback import Debouncer, FileWatcher, watch


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_ready_once_after_quiet_period():
    clock = FakeClock()
    d = Debouncer(0.5, clock=clock)
    assert d.ready() is False
    d.notify()
    clock.now = 0.4
    assert d.ready() is False
    clock.now = 0.5
    assert d.ready() is True
    assert d.ready() is False
    assert d.pending is False

def test_burst_coalesces_into_one():
    clock = FakeClock()
    d = Debouncer(0.5, clock=clock)
    fired = 0
    for t in (0.0, 0.3, 0.6):
        clock.now = t
        d.notify()
        fired += d.ready()
    clock.now = 0.9
    fired += d.ready()
    assert fired == 0
    clock.now = 1.1
    fired += d.ready()
    assert fired == 1

def test_cancel_and_bad_delay():
    clock = FakeClock()
    d = Debouncer(0.5, clock=clock)
    d.notify()
    d.cancel()
    clock.now = 10
    assert d.ready() is False
    with pytest.raises(ValueError):
        Debouncer(-1)

def test_file_watcher_detects_changes(tmp_path):
    p = tmp_path / "board.txt"
    w = FileWatcher(p)
    assert w.changed() is False
    p.write_text("crane -GY--\n", encoding="utf-8")
    assert w.changed() is True
    assert w.changed() is False
    p.write_text("crane -GY--\nsloth --Y-G\n", encoding="utf-8")
    assert w.changed() is True

def test_watch_debounces_and_calls_back(tmp_path):
    p = tmp_path / "board.txt"
    p.write_text("crane -GY--\n", encoding="utf-8")
    clock = FakeClock()
    calls = []
    sleeps = []

    def fake_sleep(seconds):
        if not sleeps:
            p.write_text("crane -GY--\nsloth --Y-G\n", encoding="utf-8")
        sleeps.append(seconds)
        clock.now += seconds

    watch(p, lambda: calls.append(clock.now), debouncer=Debouncer(0.5, clock=clock),
          poll_seconds=0.5, should_stop=lambda: len(sleeps) >= 6, sleep=fake_sleep)
    assert calls == [1.0]
