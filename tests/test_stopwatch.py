import io

import pytest

from consoleplay import stopwatch
from consoleplay.stopwatch import Duration


def test_normalize_carries_seconds():
    assert stopwatch.normalize(0, 0, 75) == Duration(0, 1, 15)


@pytest.mark.parametrize("h, m, s", [(0, 0, 0), (2, 30, 45), (5, 59, 59)])
def test_normalize_leaves_valid_time_alone(h, m, s):
    assert stopwatch.normalize(h, m, s) == Duration(h, m, s)


def test_normalize_carry_can_reach_sixty_minutes():
    assert stopwatch.normalize(0, 59, 60) == Duration(0, 60, 0)


def test_normalize_carries_minutes_into_hours():
    result = stopwatch.normalize(0, 120, 0)
    assert result.minute == 0
    assert result.hour == 2


@pytest.mark.parametrize("s", [0, 5, 59])
def test_ticks_within_first_minute(s):
    readings = list(stopwatch.ticks(Duration(0, 0, s)))
    assert [r[2] for r in readings] == list(range(s + 1))
    assert all(r[:2] == (0, 0) for r in readings)


def test_ticks_end_at_target():
    readings = list(stopwatch.ticks(Duration(0, 1, 5)))
    assert readings[0] == (0, 0, 0)
    assert readings[-1] == (0, 1, 5)
    assert sum(1 for r in readings if r[1] == 0) == 60


def test_ticks_are_unique_and_ordered():
    readings = list(stopwatch.ticks(Duration(1, 2, 3)))
    assert readings == sorted(set(readings))
    assert readings[-1] == (1, 2, 3)


def test_ticks_unreachable_minute_runs_to_end_of_hour():
    readings = list(stopwatch.ticks(Duration(0, 60, 0)))
    assert readings[-1] == (0, 59, 59)


def test_format_tick():
    assert stopwatch.format_tick(1, 2, 3) == "STOPWATCH:   01 : 02 : 03"


def test_run_sleeps_once_per_tick():
    sleeps = []
    out = io.StringIO()
    duration = Duration(0, 0, 4)
    count = stopwatch.run(duration, sleeps.append, out)
    assert count == len(list(stopwatch.ticks(duration)))
    assert sleeps == [1] * count
    assert out.getvalue().endswith(stopwatch.format_tick(0, 0, 4) + "\n")


def test_main_runs_and_quits(monkeypatch, capsys):
    monkeypatch.setattr(stopwatch.time, "sleep", lambda seconds: None)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n0\n1\nX\nN\n"))
    assert stopwatch.main([]) == 0
    out = capsys.readouterr().out
    assert stopwatch.format_tick(0, 0, 1) in out
    assert "Incorrect input" in out
    assert "Do you want use the stopwatch again?(Y/N):" in out