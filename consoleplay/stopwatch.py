"""A console stopwatch that counts up to a target time, one second per tick."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Iterator

CLEAR = "\033[2J\033[H"


@dataclass(frozen=True)
class Duration:
    """A target time in hours, minutes and seconds."""

    hour: int = 0
    minute: int = 0
    second: int = 0


def normalize(hour, minute, second):
    """Carry whole minutes out of seconds and whole hours out of minutes.

    The carried minutes are added after the minutes themselves are reduced,
    so the minute field may end up at 60 or above.
    """
    carried_minutes = 0
    if second >= 60:
        carried_minutes, second = divmod(second, 60)
    carried_hours = 0
    if minute >= 60:
        carried_hours, minute = divmod(minute, 60)
    return Duration(hour + carried_hours, minute + carried_minutes, second)


def ticks(duration):
    """Yield the (hour, minute, second) readings shown up to the target."""
    return _ticks(duration)


def _ticks(duration: Duration) -> Iterator[tuple[int, int, int]]:
    for h in range(duration.hour + 1):
        for m in range(60):
            for s in range(60):
                yield h, m, s
                if m == duration.minute and s == duration.second:
                    break
            if h == duration.hour and m == duration.minute:
                return


def format_tick(hour, minute, second):
    """Return the display line for one reading."""
    return f"STOPWATCH:   {hour:02d} : {minute:02d} : {second:02d}"


def run(duration, sleep=None, out=None):
    """Show every reading, waiting one second before each; return the count."""
    sleep = time.sleep if sleep is None else sleep
    out = sys.stdout if out is None else out
    count = 0
    for reading in ticks(duration):
        sleep(1)
        out.write(CLEAR + format_tick(*reading) + "\n")
        out.flush()
        count += 1
    return count


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _session() -> None:
    print("input hour minute second:")
    hour = _read_int("Hour:")
    minute = _read_int("Minute:")
    second = _read_int("Second:")
    run(normalize(hour, minute, second))


def main(argv=None):
    """Run the stopwatch until the user declines another round."""
    parser = argparse.ArgumentParser(
        prog="stopwatch", description="Count up to a given time."
    )
    parser.parse_args(argv)
    try:
        _session()
        while True:
            print("Do you want use the stopwatch again?(Y/N):")
            answer = input().strip()[:1]
            if answer == "Y":
                _session()
            elif answer == "N":
                return 0
            else:
                print("Incorrect input")
    except EOFError:
        print()
        return 0