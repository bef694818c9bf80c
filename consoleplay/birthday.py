"""Birthday problem simulation: draw random birthdays and look for matches."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})


def days_in_month(month):
    """Return the number of days in a month of a non-leap year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if month in _LONG_MONTHS:
        return 31
    if month == 2:
        return 28
    return 30


@dataclass(frozen=True)
class Birthday:
    """A day and month of birth."""

    day: int
    month: int

    def __post_init__(self):
        limit = days_in_month(self.month)
        if not 1 <= self.day <= limit:
            raise ValueError(f"day must be between 1 and {limit}, got {self.day}")


def random_birthday(rng=None):
    """Draw a month uniformly, then a day uniformly within it."""
    rng = random if rng is None else rng
    month = rng.randrange(12) + 1
    day = rng.randrange(days_in_month(month)) + 1
    return Birthday(day, month)


def random_birthdays(count, rng=None):
    """Return a list of ``count`` random birthdays."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = random if rng is None else rng
    return [random_birthday(rng) for _ in range(count)]


def matching_pairs(birthdays):
    """Return index pairs (i, j), i < j, of people who share a birthday."""
    people = list(birthdays)
    return [
        (i, j)
        for i, first in enumerate(people)
        for j, second in enumerate(people[i + 1:], start=i + 1)
        if first == second
    ]


def main(argv=None):
    """Draw birthdays for a group and report the matches found."""
    parser = argparse.ArgumentParser(
        prog="birthday", description="Simulate the birthday problem."
    )
    parser.add_argument("--people", type=int, default=50, help="group size")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.people < 0:
        parser.error("--people must not be negative")

    rng = random.Random(args.seed)
    birthdays = random_birthdays(args.people, rng)
    for number, birthday in enumerate(birthdays, start=1):
        print(f"Person {number}:\tDay:\t{birthday.day}\tMonth:\t{birthday.month}")

    print("\nPress any key to start searching: ", end="")
    try:
        input()
    except EOFError:
        pass
    print("\n")

    pairs = matching_pairs(birthdays)
    both_ways = sorted(pairs + [(j, i) for i, j in pairs])
    for i, j in both_ways:
        print(f"Match found with person {i + 1} and person {j + 1}")

    if not pairs:
        print("No match found")
    else:
        print(
            f"\n>>> Among {args.people} people, {len(pairs)} pairs of "
            "matching birthdays were found!"
        )
    try:
        input()
    except EOFError:
        pass
    return 0