"""Ohm's law calculator for tension, resistance and current (V = R * I)."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable

CLEAR = "\033[2J\033[H"
MENU = (
    "What do you want to calculute?\n"
    " Enter the number: \n"
    "    1)electric tension \n"
    "    2)Resistance\n"
    "    3)Current \n"
    "    4)Exit\n"
    " Enter here ==> "
)


def tension(resistance, current):
    """Return the electric tension V = R * I."""
    return resistance * current


def resistance(tension, current):
    """Return the resistance R = V / I."""
    if current == 0:
        raise ZeroDivisionError("current must not be zero")
    return tension / current


def current(tension, resistance):
    """Return the current I = V / R."""
    if resistance == 0:
        raise ZeroDivisionError("resistance must not be zero")
    return tension / resistance


@dataclass(frozen=True)
class _Screen:
    title: str
    first_prompt: str
    second_prompt: str
    formula: str
    label: str
    spec: str
    compute: Callable[[float, float], float]


_SCREENS = {
    1: _Screen(
        "***Calculate the electric tension***",
        "Enter the valu of the resistance: ",
        "Enter the value of the current: ",
        "V=R*I",
        "The value of the electric tension is: ",
        ".2f",
        tension,
    ),
    2: _Screen(
        "***Calculate the Resistance***",
        "Enter the value of the electric tension: ",
        "Enter the value of the current: ",
        "R=V/I",
        "The value of the resistance is: ",
        "f",
        resistance,
    ),
    3: _Screen(
        "***Calculate the Current***",
        "Enter the value of the electric tension: ",
        "Enter the value of the resistance: ",
        "I=V/R",
        "The value of the current is: ",
        "f",
        current,
    ),
}


def _read_float(prompt: str) -> float:
    while True:
        text = input(prompt)
        try:
            return float(text)
        except ValueError:
            print("Please enter a number.")


def _show(screen: _Screen) -> None:
    print(CLEAR, end="")
    print(screen.title + "\n")
    first = _read_float(screen.first_prompt)
    second = _read_float(screen.second_prompt)
    print(screen.formula)
    try:
        value = screen.compute(first, second)
    except ZeroDivisionError:
        print("Error: cannot divide by zero")
    else:
        print(f"{screen.label}{value:{screen.spec}}")
    print("\nEnter any key to continue ==>", end="")
    input()


def main(argv=None):
    """Show the menu, run one calculation and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="ohms-law", description="Calculate tension, resistance or current."
    )
    parser.parse_args(argv)
    try:
        while True:
            print(MENU, end="")
            text = input().strip()
            try:
                choice = int(text)
            except ValueError:
                choice = 0
            if choice == 4:
                return 0
            screen = _SCREENS.get(choice)
            if screen is None:
                print(CLEAR, end="")
                print("\n!!! Incorrect input !!!\n")
                continue
            _show(screen)
            return 0
    except EOFError:
        print()
        return 0