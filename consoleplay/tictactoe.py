"""Tic-tac-toe against a computer that plays random moves."""

from __future__ import annotations

import argparse
import random
from enum import Enum

CLEAR = "\033[2J\033[H"

PLAYER = "player"
COMPUTER = "computer"
DRAW = "draw"

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

# The computer only ever picks among the first eight cells.
_COMPUTER_CELLS = range(1, 9)


class Mark(Enum):
    """The mark placed in a cell."""

    X = "X"
    O = "O"  # noqa: E741


class Board:
    """A 3x3 grid whose cells are numbered 1 to 9, row by row."""

    def __init__(self):
        self._cells: list[Mark | None] = [None] * 9

    def __getitem__(self, cell: int) -> Mark | None:
        return self._cells[self._index(cell)]

    @staticmethod
    def _index(cell: int) -> int:
        if not isinstance(cell, int) or not 1 <= cell <= 9:
            raise ValueError(f"cell must be between 1 and 9, got {cell!r}")
        return cell - 1

    def place(self, cell, mark):
        """Put ``mark`` in an empty ``cell``."""
        index = self._index(cell)
        if self._cells[index] is not None:
            raise ValueError(f"cell {cell} is already taken")
        self._cells[index] = Mark(mark)

    def free_cells(self):
        """Return the numbers of the empty cells in ascending order."""
        return [number for number, mark in enumerate(self._cells, start=1) if mark is None]

    def winner(self):
        """Return the mark that fills a line, or None."""
        for a, b, c in _LINES:
            mark = self._cells[a]
            if mark is not None and mark == self._cells[b] == self._cells[c]:
                return mark
        return None

    def is_full(self):
        return all(mark is not None for mark in self._cells)

    def reset(self):
        self._cells = [None] * 9

    def render(self):
        """Return the grid as text."""
        symbols = [" " if mark is None else mark.value for mark in self._cells]
        rows = [" {} | {} | {} ".format(*symbols[start:start + 3]) for start in (0, 3, 6)]
        return "\n-----------\n".join(rows)


def computer_cell(board, rng=None):
    """Pick a random free cell among cells 1 to 8."""
    choices = [cell for cell in board.free_cells() if cell in _COMPUTER_CELLS]
    if not choices:
        raise ValueError("no cell available for the computer")
    rng = random if rng is None else rng
    return rng.choice(choices)


class Match:
    """Rounds between the player (X) and the computer (O), with scores."""

    def __init__(self, rng=None):
        self.rng = random.Random() if rng is None else rng
        self.board = Board()
        self.player_score = 0
        self.computer_score = 0
        self.result: str | None = None

    def _settle(self, mover: str) -> str | None:
        if self.board.winner() is not None:
            self.result = mover
            if mover == PLAYER:
                self.player_score += 1
            else:
                self.computer_score += 1
        elif self.board.is_full():
            self.result = DRAW
        return self.result

    def _check_open(self) -> None:
        if self.result is not None:
            raise ValueError("the round is over")

    def player_move(self, cell):
        """Place the player's X; return the round's result or None."""
        self._check_open()
        self.board.place(cell, Mark.X)
        return self._settle(PLAYER)

    def computer_move(self):
        """Place the computer's O; return the round's result or None."""
        self._check_open()
        self.board.place(computer_cell(self.board, self.rng), Mark.O)
        return self._settle(COMPUTER)

    def new_round(self):
        self.board.reset()
        self.result = None

    def header(self):
        return f"    Player: {self.player_score}   |   Computer: {self.computer_score} "


_MESSAGES = {PLAYER: "You won", COMPUTER: "Computer won", DRAW: "Its a draw"}


def _show(match: Match) -> None:
    print(CLEAR, end="")
    print(match.header() + "\n")
    print(match.board.render())


def _read_cell(match: Match) -> int:
    free = set(match.board.free_cells())
    while True:
        text = input("\nEnter the number of your move: ").strip()
        try:
            cell = int(text)
        except ValueError:
            continue
        if cell in free:
            return cell


def _ask_again() -> bool:
    print("Do you want to play again(y/n): ")
    while True:
        answer = input().strip()
        if answer in ("y", "n"):
            return answer == "y"


def main(argv=None):
    """Play rounds until the player declines another one."""
    parser = argparse.ArgumentParser(
        prog="tictactoe", description="Play tic-tac-toe against the computer."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    match = Match(random.Random(args.seed))
    try:
        while True:
            _show(match)
            result = match.player_move(_read_cell(match))
            _show(match)
            if result is None:
                result = match.computer_move()
                _show(match)
            if result is None:
                continue
            print(f"\n{_MESSAGES[result]}")
            if _ask_again():
                match.new_round()
                continue
            print(CLEAR, end="")
            print(match.header() + "\n")
            print("Press any key to continue: ")
            input()
            return 0
    except EOFError:
        print()
        return 0