"""Rock, paper, scissors against the computer at three difficulty levels."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum

CLEAR = "\033[2J\033[H"


class Move(Enum):
    """A hand the player or the computer can show."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def label(self) -> str:
        return _MOVE_LABELS[self]

    @property
    def beats(self) -> Move:
        """The move this one defeats."""
        return _BEATS[self]


_MOVE_LABELS = {Move.ROCK: "Sasso", Move.PAPER: "Carta", Move.SCISSORS: "Forbici"}
_BEATS = {Move.ROCK: Move.SCISSORS, Move.PAPER: Move.ROCK, Move.SCISSORS: Move.PAPER}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


class Difficulty(Enum):
    """How the computer chooses its move."""

    EASY = 1
    NORMAL = 2
    HARD = 3

    @property
    def label(self) -> str:
        return _DIFFICULTY_LABELS[self]


_DIFFICULTY_LABELS = {
    Difficulty.EASY: "Facilissimo",
    Difficulty.NORMAL: "Normale",
    Difficulty.HARD: "Impossibile",
}


class Outcome(Enum):
    """The result of one round, with the banner shown for it."""

    DRAW = "Pari"
    PLAYER = "Hai vinto"
    COMPUTER = "Computer vinto"


@dataclass(frozen=True)
class RoundResult:
    """The moves of one round and who won it."""

    player: Move
    computer: Move
    outcome: Outcome

    def describe(self) -> str:
        return (
            f"Tu hai scelto '{self.player.label}' - "
            f"Computer ha scelto '{self.computer.label}' \n"
            f"\t\t*** {self.outcome.value} *** "
        )


def judge(player, computer):
    """Return the outcome of ``player`` against ``computer``."""
    if player == computer:
        return Outcome.DRAW
    if player.beats == computer:
        return Outcome.PLAYER
    return Outcome.COMPUTER


def computer_move(difficulty, player, rng=None):
    """Choose the computer's move for the given difficulty.

    The easiest level always loses, the hardest always wins and the
    normal level draws a move uniformly at random.
    """
    if difficulty is Difficulty.EASY:
        return player.beats
    if difficulty is Difficulty.HARD:
        return _BEATEN_BY[player]
    rng = random if rng is None else rng
    return Move(rng.randrange(3) + 1)


class Game:
    """A sequence of rounds with a running score."""

    def __init__(self, difficulty=Difficulty.NORMAL, rng=None):
        self.difficulty = Difficulty(difficulty)
        self.rng = random.Random() if rng is None else rng
        self.player_score = 0
        self.computer_score = 0

    def play(self, choice):
        """Play one round with the player's choice (1-3 or a Move)."""
        try:
            player = Move(choice)
        except ValueError:
            raise ValueError("Scelta sbagiata") from None
        computer = computer_move(self.difficulty, player, self.rng)
        outcome = judge(player, computer)
        if outcome is Outcome.PLAYER:
            self.player_score += 1
        elif outcome is Outcome.COMPUTER:
            self.computer_score += 1
        return RoundResult(player, computer, outcome)

    def scoreboard(self):
        """Return the score table."""
        return (
            "    Player   |   Computer\n"
            "-------------------------\n"
            f"       {self.player_score}     |     {self.computer_score}"
        )


def _read_int(prompt: str = "") -> int | None:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        return None


def _home_menu(difficulty: Difficulty) -> str:
    return (
        "\t\tSasso - Carta - Forbici\n\n"
        "\t1. Gioca\n"
        f"\t2. Difficolta: {difficulty.label}\n"
        "\t3. About\n"
        "\t4. Esci"
    )


def _choose_difficulty(game: Game) -> None:
    print(CLEAR, end="")
    print("\t\tScegli Difficolta\n")
    print("\t1. Facilissimo")
    print("\t2. Normale")
    print("\t3. Impossibile")
    print("\t4. Ritorna")
    choice = _read_int()
    if choice in (1, 2, 3):
        game.difficulty = Difficulty(choice)
    print(CLEAR, end="")


def _play_session(game: Game) -> None:
    while True:
        print(f"\t\tDifficolta {game.difficulty.label}\n")
        print("\tInserisci la tua scelta: \n\n\t1.Sasso\n\t2.Carta\n\t3.Forbici")
        choice = _read_int()
        print(CLEAR, end="")
        try:
            result = game.play(choice)
        except ValueError:
            print("!!! Scelta sbagiata !!!")
        else:
            print(result.describe())
            print()
            print(game.scoreboard())
        print("\nPremi 'a' per giocare ancora")
        if input().strip() != "a":
            return
        print(CLEAR, end="")


def main(argv=None):
    """Show the home menu and play until the player leaves."""
    parser = argparse.ArgumentParser(
        prog="sasso-carta-forbici", description="Play rock, paper, scissors."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    game = Game(Difficulty.NORMAL, random.Random(args.seed))
    try:
        while True:
            print(_home_menu(game.difficulty))
            choice = _read_int()
            if choice == 1:
                print(CLEAR, end="")
                _play_session(game)
                return 0
            if choice == 2:
                _choose_difficulty(game)
            elif choice == 3:
                print(CLEAR, end="")
                print("Made with Python")
                input()
                print(CLEAR, end="")
            else:
                return 0
    except EOFError:
        print()
        return 0