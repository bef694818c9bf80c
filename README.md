# consoleplay

A handful of small interactive console programs: two games, an Ohm's law
calculator, a decimal-to-binary converter, a stopwatch, a birthday-problem
simulation and three classic algorithms. Each one is a plain Python module
that you can import as well as run. There are no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command                  | What it does |
|--------------------------|--------------|
| `consoleplay-ohms`       | Menu to work out tension (V=R*I), resistance (R=V/I) or current (I=V/R) |
| `consoleplay-stopwatch`  | Asks for hour, minute and second, then counts up to that time, one tick a second; offers another run (Y/N) |
| `consoleplay-birthday`   | Draws random birthdays for a group and lists the people who share one |
| `consoleplay-binary`     | Reads a whole number and prints its binary digits |
| `consoleplay-algorithms` | Shows binary search, bubble sort and selection sort on fixed sample data |
| `consoleplay-rps`        | Rock-paper-scissors (Sasso - Carta - Forbici) against the computer, at three difficulties |
| `consoleplay-tictactoe`  | Tic-tac-toe against a computer that plays at random |

Options:

- `consoleplay-birthday [--people N] [--seed S]` — group size (default 50)
  and random seed.
- `consoleplay-algorithms [search|bubble|selection|all]` — which demo to run
  (default `all`).
- `consoleplay-rps [--seed S]` and `consoleplay-tictactoe [--seed S]` — seed
  the computer's random choices.

Interactive screens are cleared with ANSI escape codes. Pressing Ctrl-D
(end of input) at a prompt leaves the program.

## Using the modules

```python
from consoleplay.ohms_law import tension, resistance, current
from consoleplay.binary import binary_digits, format_binary
from consoleplay.algorithms import binary_search, bubble_sort, selection_sort
from consoleplay.birthday import Birthday, random_birthdays, matching_pairs
from consoleplay.stopwatch import normalize, ticks, format_tick

tension(10, 2)                # 20
resistance(20, 2)             # 10.0
current(20, 10)               # 2.0; a zero divisor raises ZeroDivisionError

binary_digits(10)             # [1, 0, 1, 0]
format_binary(10)             # "1  0  1  0  "

bubble_sort([5, 4, 3, 2, 1])  # [1, 2, 3, 4, 5]
selection_sort([5, 2, 4, 1, 3])
binary_search([15, 24, 43, 65, 75, 81, 85, 91, 95], 85)  # 6 (None if absent)

people = random_birthdays(50)
matching_pairs(people)        # list of (i, j) index pairs, i < j

duration = normalize(0, 1, 30)
format_tick(0, 1, 5)          # "STOPWATCH:   00 : 01 : 05"
list(ticks(duration))[-1]     # (0, 1, 30)
```

`stopwatch.run(duration, sleep, out)` shows every reading, calling `sleep(1)`
before each one, and returns how many readings were shown; pass your own
`sleep` and `out` to drive it without waiting.

The games can be driven in code as well:

```python
import random
from consoleplay.rock_paper_scissors import Game, Difficulty, Move
from consoleplay.tictactoe import Match

game = Game(Difficulty.NORMAL, random.Random(1))
result = game.play(Move.ROCK)     # RoundResult(player, computer, outcome)
print(result.describe())
print(game.scoreboard())

match = Match(random.Random(1))
match.player_move(5)              # None while the round is still open
match.computer_move()
print(match.board.render())
print(match.header())
```

In rock-paper-scissors the easiest level always lets the player win, the
hardest always beats the player, and the normal level picks a move at
random. An invalid choice raises `ValueError`.

In tic-tac-toe cells are numbered 1 to 9, row by row. `player_move` and
`computer_move` return `"player"`, `"computer"` or `"draw"` once the round
is decided; `new_round()` clears the board and keeps the scores.

## Limitations

- The tic-tac-toe computer does not play strategically: it picks a random
  free cell, and only among cells 1 to 8.
- Both games are for one person against the computer; there is no
  two-player mode.
- The stopwatch only counts up to a target; it has no pause or lap times.