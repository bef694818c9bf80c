import builtins
import itertools
import random

import pytest

from consoleplay.rock_paper_scissors import (
    Difficulty,
    Game,
    Move,
    Outcome,
    RoundResult,
    computer_move,
    judge,
    main,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert 0 <= self.value < stop
        return self.value


def _feed(monkeypatch, answers):
    stream = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(stream)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.mark.parametrize("move", list(Move))
def test_same_moves_draw(move):
    assert judge(move, move) is Outcome.DRAW


@pytest.mark.parametrize("a, b", list(itertools.permutations(Move, 2)))
def test_judge_is_antisymmetric(a, b):
    first = judge(a, b)
    second = judge(b, a)
    assert {first, second} == {Outcome.PLAYER, Outcome.COMPUTER}


def test_rock_beats_scissors():
    assert judge(Move.ROCK, Move.SCISSORS) is Outcome.PLAYER
    assert judge(Move.ROCK, Move.PAPER) is Outcome.COMPUTER


@pytest.mark.parametrize("player", list(Move))
def test_easy_computer_always_loses(player):
    assert judge(player, computer_move(Difficulty.EASY, player)) is Outcome.PLAYER


@pytest.mark.parametrize("player", list(Move))
def test_hard_computer_always_wins(player):
    assert judge(player, computer_move(Difficulty.HARD, player)) is Outcome.COMPUTER


@pytest.mark.parametrize("index, expected", [(0, Move.ROCK), (1, Move.PAPER), (2, Move.SCISSORS)])
def test_normal_computer_uses_rng(index, expected):
    assert computer_move(Difficulty.NORMAL, Move.ROCK, _FixedRng(index)) is expected


def test_normal_computer_covers_all_moves():
    rng = random.Random(3)
    seen = {computer_move(Difficulty.NORMAL, Move.PAPER, rng) for _ in range(200)}
    assert seen == set(Move)


def test_game_scores_hard_rounds():
    game = Game(Difficulty.HARD)
    results = [game.play(choice) for choice in (1, 2, 3)]
    assert all(r.outcome is Outcome.COMPUTER for r in results)
    assert (game.player_score, game.computer_score) == (0, 3)


def test_game_scores_easy_round():
    game = Game(Difficulty.EASY)
    result = game.play(Move.PAPER)
    assert result == RoundResult(Move.PAPER, Move.ROCK, Outcome.PLAYER)
    assert (game.player_score, game.computer_score) == (1, 0)


def test_draw_leaves_score_unchanged():
    game = Game(Difficulty.NORMAL, _FixedRng(1))
    assert game.play(2).outcome is Outcome.DRAW
    assert (game.player_score, game.computer_score) == (0, 0)


@pytest.mark.parametrize("choice", [0, 4, None])
def test_invalid_choice_raises(choice):
    game = Game()
    with pytest.raises(ValueError, match="Scelta sbagiata"):
        game.play(choice)
    assert (game.player_score, game.computer_score) == (0, 0)


def test_scoreboard_shows_scores():
    game = Game(Difficulty.EASY)
    game.play(1)
    game.play(3)
    board = game.scoreboard()
    assert "    Player   |   Computer" in board
    assert board.splitlines()[-1].split("|")[0].strip() == "2"
    assert board.splitlines()[-1].split("|")[1].strip() == "0"


def test_describe_matches_display():
    text = RoundResult(Move.ROCK, Move.PAPER, Outcome.COMPUTER).describe()
    assert "Tu hai scelto 'Sasso' - Computer ha scelto 'Carta' " in text
    assert "*** Computer vinto ***" in text


def test_main_exit_option(monkeypatch, capsys):
    _feed(monkeypatch, ["4"])
    assert main([]) == 0
    assert "Difficolta: Normale" in capsys.readouterr().out


def test_main_hard_game(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "3", "1", "1", "q"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Difficolta: Impossibile" in out
    assert "Tu hai scelto 'Sasso' - Computer ha scelto 'Carta' " in out
    assert "*** Computer vinto ***" in out


def test_main_invalid_round_choice(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "7", "q"])
    assert main([]) == 0
    assert "!!! Scelta sbagiata !!!" in capsys.readouterr().out


def test_main_play_again(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "1", "1", "2", "a", "3", "q"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("*** Hai vinto ***") == 2


def test_main_end_of_input(monkeypatch):
    _feed(monkeypatch, [])
    assert main([]) == 0