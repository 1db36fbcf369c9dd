"""Tests for the rock paper scissors kata."""

import pytest

from katadojo.katas.rock_paper_scissors import Move, Outcome, RockPaperScissors


@pytest.fixture
def sut():
    return RockPaperScissors()


# --- Decisive rounds ---

@pytest.mark.parametrize("player, opponent, expected", [
    (Move.PAPER, Move.ROCK, Outcome.PLAYER_WINS),
    (Move.ROCK, Move.PAPER, Outcome.PLAYER_LOSES),
    (Move.SCISSORS, Move.PAPER, Outcome.PLAYER_WINS),
    (Move.PAPER, Move.SCISSORS, Outcome.PLAYER_LOSES),
    (Move.ROCK, Move.SCISSORS, Outcome.PLAYER_WINS),
    (Move.SCISSORS, Move.ROCK, Outcome.PLAYER_LOSES),
])
def test_decisive(sut, player, opponent, expected):
    assert sut.play(player, opponent) == expected


# --- Ties ---

@pytest.mark.parametrize("move", list(Move))
def test_same_move_ties(sut, move):
    assert sut.play(move, move) == Outcome.TIE


def test_outcome_is_antisymmetric(sut):
    for player in Move:
        for opponent in Move:
            forward = sut.play(player, opponent)
            backward = sut.play(opponent, player)
            if forward is Outcome.TIE:
                assert backward is Outcome.TIE
            else:
                assert {forward, backward} == {Outcome.PLAYER_WINS, Outcome.PLAYER_LOSES}
