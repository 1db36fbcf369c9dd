"""Rock paper scissors judge.

Only the six decisive pairings are listed; anything else is a tie.
"""

from __future__ import annotations

from enum import Enum


class Move(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class Outcome(str, Enum):
    PLAYER_WINS = "player-wins"
    PLAYER_LOSES = "player-loses"
    TIE = "tie"


# (player, opponent) -> outcome
_DECISIVE: dict[tuple[Move, Move], Outcome] = {
    (Move.SCISSORS, Move.PAPER): Outcome.PLAYER_WINS,
    (Move.SCISSORS, Move.ROCK): Outcome.PLAYER_LOSES,
    (Move.ROCK, Move.SCISSORS): Outcome.PLAYER_WINS,
    (Move.ROCK, Move.PAPER): Outcome.PLAYER_LOSES,
    (Move.PAPER, Move.ROCK): Outcome.PLAYER_WINS,
    (Move.PAPER, Move.SCISSORS): Outcome.PLAYER_LOSES,
}


class RockPaperScissors:
    """Judges a single round."""

    def play(self, player: Move, opponent: Move) -> Outcome:
        return _DECISIVE.get((player, opponent), Outcome.TIE)
