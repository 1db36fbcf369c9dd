"""Rock paper scissors kata.

Task: judge one round between a player and an opponent.
"""

from katadojo.katas.rock_paper_scissors.rock_paper_scissors import Move, Outcome, RockPaperScissors

NAME = "rock_paper_scissors"
DESCRIPTION = "Judge a round of rock paper scissors"

__all__ = ["Move", "Outcome", "RockPaperScissors"]
