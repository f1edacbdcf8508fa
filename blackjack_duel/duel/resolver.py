"""Round outcome resolution."""

from enum import Enum
from typing import Optional

from blackjack_duel.config import DEFAULT_RULES, DuelRules


class Outcome(Enum):
    """Result of a finished round. Values are the labels shown to the player."""

    BUST = "Bust"
    HUMAN = "You"
    TIE = "Tie"
    COMPUTER = "Computer"

    def __str__(self) -> str:
        return self.value


def resolve_winner(
    human_score: int, computer_score: int, rules: Optional[DuelRules] = None
) -> Outcome:
    """
    Decide the round from both final scores.

    The checks run in order and the first match wins, so a human at or under
    the target beats a busted computer regardless of the comparison.
    """
    target = (rules or DEFAULT_RULES).target_score

    if human_score > target and computer_score > target:
        return Outcome.BUST
    if human_score <= target and (
        human_score > computer_score or computer_score > target
    ):
        return Outcome.HUMAN
    if human_score == computer_score and human_score <= target:
        return Outcome.TIE
    return Outcome.COMPUTER
