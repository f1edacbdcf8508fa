"""
Helpers for building duel rounds with known hands and decks.

Draws come from a random position, so tests that need to know which card is
dealt use decks whose cards all score the same.
"""

from blackjack_duel.common.card import Card, Suit
from blackjack_duel.config import DEFAULT_RULES
from blackjack_duel.duel.scoring import score_hand
from blackjack_duel.duel.state import COMPUTER, HUMAN, ParticipantState, RoundState

_SUITS = list(Suit)


def cards_of(*ranks):
    """Cards of the given ranks, cycling suits so repeated ranks stay distinct."""
    return tuple(Card(_SUITS[i % 4], rank) for i, rank in enumerate(ranks))


def build_round(
    human=(),
    computer=(),
    deck=(),
    human_holding=False,
    computer_holding=False,
    rules=DEFAULT_RULES,
):
    return RoundState(
        deck=tuple(deck),
        human=ParticipantState(
            HUMAN,
            hand=tuple(human),
            score=score_hand(human, rules),
            holding=human_holding,
        ),
        computer=ParticipantState(
            COMPUTER,
            hand=tuple(computer),
            score=score_hand(computer, rules),
            holding=computer_holding,
        ),
        rules=rules,
    )
