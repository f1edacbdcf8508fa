"""
Scoring for a duel hand.

A hand is scored one card at a time. An Ace counts high when the high value
still fits under the target at the moment it is added, and low otherwise.
Once counted, an Ace keeps its value for the rest of the round, so the
total depends on the order the cards arrived in:

>>> from blackjack_duel.common.card import Card, Rank, Suit
>>> five = Card(Suit.CLUBS, Rank.FIVE)
>>> score_hand([five, five, Card(Suit.SPADES, Rank.ACE), five])
26
"""

from typing import Iterable, Optional

from blackjack_duel.common.card import Card
from blackjack_duel.config import DEFAULT_RULES, DuelRules
from blackjack_duel.duel.constants import get_rank_value


def incremental_card_value(
    current_score: int, card: Card, rules: Optional[DuelRules] = None
) -> int:
    """
    Value ``card`` adds to a hand currently worth ``current_score``.
    """
    rules = rules or DEFAULT_RULES
    if card.is_ace:
        if current_score + rules.ace_high_value <= rules.target_score:
            return rules.ace_high_value
        return rules.ace_low_value
    return get_rank_value(card.rank)


def add_card(current_score: int, card: Card, rules: Optional[DuelRules] = None) -> int:
    return current_score + incremental_card_value(current_score, card, rules)


def score_hand(cards: Iterable[Card], rules: Optional[DuelRules] = None) -> int:
    """Score a hand as if its cards had been drawn in the given order."""
    score = 0
    for card in cards:
        score = add_card(score, card, rules)
    return score


def is_bust(score: int, rules: Optional[DuelRules] = None) -> bool:
    return score > (rules or DEFAULT_RULES).target_score


def reaches_target(score: int, rules: Optional[DuelRules] = None) -> bool:
    """True once a score has hit or passed the target, which ends drawing."""
    return score >= (rules or DEFAULT_RULES).target_score
