"""Blackjack duel constants and value mappings."""

from blackjack_duel.common.card import Rank

# Thresholds (target, Ace values, computer stand) live in config.DuelRules.
# Ace is resolved against the running score, see scoring.incremental_card_value
RANK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


def get_rank_value(rank: Rank) -> int:
    """Get the scoring value for a non-Ace rank."""
    try:
        return RANK_VALUES[rank]
    except KeyError:
        raise ValueError(f"{rank} has no fixed value") from None
