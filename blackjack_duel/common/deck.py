"""
This module contains the deck operations and the Deck class.

Cards leave the deck from a uniformly random position, not from the top, so
the order produced by the shuffle only matters for fairness checks.

>>> import random
>>> deck = Deck(rng=random.Random(0))
>>> deck.size
52
>>> card = deck.draw()
>>> deck.size
51
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from blackjack_duel.common.card import Card, Rank, Suit
from blackjack_duel.common.exceptions import EmptyDeckError
from blackjack_duel.common.rng import get_rng

logger = logging.getLogger("blackjack_duel.deck")

SUIT_ORDER = (Suit.HEARTS, Suit.SPADES, Suit.CLUBS, Suit.DIAMONDS)
RANK_ORDER = tuple(Rank)

# Precompute the unshuffled deck
_DEFAULT_DECK: Tuple[Card, ...] = tuple(
    Card(suit, rank) for suit in SUIT_ORDER for rank in RANK_ORDER
)


def default_deck() -> Tuple[Card, ...]:
    """Return the 52 cards in suit-major, Ace-to-King order."""
    return _DEFAULT_DECK


def fisher_yates_shuffle(
    cards: List[Card], rng: Optional[random.Random] = None
) -> List[Card]:
    """
    Shuffle ``cards`` in place and return it.

    Walks from the last index down to index 1, swapping each position with a
    uniformly chosen index at or below it.
    """
    rng = rng or get_rng()
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


def create_deck(rng: Optional[random.Random] = None) -> Tuple[Card, ...]:
    """
    Build a full deck and shuffle it.

    :param rng: Random source; the shared process generator when omitted.
    :return: A tuple of 52 unique cards in shuffled order.
    """
    cards = fisher_yates_shuffle(list(_DEFAULT_DECK), rng)
    logger.debug("Deck created and shuffled")
    return tuple(cards)


def draw_card(
    cards: Sequence[Card], rng: Optional[random.Random] = None
) -> Tuple[Card, Tuple[Card, ...]]:
    """
    Remove a card from a random position.

    :param cards: The remaining cards.
    :param rng: Random source; the shared process generator when omitted.
    :return: The drawn card and the remaining cards.
    :raises EmptyDeckError: If ``cards`` is empty.
    """
    if not cards:
        raise EmptyDeckError("The deck is empty. Cannot draw a new card.")
    rng = rng or get_rng()
    index = rng.randrange(len(cards))
    return cards[index], tuple(cards[:index]) + tuple(cards[index + 1 :])


class Deck:
    """
    A mutable deck of cards for callers that prefer an object to tuples.
    """

    def __init__(
        self,
        cards: Optional[Sequence[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: Cards to populate the deck with (optional). If not
                      provided, a full shuffled deck is created.
        :param rng: Random source used for shuffling and drawing.
        """
        self._rng = rng
        if cards is None:
            self.cards: List[Card] = list(create_deck(self._rng))
        else:
            self.cards = list(cards)

    def shuffle(self) -> "Deck":
        fisher_yates_shuffle(self.cards, self._rng)
        return self

    def draw(self) -> Card:
        """
        Remove and return a card from a random position.

        :raises EmptyDeckError: If the deck is empty.
        """
        card, remaining = draw_card(self.cards, self._rng)
        self.cards = list(remaining)
        return card

    def deal(self, num_cards: int = 1) -> List[Card]:
        """Draw ``num_cards`` cards."""
        return [self.draw() for _ in range(num_cards)]

    @property
    def size(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def reset(self) -> None:
        """
        Reset the deck to a full, freshly shuffled set of 52 cards.
        """
        self.cards = list(create_deck(self._rng))

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
