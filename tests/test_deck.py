import random
from collections import Counter

import pytest

from blackjack_duel.common.card import Card, Rank, Suit
from blackjack_duel.common.deck import (
    Deck,
    create_deck,
    default_deck,
    draw_card,
    fisher_yates_shuffle,
)
from blackjack_duel.common.exceptions import EmptyDeckError
from blackjack_duel.common.rng import seed_rng


def test_default_deck_order():
    cards = default_deck()
    assert len(cards) == 52
    assert cards[0] == Card(Suit.HEARTS, Rank.ACE)
    assert cards[12] == Card(Suit.HEARTS, Rank.KING)
    assert cards[13] == Card(Suit.SPADES, Rank.ACE)
    assert cards[-1] == Card(Suit.DIAMONDS, Rank.KING)


def test_create_deck_is_permutation():
    for seed in range(20):
        cards = create_deck(random.Random(seed))
        assert len(cards) == 52
        assert len(set(cards)) == 52
        assert set(cards) == set(default_deck())


def test_create_deck_shuffles():
    assert create_deck(random.Random(5)) != default_deck()


def test_create_deck_reproducible_with_seed():
    assert create_deck(random.Random(99)) == create_deck(random.Random(99))


def test_fisher_yates_swaps_from_the_end():
    class Recorder(random.Random):
        def __init__(self):
            super().__init__(0)
            self.calls = []

        def randint(self, a, b):
            self.calls.append((a, b))
            return b

    rng = Recorder()
    cards = list(default_deck()[:5])
    assert fisher_yates_shuffle(cards, rng) == list(default_deck()[:5])
    assert rng.calls == [(0, 4), (0, 3), (0, 2), (0, 1)]


def test_fisher_yates_single_card():
    card = Card(Suit.CLUBS, Rank.TWO)
    assert fisher_yates_shuffle([card], random.Random(0)) == [card]


def test_draw_card_removes_card():
    cards = default_deck()
    card, remaining = draw_card(cards, random.Random(3))
    assert len(remaining) == 51
    assert card not in remaining
    assert set(remaining) | {card} == set(cards)


def test_draw_card_picks_random_position():
    rng = random.Random(11)
    first_cards = {draw_card(default_deck(), rng)[0] for _ in range(200)}
    assert len(first_cards) > 1


def test_draw_until_empty_yields_each_card_once():
    rng = random.Random(21)
    remaining = create_deck(rng)
    drawn = []
    while remaining:
        card, remaining = draw_card(remaining, rng)
        drawn.append(card)
    assert len(drawn) == 52
    assert Counter(drawn) == Counter(default_deck())


def test_draw_card_empty_deck():
    with pytest.raises(EmptyDeckError):
        draw_card((), random.Random(0))


def test_deck_initialization():
    deck = Deck(rng=random.Random(1))
    assert isinstance(deck.cards, list)
    assert deck.size == 52
    assert len(deck) == 52


def test_deck_initialization_with_custom_cards():
    cards = [
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.DIAMONDS, Rank.ACE),
        Card(Suit.CLUBS, Rank.JACK),
    ]
    deck = Deck(cards)
    assert deck.cards == cards
    assert deck.cards is not cards


def test_deck_shuffle():
    deck = Deck(list(default_deck()), rng=random.Random(2))
    original_order = deck.cards.copy()
    deck.shuffle()
    assert deck.cards != original_order
    assert set(deck.cards) == set(original_order)


def test_deck_draw():
    deck = Deck(rng=random.Random(4))
    card = deck.draw()
    assert isinstance(card, Card)
    assert deck.size == 51
    assert card not in deck.cards


def test_deck_deal():
    deck = Deck(rng=random.Random(4))
    cards = deck.deal(5)
    assert len(cards) == 5
    assert deck.size == 47


def test_deck_draw_until_empty():
    deck = Deck(rng=random.Random(6))
    drawn = [deck.draw() for _ in range(52)]
    assert deck.is_empty()
    assert len(set(drawn)) == 52
    with pytest.raises(EmptyDeckError):
        deck.draw()


def test_deck_reset_after_draw():
    deck = Deck(rng=random.Random(8))
    deck.deal(10)
    deck.reset()
    assert deck.size == 52
    assert Counter(deck.cards) == Counter(default_deck())


def test_deck_uses_shared_rng_by_default():
    seed_rng(77)
    first = Deck().cards
    seed_rng(77)
    second = Deck().cards
    assert first == second


def test_deck_repr_and_str():
    deck = Deck(rng=random.Random(0))
    assert repr(deck) == f"Deck({[repr(card) for card in deck.cards]})"
    assert str(deck) == "Deck of 52 cards"
