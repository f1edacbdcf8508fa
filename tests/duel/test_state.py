import dataclasses

import pytest

from blackjack_duel.common.card import Card, Rank, Suit
from blackjack_duel.duel.state import (
    COMPUTER,
    HUMAN,
    GameStage,
    ParticipantState,
    RoundState,
)

from duel_helpers import build_round, cards_of


def test_participant_defaults():
    participant = ParticipantState(HUMAN)
    assert participant.hand == ()
    assert participant.score == 0
    assert participant.is_drawing


def test_with_card_scores_incrementally():
    participant = ParticipantState(HUMAN)
    for card in cards_of(Rank.FIVE, Rank.FIVE, Rank.ACE, Rank.FIVE):
        participant = participant.with_card(card)
    assert participant.score == 26
    assert len(participant.hand) == 4


def test_with_card_leaves_original_untouched():
    participant = ParticipantState(HUMAN)
    updated = participant.with_card(Card(Suit.HEARTS, Rank.KING))
    assert participant.hand == ()
    assert updated.hand == (Card(Suit.HEARTS, Rank.KING),)


def test_held_is_idempotent():
    participant = ParticipantState(COMPUTER)
    held = participant.held()
    assert held.holding
    assert held.held() is held


def test_participant_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ParticipantState(HUMAN).score = 5


def test_round_stage():
    state = build_round()
    assert state.stage is GameStage.DRAWING
    assert not state.is_round_over

    state = build_round(human_holding=True, computer_holding=True)
    assert state.stage is GameStage.ROUND_OVER
    assert state.is_round_over


def test_participant_lookup():
    state = build_round(human=cards_of(Rank.TEN), computer=cards_of(Rank.TWO))
    assert state.participant(HUMAN).score == 10
    assert state.participant(COMPUTER).score == 2
    with pytest.raises(ValueError):
        state.participant("dealer")


def test_with_participant():
    state = build_round()
    updated = state.with_participant(state.computer.held())
    assert updated.computer.holding
    assert not state.computer.holding
    with pytest.raises(ValueError):
        state.with_participant(ParticipantState("dealer"))


def test_to_dict():
    state = build_round(
        human=cards_of(Rank.KING, Rank.ACE),
        computer=cards_of(Rank.NINE),
        deck=cards_of(Rank.TWO, Rank.THREE),
    )
    data = state.to_dict()
    assert data["stage"] == "DRAWING"
    assert data["deck_cards_remaining"] == 2
    assert data["human"] == {
        "name": "human",
        "hand": ["King of hearts", "Ace of spades"],
        "score": 21,
        "holding": False,
    }
    assert data["computer"]["score"] == 9
    assert data["rules"]["target_score"] == 21


def test_adapter_format_shows_winner_only_when_over():
    state = build_round(human=cards_of(Rank.TEN, Rank.NINE), computer=cards_of(Rank.TEN))
    assert state.to_adapter_format()["winner"] is None

    over = dataclasses.replace(
        state, human=state.human.held(), computer=state.computer.held()
    )
    view = over.to_adapter_format()
    assert view["round_over"] is True
    assert view["winner"] == "You"
    assert view["human_score"] == 19
    assert view["computer_hand"] == ["10 of hearts"]


def test_default_round_is_empty():
    state = RoundState()
    assert state.deck == ()
    assert state.human.name == HUMAN
    assert state.computer.name == COMPUTER
