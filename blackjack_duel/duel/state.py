"""
Immutable state models for the Blackjack duel.

This module provides dataclasses for representing one round between a human
and the computer. Transition functions in `transitions` create new instances
rather than modifying existing ones, so a presentation layer can hold on to
any state it was given without it changing underneath it.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple
from enum import Enum, auto
import uuid
import time

from blackjack_duel.common.card import Card
from blackjack_duel.config import DEFAULT_RULES, DuelRules
from blackjack_duel.duel.resolver import resolve_winner
from blackjack_duel.duel.scoring import add_card

HUMAN = "human"
COMPUTER = "computer"


class GameStage(Enum):
    """Possible stages of a duel round."""

    DRAWING = auto()
    ROUND_OVER = auto()


@dataclass(frozen=True)
class ParticipantState:
    """
    Immutable representation of one side of the table.

    Attributes:
        name: Display name, "human" or "computer"
        hand: Cards in the order they were drawn
        score: Running score, updated card by card
        holding: Whether the participant has stopped drawing for the round
    """

    name: str
    hand: Tuple[Card, ...] = ()
    score: int = 0
    holding: bool = False

    @property
    def is_drawing(self) -> bool:
        return not self.holding

    def with_card(
        self, card: Card, rules: Optional[DuelRules] = None
    ) -> "ParticipantState":
        """Return a copy with ``card`` appended and the score updated."""
        return replace(
            self, hand=self.hand + (card,), score=add_card(self.score, card, rules)
        )

    def held(self) -> "ParticipantState":
        if self.holding:
            return self
        return replace(self, holding=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "hand": [str(card) for card in self.hand],
            "score": self.score,
            "holding": self.holding,
        }


@dataclass(frozen=True)
class RoundState:
    """
    Immutable representation of a single round.

    Attributes:
        id: Unique identifier for this round
        deck: Cards not yet dealt
        human: The human participant
        computer: The automated participant
        rules: Thresholds used for scoring and the computer's decisions
        round_number: Count of rounds started by the driving engine
        timestamp: Time when this state was created
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    deck: Tuple[Card, ...] = ()
    human: ParticipantState = field(default_factory=lambda: ParticipantState(HUMAN))
    computer: ParticipantState = field(
        default_factory=lambda: ParticipantState(COMPUTER)
    )
    rules: DuelRules = DEFAULT_RULES
    round_number: int = 1
    timestamp: float = field(default_factory=lambda: time.time())

    @property
    def is_round_over(self) -> bool:
        return self.human.holding and self.computer.holding

    @property
    def stage(self) -> GameStage:
        return GameStage.ROUND_OVER if self.is_round_over else GameStage.DRAWING

    @property
    def deck_cards_remaining(self) -> int:
        return len(self.deck)

    def participant(self, name: str) -> ParticipantState:
        if name == HUMAN:
            return self.human
        if name == COMPUTER:
            return self.computer
        raise ValueError(f"Unknown participant: {name!r}")

    def with_participant(self, participant: ParticipantState) -> "RoundState":
        if participant.name == HUMAN:
            return replace(self, human=participant)
        if participant.name == COMPUTER:
            return replace(self, computer=participant)
        raise ValueError(f"Unknown participant: {participant.name!r}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the round state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the round state
        """
        return {
            "id": self.id,
            "stage": self.stage.name,
            "round_number": self.round_number,
            "deck_cards_remaining": self.deck_cards_remaining,
            "rules": self.rules.to_dict(),
            "timestamp": self.timestamp,
            "human": self.human.to_dict(),
            "computer": self.computer.to_dict(),
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the round state to what a renderer needs to draw the table.

        Returns:
            Dictionary in adapter-friendly format
        """
        winner = None
        if self.is_round_over:
            winner = resolve_winner(
                self.human.score, self.computer.score, self.rules
            ).value
        return {
            "human_hand": [str(card) for card in self.human.hand],
            "computer_hand": [str(card) for card in self.computer.hand],
            "human_score": self.human.score,
            "computer_score": self.computer.score,
            "round_over": self.is_round_over,
            "winner": winner,
        }
