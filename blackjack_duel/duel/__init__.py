"""
Blackjack duel module.

This module provides the rules for a round between a human and the computer:
state models, scoring, winner resolution and state transitions.
"""

from blackjack_duel.duel.resolver import Outcome as Outcome, resolve_winner
from blackjack_duel.duel.scoring import (
    add_card,
    incremental_card_value,
    is_bust,
    score_hand,
)
from blackjack_duel.duel.state import (
    COMPUTER,
    HUMAN,
    GameStage as GameStage,
    ParticipantState as ParticipantState,
    RoundState as RoundState,
)
from blackjack_duel.duel.transitions import (
    StateTransitionEngine as StateTransitionEngine,
    computer_decide,
    human_act,
    is_round_over,
    new_round,
    settle,
    tick,
    winner,
)

__all__ = [
    "COMPUTER",
    "HUMAN",
    "GameStage",
    "Outcome",
    "ParticipantState",
    "RoundState",
    "StateTransitionEngine",
    "add_card",
    "computer_decide",
    "human_act",
    "incremental_card_value",
    "is_bust",
    "is_round_over",
    "new_round",
    "resolve_winner",
    "score_hand",
    "settle",
    "tick",
    "winner",
]
