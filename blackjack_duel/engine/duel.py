"""
Duel engine implementation.

This module provides the DuelEngine class, the stateful facade a round driver
talks to. The engine keeps the current round and the random source; the
rules themselves live in `blackjack_duel.duel.transitions`.
"""

import logging
import random
from typing import Any, Dict, Optional, Tuple

from blackjack_duel.common.card import Card
from blackjack_duel.common.rng import get_rng
from blackjack_duel.config import DuelRules
from blackjack_duel.duel.resolver import Outcome
from blackjack_duel.duel.state import RoundState
from blackjack_duel.duel.transitions import StateTransitionEngine

logger = logging.getLogger("blackjack_duel.engine")


class DuelEngine:
    """
    Engine for a human against the computer.

    The driver feeds it input with `handle_input` (one call per click) and
    calls `tick` once per frame; rendering reads `state` or the accessors.
    """

    def __init__(
        self,
        rules: Optional[DuelRules] = None,
        rng: Optional[random.Random] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the duel engine and deal a fresh round.

        Args:
            rules: Thresholds for every round this engine plays
            rng: Random source; the shared process generator when omitted
            config: Options for the driver: ``reset_min_score`` is the score
                the human must have passed before a click on a finished round
                starts the next one (default 1)
        """
        self.rules = rules or DuelRules()
        self.rng = rng or get_rng()
        self.config = config or {}
        self.reset_min_score = self.config.get("reset_min_score", 1)
        self.rounds_played = 0
        self.state: RoundState = self.new_round()

    def new_round(self) -> RoundState:
        """Discard the current round and deal a new one."""
        self.rounds_played += 1
        self.state = StateTransitionEngine.new_round(
            self.rules, self.rng, round_number=self.rounds_played
        )
        return self.state

    def handle_input(self, wants_to_draw: bool) -> RoundState:
        """
        Process one click from the player.

        A click on a finished round starts the next round first; the click is
        then applied to that new round like any other.
        """
        state = self.state
        if state.is_round_over and state.human.score > self.reset_min_score:
            logger.info("Game reset")
            self.new_round()
        return self.human_act(wants_to_draw)

    def human_act(self, wants_to_draw: bool) -> RoundState:
        self.state = StateTransitionEngine.human_act(
            self.state, wants_to_draw, self.rng
        )
        return self.state

    def tick(self) -> RoundState:
        self.state = StateTransitionEngine.tick(self.state, self.rng)
        return self.state

    def settle(self) -> RoundState:
        self.state = StateTransitionEngine.settle(self.state, self.rng)
        return self.state

    @property
    def is_round_over(self) -> bool:
        return self.state.is_round_over

    def winner(self) -> Outcome:
        """
        Outcome of the current round.

        Raises:
            RoundNotOverError: If the round is still in play
        """
        return StateTransitionEngine.winner(self.state)

    @property
    def human_hand(self) -> Tuple[Card, ...]:
        return self.state.human.hand

    @property
    def human_score(self) -> int:
        return self.state.human.score

    @property
    def computer_hand(self) -> Tuple[Card, ...]:
        return self.state.computer.hand

    @property
    def computer_score(self) -> int:
        return self.state.computer.score

    def render_state(self) -> Dict[str, Any]:
        """What a renderer needs for the current frame."""
        return self.state.to_adapter_format()
