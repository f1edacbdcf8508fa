"""
State transition functions for the Blackjack duel.

This module provides pure functions for moving a round forward: the human's
draw-or-hold request, the computer's decision procedure and the per-frame
tick that applies the automatic hold rules. Each function takes a state and
returns a new one, without modifying the original. A call that changes
nothing returns the very same state object.

Every score update is followed by the target check: once either side reaches
the target score, both sides hold and the round is over.
"""

import logging
import random
import time
from dataclasses import replace
from typing import Optional

from blackjack_duel.common.deck import create_deck, draw_card
from blackjack_duel.common.exceptions import EmptyDeckError, RoundNotOverError
from blackjack_duel.config import DEFAULT_RULES, DuelRules
from blackjack_duel.duel.resolver import Outcome, resolve_winner
from blackjack_duel.duel.scoring import reaches_target
from blackjack_duel.duel.state import COMPUTER, HUMAN, RoundState
from blackjack_duel.events import EventBus, EngineEventType

logger = logging.getLogger("blackjack_duel.transitions")

_DISPLAY_NAMES = {HUMAN: "Player", COMPUTER: "Computer"}


class StateTransitionEngine:
    """
    Pure functions for state transitions in a duel round.

    This class contains static methods that implement the round's rules.
    Methods starting with an underscore do not announce the end of the round;
    the public entry points do that once per call.
    """

    @staticmethod
    def new_round(
        rules: Optional[DuelRules] = None,
        rng: Optional[random.Random] = None,
        round_number: int = 1,
    ) -> RoundState:
        """
        Create a fresh round with a newly shuffled deck and empty hands.

        Args:
            rules: Thresholds for the round; the classic table when omitted
            rng: Random source for the shuffle; the shared generator when omitted
            round_number: Sequence number reported in events

        Returns:
            New round state
        """
        state = RoundState(
            deck=create_deck(rng),
            rules=rules or DEFAULT_RULES,
            round_number=round_number,
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.SHUFFLE,
            {
                "round_id": state.id,
                "deck_cards_remaining": state.deck_cards_remaining,
                "timestamp": state.timestamp,
            },
        )
        event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {
                "round_id": state.id,
                "round_number": state.round_number,
                "timestamp": state.timestamp,
            },
        )
        logger.debug("Round %d started", state.round_number)
        return state

    @staticmethod
    def human_act(
        state: RoundState, wants_to_draw: bool, rng: Optional[random.Random] = None
    ) -> RoundState:
        """
        Apply the human's draw-or-hold request, then let the computer decide.

        A human who already holds cannot draw; the request still gives the
        computer its turn. With ``first_action_draws`` set, a human who has no
        cards yet always draws.

        Args:
            state: Current round state
            wants_to_draw: True to draw a card, False to hold
            rng: Random source for the draws

        Returns:
            New round state
        """
        before = state
        human = state.human

        if human.is_drawing:
            if wants_to_draw or (state.rules.first_action_draws and not human.hand):
                state = StateTransitionEngine._draw(state, HUMAN, rng)
            else:
                state = StateTransitionEngine._hold(state, HUMAN)

        # The human's update, including the target check, is complete here
        state = StateTransitionEngine._computer_decide(state, rng)

        StateTransitionEngine._announce_round_end(before, state)
        return state

    @staticmethod
    def computer_decide(
        state: RoundState, rng: Optional[random.Random] = None
    ) -> RoundState:
        """
        Run the computer's decision procedure once.

        Args:
            state: Current round state
            rng: Random source for the draw

        Returns:
            New round state
        """
        new_state = StateTransitionEngine._computer_decide(state, rng)
        StateTransitionEngine._announce_round_end(state, new_state)
        return new_state

    @staticmethod
    def tick(state: RoundState, rng: Optional[random.Random] = None) -> RoundState:
        """
        Re-evaluate the automatic rules, once per presentation frame.

        In order: the target check; the computer holds when it is above its
        stand threshold and ahead of the human; and while the human holds with
        a higher score, the computer gets one more decision.

        Args:
            state: Current round state
            rng: Random source for a draw, if one happens

        Returns:
            New round state, or ``state`` itself when nothing changed
        """
        before = state
        rules = state.rules

        state = StateTransitionEngine._enforce_target_hold(state)

        computer = state.computer
        if (
            computer.is_drawing
            and computer.score > rules.computer_stand_above
            and computer.score > state.human.score
        ):
            state = StateTransitionEngine._hold(state, COMPUTER)

        if (
            state.human.holding
            and state.computer.is_drawing
            and state.computer.score < state.human.score
        ):
            state = StateTransitionEngine._computer_decide(state, rng)

        StateTransitionEngine._announce_round_end(before, state)
        return state

    @staticmethod
    def settle(state: RoundState, rng: Optional[random.Random] = None) -> RoundState:
        """
        Tick until the state stops changing.

        The loop ends because every productive tick either deals a card or
        moves a participant to holding.
        """
        while True:
            new_state = StateTransitionEngine.tick(state, rng)
            if new_state is state:
                return state
            state = new_state

    @staticmethod
    def is_round_over(state: RoundState) -> bool:
        return state.is_round_over

    @staticmethod
    def winner(state: RoundState) -> Outcome:
        """
        Resolve the outcome of a finished round.

        Raises:
            RoundNotOverError: If either participant is still drawing
        """
        if not state.is_round_over:
            raise RoundNotOverError(
                f"Round {state.id} is not over: both participants must hold"
            )
        return resolve_winner(state.human.score, state.computer.score, state.rules)

    @staticmethod
    def _computer_decide(
        state: RoundState, rng: Optional[random.Random] = None
    ) -> RoundState:
        rules = state.rules
        human, computer = state.human, state.computer

        if human.holding and computer.is_drawing:
            if computer.score > human.score or (
                computer.score > rules.computer_stand_above
                and human.score <= rules.target_score
            ):
                return StateTransitionEngine._hold(state, COMPUTER)

        if state.computer.is_drawing:
            state = StateTransitionEngine._draw(state, COMPUTER, rng)

            human, computer = state.human, state.computer
            if (
                human.holding
                and computer.is_drawing
                and (
                    computer.score > human.score
                    or computer.score > rules.computer_stand_above
                )
            ):
                state = StateTransitionEngine._hold(state, COMPUTER)

        return state

    @staticmethod
    def _draw(
        state: RoundState, name: str, rng: Optional[random.Random] = None
    ) -> RoundState:
        """
        Deal one card to a participant and apply the target check.

        A participant who cannot be dealt a card because the deck is empty is
        moved to holding instead.
        """
        participant = state.participant(name)
        if participant.holding:
            return state

        try:
            card, remaining = draw_card(state.deck, rng)
        except EmptyDeckError:
            logger.warning("The deck is empty, %s stops drawing", _DISPLAY_NAMES[name])
            EventBus.get_instance().emit(
                EngineEventType.DECK_EMPTY,
                {"round_id": state.id, "participant": name, "timestamp": time.time()},
            )
            return StateTransitionEngine._hold(state, name)

        updated = participant.with_card(card, state.rules)
        state = replace(state.with_participant(updated), deck=remaining)

        logger.debug(
            "%s drew a card: %s (%d)", _DISPLAY_NAMES[name], card, updated.score
        )
        EventBus.get_instance().emit(
            EngineEventType.CARD_DEALT,
            {
                "round_id": state.id,
                "participant": name,
                "card": str(card),
                "score": updated.score,
                "deck_cards_remaining": state.deck_cards_remaining,
                "timestamp": time.time(),
            },
        )

        return StateTransitionEngine._enforce_target_hold(state)

    @staticmethod
    def _hold(state: RoundState, name: str) -> RoundState:
        participant = state.participant(name)
        if participant.holding:
            return state

        state = state.with_participant(participant.held())
        EventBus.get_instance().emit(
            EngineEventType.PLAYER_HOLD,
            {
                "round_id": state.id,
                "participant": name,
                "score": participant.score,
                "timestamp": time.time(),
            },
        )
        return state

    @staticmethod
    def _enforce_target_hold(state: RoundState) -> RoundState:
        """Hold both participants once either has reached the target score."""
        if state.is_round_over:
            return state
        if not (
            reaches_target(state.human.score, state.rules)
            or reaches_target(state.computer.score, state.rules)
        ):
            return state

        forced = [p.name for p in (state.human, state.computer) if p.is_drawing]
        state = replace(
            state, human=state.human.held(), computer=state.computer.held()
        )

        logger.debug(
            "Target reached (%d vs %d), forcing hold for %s",
            state.human.score,
            state.computer.score,
            ", ".join(forced),
        )
        EventBus.get_instance().emit(
            EngineEventType.FORCED_HOLD,
            {
                "round_id": state.id,
                "participants": forced,
                "human_score": state.human.score,
                "computer_score": state.computer.score,
                "timestamp": time.time(),
            },
        )
        return state

    @staticmethod
    def _announce_round_end(before: RoundState, after: RoundState) -> None:
        if before.is_round_over or not after.is_round_over:
            return

        outcome = resolve_winner(after.human.score, after.computer.score, after.rules)
        logger.debug(
            "Round %d over: %s (you %d, computer %d)",
            after.round_number,
            outcome,
            after.human.score,
            after.computer.score,
        )
        EventBus.get_instance().emit(
            EngineEventType.ROUND_ENDED,
            {
                "round_id": after.id,
                "round_number": after.round_number,
                "winner": outcome.value,
                "human_score": after.human.score,
                "computer_score": after.computer.score,
                "timestamp": time.time(),
            },
        )


new_round = StateTransitionEngine.new_round
human_act = StateTransitionEngine.human_act
computer_decide = StateTransitionEngine.computer_decide
tick = StateTransitionEngine.tick
settle = StateTransitionEngine.settle
is_round_over = StateTransitionEngine.is_round_over
winner = StateTransitionEngine.winner
