"""
Tests for batch simulation of duel rounds.
"""

import random

import pandas as pd
import pytest

from blackjack_duel.common.deck import default_deck
from blackjack_duel.config import DuelRules
from blackjack_duel.duel import HUMAN, Outcome, ParticipantState, RoundState, winner
from blackjack_duel.events import EventBus, EngineEventType
from blackjack_duel.verification.simulation import (
    RESULT_COLUMNS,
    play_round,
    simulate_rounds,
    summarize_outcomes,
    threshold_policy,
)


@pytest.fixture
def rng():
    return random.Random(7)


def test_threshold_policy():
    policy = threshold_policy(15)
    state = RoundState(human=ParticipantState(HUMAN, score=14))
    assert policy(state)
    state = RoundState(human=ParticipantState(HUMAN, score=15))
    assert not policy(state)


class TestPlayRound:
    def test_round_finishes_and_conserves_cards(self, rng):
        for number in range(20):
            state = play_round(threshold_policy(17), rng=rng, round_number=number)
            assert state.is_round_over
            assert state.round_number == number
            cards = state.deck + state.human.hand + state.computer.hand
            assert sorted(map(str, cards)) == sorted(map(str, default_deck()))
            assert winner(state) in Outcome

    def test_never_drawing_human_takes_one_card(self, rng):
        state = play_round(lambda state: False, rng=rng)
        assert len(state.human.hand) == 1

    def test_rules_are_applied(self, rng):
        rules = DuelRules(target_score=31)
        state = play_round(threshold_policy(28), rules=rules, rng=rng)
        assert state.rules is rules


class TestSimulateRounds:
    def test_result_frame(self, rng):
        results = simulate_rounds(50, rng=rng)
        assert isinstance(results, pd.DataFrame)
        assert list(results.columns) == RESULT_COLUMNS
        assert len(results) == 50
        assert list(results["round"]) == list(range(1, 51))
        assert set(results["outcome"]) <= {o.value for o in Outcome}
        assert (results["human_cards"] >= 1).all()

    def test_same_seed_same_results(self):
        first = simulate_rounds(25, rng=random.Random(11))
        second = simulate_rounds(25, rng=random.Random(11))
        pd.testing.assert_frame_equal(first, second)

    def test_requires_a_round(self, rng):
        with pytest.raises(ValueError):
            simulate_rounds(0, rng=rng)

    def test_emits_progress_and_result(self, rng):
        progress = []
        result = []
        bus = EventBus.get_instance()
        bus.on(EngineEventType.SIMULATION_PROGRESS, progress.append)
        bus.on(EngineEventType.SIMULATION_RESULT, result.append)

        simulate_rounds(10, stand_on=15, rng=rng, progress_every=5)

        assert [p["rounds_played"] for p in progress] == [5, 10]
        assert result[0]["rounds"] == 10
        assert result[0]["stand_on"] == 15
        assert sum(result[0]["outcomes"].values()) == 10


class TestSummarizeOutcomes:
    def test_every_outcome_is_listed(self):
        results = pd.DataFrame(
            {"outcome": ["You", "You", "Computer", "Tie"]}, columns=["outcome"]
        )
        summary = summarize_outcomes(results)

        assert list(summary.index) == ["Bust", "You", "Tie", "Computer"]
        assert summary.loc["Bust", "count"] == 0
        assert summary.loc["You", "count"] == 2
        assert summary.loc["You", "rate"] == pytest.approx(0.5)
        assert summary["rate"].sum() == pytest.approx(1.0)
        assert (summary["ci_lower"] <= summary["rate"]).all()
        assert (summary["ci_upper"] >= summary["rate"]).all()

    def test_summary_of_simulation(self, rng):
        summary = summarize_outcomes(simulate_rounds(40, rng=rng))
        assert summary["count"].sum() == 40

    def test_empty_results(self):
        with pytest.raises(ValueError):
            summarize_outcomes(pd.DataFrame(columns=RESULT_COLUMNS))
