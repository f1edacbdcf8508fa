"""
Batch simulation of duel rounds.

The human side is played by a threshold policy (draw while below a score),
clicking through the round exactly as a player would: one `human_act` per
click and the automatic rules settled between clicks. Results come back as a
pandas DataFrame with one row per round.
"""

import logging
import random
import time
from typing import Callable, Optional

import pandas as pd

from blackjack_duel.common.rng import get_rng
from blackjack_duel.config import DuelRules
from blackjack_duel.duel.resolver import Outcome
from blackjack_duel.duel.state import RoundState
from blackjack_duel.duel.transitions import StateTransitionEngine
from blackjack_duel.events import EventBus, EngineEventType
from blackjack_duel.verification.statistics import proportion_interval

logger = logging.getLogger("blackjack_duel.simulation")

Policy = Callable[[RoundState], bool]

RESULT_COLUMNS = [
    "round",
    "human_score",
    "computer_score",
    "human_cards",
    "computer_cards",
    "outcome",
]


def threshold_policy(stand_on: int) -> Policy:
    """Policy that asks for a card while the human's score is below ``stand_on``."""

    def policy(state: RoundState) -> bool:
        return state.human.score < stand_on

    return policy


def play_round(
    policy: Policy,
    rules: Optional[DuelRules] = None,
    rng: Optional[random.Random] = None,
    round_number: int = 1,
) -> RoundState:
    """
    Play one round to completion.

    Once the human holds, further clicks only give the computer its turn,
    which is how a tied, low-scoring computer gets to draw again.
    """
    rng = rng or get_rng()
    state = StateTransitionEngine.new_round(rules, rng, round_number=round_number)
    while not state.is_round_over:
        wants_to_draw = state.human.is_drawing and policy(state)
        state = StateTransitionEngine.human_act(state, wants_to_draw, rng)
        state = StateTransitionEngine.settle(state, rng)
    return state


def simulate_rounds(
    num_rounds: int,
    stand_on: int = 17,
    rules: Optional[DuelRules] = None,
    rng: Optional[random.Random] = None,
    progress_every: int = 0,
) -> pd.DataFrame:
    """
    Play ``num_rounds`` rounds with a threshold policy for the human.

    Args:
        num_rounds: Number of rounds to play
        stand_on: The human holds at or above this score
        rules: Thresholds for every round
        rng: Random source; the shared process generator when omitted
        progress_every: Emit a progress event every this many rounds (0 for never)

    Returns:
        DataFrame with the columns in ``RESULT_COLUMNS``
    """
    if num_rounds < 1:
        raise ValueError("num_rounds must be at least 1")

    rng = rng or get_rng()
    policy = threshold_policy(stand_on)
    event_bus = EventBus.get_instance()
    started = time.time()

    rows = []
    for number in range(1, num_rounds + 1):
        state = play_round(policy, rules, rng, round_number=number)
        rows.append(
            {
                "round": number,
                "human_score": state.human.score,
                "computer_score": state.computer.score,
                "human_cards": len(state.human.hand),
                "computer_cards": len(state.computer.hand),
                "outcome": StateTransitionEngine.winner(state).value,
            }
        )
        if progress_every and number % progress_every == 0:
            event_bus.emit(
                EngineEventType.SIMULATION_PROGRESS,
                {"rounds_played": number, "rounds_total": num_rounds},
            )

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    elapsed = time.time() - started
    logger.info("Simulated %d rounds in %.2fs", num_rounds, elapsed)
    event_bus.emit(
        EngineEventType.SIMULATION_RESULT,
        {
            "rounds": num_rounds,
            "stand_on": stand_on,
            "elapsed": elapsed,
            "outcomes": results["outcome"].value_counts().to_dict(),
        },
    )
    return results


def summarize_outcomes(results: pd.DataFrame, confidence: float = 0.95) -> pd.DataFrame:
    """
    Count each outcome with its rate and a confidence interval on the rate.

    Every outcome appears in the summary, with a zero count if it never
    happened.
    """
    total = len(results)
    if total == 0:
        raise ValueError("results is empty")

    labels = [outcome.value for outcome in Outcome]
    counts = results["outcome"].value_counts().reindex(labels, fill_value=0)

    rows = []
    for label, count in counts.items():
        interval = proportion_interval(int(count), total, confidence)
        rows.append(
            {
                "outcome": label,
                "count": int(count),
                "rate": count / total,
                "ci_lower": interval.lower,
                "ci_upper": interval.upper,
            }
        )
    return pd.DataFrame(rows).set_index("outcome")
