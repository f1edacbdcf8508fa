"""
Verification tools for the duel engine.

Statistical checks on shuffling and dealing, and a batch simulator for
outcome rates.
"""

from blackjack_duel.verification.statistics import (
    ConfidenceInterval,
    UniformityResult,
    chi_square_uniformity,
    draw_order_frequencies,
    proportion_interval,
    shuffle_position_frequencies,
)
from blackjack_duel.verification.simulation import (
    play_round,
    simulate_rounds,
    summarize_outcomes,
    threshold_policy,
)

__all__ = [
    "ConfidenceInterval",
    "UniformityResult",
    "chi_square_uniformity",
    "draw_order_frequencies",
    "play_round",
    "proportion_interval",
    "shuffle_position_frequencies",
    "simulate_rounds",
    "summarize_outcomes",
    "threshold_policy",
]
