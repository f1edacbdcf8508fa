"""
Statistical validation of deck fairness.

A fair shuffle puts every card in every position equally often, and so does
dealing from uniformly random positions. These helpers build the card by
position frequency matrix over many trials and test it for uniformity with a
chi-square test.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import numpy as np
import scipy.stats as stats

from blackjack_duel.common.card import Card
from blackjack_duel.common.deck import create_deck, default_deck, draw_card
from blackjack_duel.common.rng import get_rng

_CARD_INDEX: Dict[Card, int] = {card: i for i, card in enumerate(default_deck())}


@dataclass
class ConfidenceInterval:
    """
    Represents a confidence interval with lower and upper bounds.

    Attributes:
        lower: The lower bound of the confidence interval
        upper: The upper bound of the confidence interval
        confidence: The confidence level (e.g., 0.95 for 95% confidence)
    """

    lower: float
    upper: float
    confidence: float

    def contains(self, value: float) -> bool:
        """Check if the interval contains a value."""
        return self.lower <= value <= self.upper

    def to_dict(self) -> Dict[str, float]:
        """Convert to a dictionary."""
        return {"lower": self.lower, "upper": self.upper, "confidence": self.confidence}


@dataclass
class UniformityResult:
    """
    Outcome of a chi-square uniformity test.

    Attributes:
        statistic: The chi-square statistic
        p_value: Probability of a statistic at least this large under uniformity
        degrees_of_freedom: Degrees of freedom used for the p-value
        trials: Number of decks that went into the frequency matrix
    """

    statistic: float
    p_value: float
    degrees_of_freedom: int
    trials: int

    def passes(self, alpha: float = 0.01) -> bool:
        return self.p_value >= alpha

    def to_dict(self) -> Dict[str, float]:
        return {
            "statistic": self.statistic,
            "p_value": self.p_value,
            "degrees_of_freedom": self.degrees_of_freedom,
            "trials": self.trials,
        }


def _record(counts: np.ndarray, cards: Sequence[Card]) -> None:
    for position, card in enumerate(cards):
        counts[_CARD_INDEX[card], position] += 1


def shuffle_position_frequencies(
    trials: int,
    rng: Optional[random.Random] = None,
    shuffle: Callable[[Optional[random.Random]], Sequence[Card]] = create_deck,
) -> np.ndarray:
    """
    Count where each card lands over ``trials`` shuffles.

    Returns:
        A 52x52 integer matrix; row is the card (in unshuffled order),
        column is the position it was found at.
    """
    if trials < 1:
        raise ValueError("trials must be at least 1")
    rng = rng or get_rng()
    size = len(_CARD_INDEX)
    counts = np.zeros((size, size), dtype=np.int64)
    for _ in range(trials):
        _record(counts, shuffle(rng))
    return counts


def draw_order_frequencies(
    trials: int, rng: Optional[random.Random] = None
) -> np.ndarray:
    """
    Count the order cards come out in when an unshuffled deck is dealt empty.

    Only the random-position draw mixes the cards here, so the matrix tests
    the draw on its own.
    """
    if trials < 1:
        raise ValueError("trials must be at least 1")
    rng = rng or get_rng()
    size = len(_CARD_INDEX)
    counts = np.zeros((size, size), dtype=np.int64)
    for _ in range(trials):
        remaining = default_deck()
        order = []
        while remaining:
            card, remaining = draw_card(remaining, rng)
            order.append(card)
        _record(counts, order)
    return counts


def chi_square_uniformity(counts: np.ndarray) -> UniformityResult:
    """
    Test a card by position frequency matrix for uniformity.

    Row and column totals are fixed by construction (every deck has each card
    once and each position once), which removes rows + cols - 2 degrees of
    freedom from the flat test.
    """
    counts = np.asarray(counts)
    if counts.ndim != 2:
        raise ValueError("counts must be a 2-D matrix")
    rows, cols = counts.shape
    trials = int(counts[:, 0].sum())
    ddof = rows + cols - 2
    statistic, p_value = stats.chisquare(counts.ravel(), ddof=ddof)
    return UniformityResult(
        statistic=float(statistic),
        p_value=float(p_value),
        degrees_of_freedom=(rows - 1) * (cols - 1),
        trials=trials,
    )


def proportion_interval(
    successes: int, n: int, confidence: float = 0.95
) -> ConfidenceInterval:
    """
    Normal-approximation confidence interval for a proportion.

    Args:
        successes: Number of times the event happened
        n: Number of observations
        confidence: Confidence level

    Returns:
        Interval clipped to [0, 1]
    """
    if n <= 0:
        raise ValueError("n must be positive")
    if not 0 < confidence < 1:
        raise ValueError("confidence must be between 0 and 1")
    p = successes / n
    z = stats.norm.ppf(1 - (1 - confidence) / 2)
    margin = z * np.sqrt(p * (1 - p) / n)
    return ConfidenceInterval(
        lower=float(max(0.0, p - margin)),
        upper=float(min(1.0, p + margin)),
        confidence=confidence,
    )
