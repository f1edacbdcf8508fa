"""
Configuration for the Blackjack duel engine.

`DuelRules` carries the thresholds the scoring engine and the automated
opponent work with. The defaults reproduce the classic table: 21 to win, Aces
worth 11 or 1, and a computer that stops above 17.

`DuelSettings` reads process-level settings from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

SEED_ENV = "BLACKJACK_DUEL_SEED"
LOG_LEVEL_ENV = "BLACKJACK_DUEL_LOG_LEVEL"


class DuelRules:
    def __init__(
        self,
        target_score: int = 21,
        ace_high_value: int = 11,
        ace_low_value: int = 1,
        computer_stand_above: int = 17,
        first_action_draws: bool = True,
    ):
        if target_score <= 0:
            raise ValueError("target_score must be positive")
        if not 0 < ace_low_value < ace_high_value:
            raise ValueError("ace_low_value must be positive and below ace_high_value")

        self.target_score = target_score
        self.ace_high_value = ace_high_value
        self.ace_low_value = ace_low_value
        self.computer_stand_above = computer_stand_above
        self.first_action_draws = first_action_draws

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "target_score": self.target_score,
            "ace_high_value": self.ace_high_value,
            "ace_low_value": self.ace_low_value,
            "computer_stand_above": self.computer_stand_above,
            "first_action_draws": self.first_action_draws,
        }

    def __eq__(self, other):
        if isinstance(other, DuelRules):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self.to_dict().items()))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"DuelRules({args})"


DEFAULT_RULES = DuelRules()


@dataclass(frozen=True)
class DuelSettings:
    """
    Process settings.

    Attributes:
        seed: Seed for the shared random source, or None for system entropy
        log_level: Name of the logging level used by ``setup_logging``
    """

    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DuelSettings":
        raw_seed = os.getenv(SEED_ENV)
        seed = None
        if raw_seed not in (None, ""):
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(
                    f"{SEED_ENV} must be an integer, got {raw_seed!r}"
                ) from None
        return cls(seed=seed, log_level=os.getenv(LOG_LEVEL_ENV, "INFO").upper())
