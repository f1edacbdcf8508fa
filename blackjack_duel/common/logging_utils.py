"""Logging setup for scripts that drive the engine."""

import logging
from typing import Optional

from blackjack_duel.config import DuelSettings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Call once at program start.

    :param level: Logging level name; ``BLACKJACK_DUEL_LOG_LEVEL`` when omitted.
    """
    level = (level or DuelSettings.from_env().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
