"""
Process-wide random source.

The generator is created (and seeded) once per process. Shuffles and draws
take it as a default so that a whole run can be replayed from one seed.
"""

import logging
import random
import threading
from typing import Optional

from blackjack_duel.config import DuelSettings

logger = logging.getLogger("blackjack_duel.rng")

_rng: Optional[random.Random] = None
_lock = threading.Lock()


def get_rng() -> random.Random:
    """
    Return the shared random generator, creating it on first use.

    The first call seeds it from ``BLACKJACK_DUEL_SEED`` when that is set,
    otherwise from system entropy.
    """
    global _rng
    if _rng is None:
        with _lock:
            if _rng is None:
                _rng = random.Random(DuelSettings.from_env().seed)
    return _rng


def seed_rng(seed: Optional[int]) -> random.Random:
    """Replace the shared generator with one seeded from ``seed``."""
    global _rng
    with _lock:
        _rng = random.Random(seed)
    logger.debug("Random source seeded with %r", seed)
    return _rng
