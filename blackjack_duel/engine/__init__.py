"""
Engine facade for driving duel rounds.
"""

from blackjack_duel.engine.duel import DuelEngine

__all__ = ["DuelEngine"]
