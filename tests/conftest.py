"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures and configuration for testing components.
"""

import pytest
from blackjack_duel.common.rng import seed_rng
from blackjack_duel.events import EventBus


# Reset event bus and random source before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton and reseed the shared generator."""
    EventBus._instance = None
    seed_rng(1234)
    yield
    EventBus._instance = None
