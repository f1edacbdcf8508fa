"""
Pytest fixtures for duel tests.
"""

import random

import pytest
from unittest.mock import MagicMock

from blackjack_duel.events import EventBus, EngineEventType


@pytest.fixture
def rng():
    return random.Random(2024)


@pytest.fixture
def events():
    """Record every event emitted during the test as (type, data) pairs."""
    recorder = MagicMock()
    EventBus.get_instance().on_any(recorder)

    def of_type(event_type: EngineEventType):
        pairs = [c.args[0] for c in recorder.call_args_list]
        return [data for name, data in pairs if name == event_type.name]

    recorder.of_type = of_type
    return recorder
