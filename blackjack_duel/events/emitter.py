"""
Event system for the Blackjack duel engine.

State transitions publish what happened (cards dealt, holds, round results)
on a process-wide bus so a presentation layer can follow a round without
inspecting every state it receives.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Optional, Union
import logging
import threading
from enum import Enum

# Create a logger for the event system
logger = logging.getLogger("blackjack_duel.events")


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class EventEmitter:
    """
    Event emitter with priority-ordered subscriptions.

    Features:
    - Supports event subscription with priorities
    - Allows once-only subscriptions
    - Supports subscribing to all events with event type filtering in handler
    - Handler errors are logged and never reach the emitter's caller
    """

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners = defaultdict(list)
        self._global_listeners = []
        self._listener_lock = threading.RLock()

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)
            priority: Priority level for this handler

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        handler = {"callback": callback, "priority": priority.value}

        with self._listener_lock:
            handlers = self._listeners[event_type]

            # Higher priorities run first
            for i, existing in enumerate(handlers):
                if existing["priority"] < priority.value:
                    handlers.insert(i, handler)
                    break
            else:
                handlers.append(handler)

        def unsubscribe():
            with self._listener_lock:
                handlers = self._listeners[event_type]
                for i, existing in enumerate(handlers):
                    if existing["callback"] == callback:
                        handlers.pop(i)
                        break

        return unsubscribe

    def once(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type for a single occurrence.

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        unsubscribe_ref = []

        def one_time_handler(event_data):
            try:
                callback(event_data)
            finally:
                if unsubscribe_ref and callable(unsubscribe_ref[0]):
                    unsubscribe_ref[0]()

        unsubscribe_ref.append(self.on(event_type, one_time_handler, priority))
        return unsubscribe_ref[0]

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, signature: fn((event_type, event_data))
            priority: Priority level for this handler

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        handler = {"callback": callback, "priority": priority.value}

        with self._listener_lock:
            for i, existing in enumerate(self._global_listeners):
                if existing["priority"] < priority.value:
                    self._global_listeners.insert(i, handler)
                    break
            else:
                self._global_listeners.append(handler)

        def unsubscribe():
            with self._listener_lock:
                for i, existing in enumerate(self._global_listeners):
                    if existing["callback"] == callback:
                        self._global_listeners.pop(i)
                        break

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        handlers_to_call = []

        with self._listener_lock:
            for handler in self._listeners.get(event_type, []):
                handlers_to_call.append((handler["callback"], data))

            for handler in self._global_listeners:
                handlers_to_call.append((handler["callback"], (event_type, data)))

        # Call handlers outside of the lock to avoid deadlocks
        for callback, args in handlers_to_call:
            try:
                callback(args)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type}: {e}", exc_info=True
                )

    def listener_count(self, event_type: Optional[Union[str, Enum]] = None) -> int:
        """Number of listeners for ``event_type``, or for everything when omitted."""
        with self._listener_lock:
            if event_type is None:
                return sum(len(h) for h in self._listeners.values()) + len(
                    self._global_listeners
                )
            if isinstance(event_type, Enum):
                event_type = event_type.name
            return len(self._listeners.get(event_type, []))

    def remove_all_listeners(
        self, event_type: Optional[Union[str, Enum]] = None
    ) -> None:
        """
        Remove all listeners for a specific event type or all events.

        Args:
            event_type: Optional event type. If None, removes all listeners for all events.
        """
        with self._listener_lock:
            if event_type is None:
                self._listeners.clear()
                self._global_listeners.clear()
            else:
                if isinstance(event_type, Enum):
                    event_type = event_type.name
                self._listeners[event_type].clear()


class EventBus:
    """
    Global event bus for the application.

    This singleton class provides a centralized event bus that can be accessed
    from anywhere in the application.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """
        Get the singleton instance of the EventBus.

        Returns:
            EventEmitter instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """
    Event types published by the duel engine.
    """

    # Round lifecycle
    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"
    SHUFFLE = "shuffle"

    # Participant events
    CARD_DEALT = "card_dealt"
    PLAYER_HOLD = "player_hold"
    FORCED_HOLD = "forced_hold"

    # Errors
    DECK_EMPTY = "deck_empty"

    # Simulation events
    SIMULATION_PROGRESS = "simulation_progress"
    SIMULATION_RESULT = "simulation_result"
