"""
Search-state store shared by every widget binding.

The store holds one immutable State record and notifies listeners
synchronously whenever the record is replaced:
    set_state -> replace snapshot -> notify listeners (registration order)

Usage:
    store = Store()

    # Bindings subscribe and read the new snapshot themselves
    unsubscribe = store.subscribe(on_change)

    # Writers replace the whole record
    store.set_state(store.get_state().replace(searching=True))

    def on_change() -> None:
        state = store.get_state()
        ...

Listeners receive no arguments. There is no batching: a listener that
writes back triggers a nested notification round before set_state returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

logger = logging.getLogger(__name__)


# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class State:
    """
    Immutable snapshot of one search session.

    State is organized into:
    - Search UI state: `widgets`, keyed by each widget's refinement id
    - Metadata: per-widget descriptors for current-refinement displays
    - Results: last response (single result, or index name -> result)
    - Status flags: opaque to the bindings, forwarded to views
    """

    # === Search UI State ===
    widgets: dict[str, Any] = field(default_factory=dict)
    metadata: tuple[Any, ...] = ()

    # === Results ===
    results: Any = None
    results_facet_values: Any = None

    # === Status ===
    error: Any = None
    searching: bool = False
    is_search_stalled: bool = False
    searching_for_facet_values: bool = False

    def replace(self, **changes: Any) -> State:
        """Return a new snapshot with the given fields swapped in."""
        return replace(self, **changes)


# =============================================================================
# Store
# =============================================================================


Listener = Callable[[], Any]
UnsubscribeFunction = Callable[[], None]


class Store:
    """
    Central store that holds state and manages subscriptions.

    The store:
    - Holds the single source of truth for search state
    - Replaces the snapshot wholesale on every write
    - Notifies subscribers synchronously, in registration order
    """

    def __init__(self, initial_state: State | None = None) -> None:
        self._state = initial_state or State()
        self._listeners: list[Listener] = []

        logger.debug("Store initialized with state: %s", self._state)

    @property
    def state(self) -> State:
        """Get current state (read-only)."""
        return self._state

    def get_state(self) -> State:
        """Return the current snapshot. Callers must not mutate it."""
        return self._state

    def set_state(self, next_state: State) -> None:
        """Replace the snapshot, then notify every listener."""
        self._state = next_state
        logger.debug("STATE REPLACED | Notifying %d listeners", len(self._listeners))
        self._notify_listeners()

    def subscribe(self, listener: Listener) -> UnsubscribeFunction:
        """Subscribe to state changes."""
        self._listeners.append(listener)
        name = getattr(listener, "__qualname__", str(listener))
        logger.debug(f"LISTENER ADDED: {name} | Total listeners: {len(self._listeners)}")

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
                logger.debug(f"LISTENER REMOVED: {name}")

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify_listeners(self) -> None:
        """Notify all listeners of a state change."""
        for listener in self._listeners[:]:  # Copy list to allow unsubscribe during iteration
            try:
                listener()
            except Exception as e:
                logger.exception("Error in store listener: %s", e)


def create_store(initial_state: State | None = None) -> Store:
    """Create a store seeded with `initial_state` (or an empty session)."""
    return Store(initial_state)
