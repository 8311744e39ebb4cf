"""
Widgets coordinator.

Keeps track of every mounted search-contributing binding so their
contributions can be aggregated (search parameters, metadata, state
transitions) and so the session can be told when local state changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class WidgetsManager:
    """Registry of search-contributing widgets."""

    def __init__(self, on_widgets_update: Callable[[], Any] | None = None) -> None:
        self._widgets: list[Any] = []
        self._on_widgets_update = on_widgets_update

    def register_widget(self, widget: Any) -> Callable[[], None]:
        """
        Register a widget.

        Returns:
            Function that unregisters exactly this widget. Calling it more
            than once has no further effect.

        """
        self._widgets.append(widget)
        logger.debug(f"WIDGET REGISTERED: {widget!r} | Total widgets: {len(self._widgets)}")
        self.update()

        unregistered = False

        def unregister() -> None:
            nonlocal unregistered
            if unregistered:
                return
            unregistered = True
            if widget in self._widgets:
                self._widgets.remove(widget)
                logger.debug(f"WIDGET UNREGISTERED: {widget!r}")
            self.update()

        return unregister

    def update(self) -> None:
        """Signal that the aggregate local state must be recomputed."""
        if self._on_widgets_update is not None:
            self._on_widgets_update()

    def get_widgets(self) -> list[Any]:
        return list(self._widgets)

    # =========================================================================
    # Aggregation
    # =========================================================================

    def get_search_parameters(self, initial: Any) -> Any:
        """Fold every widget's contribution over the initial parameters."""
        parameters = initial
        for widget in self._widgets:
            if widget.capabilities.has_search_parameters:
                parameters = widget.get_search_parameters(parameters)
        return parameters

    def get_metadata(self, widgets_state: dict[str, Any]) -> list[Any]:
        return [widget.get_metadata(widgets_state) for widget in self._widgets if widget.capabilities.has_metadata]

    def transition_state(self, prev_state: dict[str, Any], next_state: dict[str, Any]) -> dict[str, Any]:
        """Let each widget adjust the next search state in registration order."""
        state = next_state
        for widget in self._widgets:
            if widget.capabilities.has_transition_state:
                state = widget.transition_state(prev_state, state)
        return state
