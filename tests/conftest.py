#!/usr/bin/env python3
"""
Shared test fixtures for instantsearch core.
Provides a store, a coordinator, a context with mocked hooks and view doubles.
"""

from __future__ import annotations

import os
from typing import Any
from unittest.mock import MagicMock, Mock

import pytest

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from instantsearch_core.core.config import SearchConfig
from instantsearch_core.core.context import InstantSearchContext
from instantsearch_core.core.store import Store
from instantsearch_core.core.widgets_manager import WidgetsManager


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as a GUI test")
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


@pytest.fixture
def store() -> Store:
    """Create a fresh store for testing."""
    return Store()


@pytest.fixture
def widgets_manager() -> WidgetsManager:
    """Create a coordinator with a mocked update callback."""
    return WidgetsManager(on_widgets_update=Mock())


@pytest.fixture
def context(store: Store, widgets_manager: WidgetsManager) -> InstantSearchContext:
    """Create a context whose outward hooks are mocks."""
    return InstantSearchContext(
        store=store,
        widgets_manager=widgets_manager,
        on_internal_state_update=MagicMock(),
        create_href_for_state=MagicMock(return_value="#refined"),
        on_search_for_facet_values=MagicMock(),
        on_search_state_change=MagicMock(),
        on_search_parameters=MagicMock(),
        main_targeted_index="index",
        config=SearchConfig(main_targeted_index="index"),
    )


class RecordingView:
    """View double that records every props mapping it is rendered with."""

    display_name = "ResultsView"

    def __init__(self) -> None:
        self.renders: list[dict[str, Any]] = []

    def __call__(self, props: dict[str, Any]) -> dict[str, Any]:
        self.renders.append(props)
        return props

    @property
    def last_props(self) -> dict[str, Any]:
        return self.renders[-1]


@pytest.fixture
def component() -> RecordingView:
    """Create a fresh recording view."""
    return RecordingView()
