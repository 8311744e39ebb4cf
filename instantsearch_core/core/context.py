"""
Explicit context threaded through every connector binding.

A context bundles the store, the widgets coordinator and the outward
notification hooks of one search session. Bindings receive it at
construction time; nothing is looked up globally.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from instantsearch_core.core.config import SearchConfig
from instantsearch_core.core.store import Store
from instantsearch_core.core.widgets_manager import WidgetsManager

DEFAULT_HREF = "#"


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


def _default_href(*args: Any, **kwargs: Any) -> str:
    return DEFAULT_HREF


@dataclass
class InstantSearchContext:
    """Store, coordinator and notification hooks shared by one session."""

    store: Store = field(default_factory=Store)
    widgets_manager: WidgetsManager = field(default_factory=WidgetsManager)

    # === Outward notification hooks ===
    on_internal_state_update: Callable[..., Any] = _noop
    create_href_for_state: Callable[..., str] = _default_href
    on_search_for_facet_values: Callable[..., Any] = _noop
    on_search_state_change: Callable[..., Any] = _noop
    on_search_parameters: Callable[..., Any] = _noop

    main_targeted_index: str = ""
    config: SearchConfig = field(default_factory=SearchConfig)


@dataclass(frozen=True)
class IndexContext:
    """Marks widgets nested under one index of a multi-index page."""

    targeted_index: str


@dataclass(frozen=True)
class WidgetContext:
    """Session context plus the optional multi-index target of one widget."""

    ais: InstantSearchContext
    multi_index_context: IndexContext | None = None


def create_context(
    store: Store | None = None,
    widgets_manager: WidgetsManager | None = None,
    config: SearchConfig | None = None,
    **hooks: Callable[..., Any],
) -> InstantSearchContext:
    """
    Build a context, filling unspecified collaborators with defaults.

    Args:
        store: Shared store (a fresh empty one if omitted)
        widgets_manager: Coordinator (a fresh one if omitted)
        config: Session configuration; provides the main targeted index
        **hooks: Any of the on_* / create_href_for_state hooks

    """
    config = config or SearchConfig()
    return InstantSearchContext(
        store=store or Store(),
        widgets_manager=widgets_manager or WidgetsManager(),
        main_targeted_index=config.main_targeted_index,
        config=config,
        **hooks,
    )
