"""
Core building blocks: store, context, connector binding and helpers.

    from instantsearch_core.core import Store, create_connector, create_context
"""

from .config import SearchConfig
from .connector import (
    ConnectedComponent,
    Connector,
    ConnectorCapabilities,
    ConnectorDescription,
    LifecycleState,
    create_connector,
)
from .context import IndexContext, InstantSearchContext, WidgetContext, create_context
from .exceptions import ConfigurationError, ErrorCodes, InstantSearchError
from .pagination import PaginationAccumulator
from .store import State, Store, create_store
from .widgets_manager import WidgetsManager

__all__ = [
    "ConfigurationError",
    "ConnectedComponent",
    "Connector",
    "ConnectorCapabilities",
    "ConnectorDescription",
    "ErrorCodes",
    "IndexContext",
    "InstantSearchContext",
    "InstantSearchError",
    "LifecycleState",
    "PaginationAccumulator",
    "SearchConfig",
    "State",
    "Store",
    "WidgetContext",
    "WidgetsManager",
    "create_connector",
    "create_context",
    "create_store",
]
