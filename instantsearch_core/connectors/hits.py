"""Hits connector: the hits of the current results page."""

from __future__ import annotations

from typing import Any

from instantsearch_core.core.connector import ConnectorDescription, create_connector
from instantsearch_core.core.index_utils import get_results


def get_provided_props(widget, props, widgets_state, search_results, *args: Any) -> dict[str, Any]:
    results = get_results(search_results, widget.widget_context)
    if results is None:
        return {"hits": []}
    return {"hits": results.get("hits") or []}


def get_search_parameters(widget, search_parameters, props, widgets_state) -> Any:
    """Hits do not change the query; the parameters pass through unchanged."""
    return search_parameters


hits_description = ConnectorDescription(
    display_name="InstantSearchHits",
    get_provided_props=get_provided_props,
    get_search_parameters=get_search_parameters,
)

connect_hits = create_connector(hits_description)
