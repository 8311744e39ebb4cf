"""
State results connector.

Gives a component read access to the whole search state and results, for
conditional display. Prefer it over a custom description that only
implements get_provided_props.
"""

from __future__ import annotations

from typing import Any

from instantsearch_core.core.connector import ConnectorDescription, create_connector
from instantsearch_core.core.index_utils import get_results


def get_provided_props(widget, props, widgets_state, search_results, *args: Any) -> dict[str, Any]:
    return {
        "search_state": widgets_state,
        "search_results": get_results(search_results, widget.widget_context),
        "all_search_results": search_results["results"],
        "searching": search_results["searching"],
        "is_search_stalled": search_results["is_search_stalled"],
        "error": search_results["error"],
        "searching_for_facet_values": search_results["searching_for_facet_values"],
        "props": props,
    }


state_results_description = ConnectorDescription(
    display_name="InstantSearchStateResults",
    get_provided_props=get_provided_props,
)

connect_state_results = create_connector(state_results_description)
