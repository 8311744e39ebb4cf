"""Query rules connector: custom data attached to the results by query rules."""

from __future__ import annotations

from typing import Any

from instantsearch_core.core.connector import ConnectorDescription, create_connector
from instantsearch_core.core.index_utils import get_results


def _identity(items: list[Any]) -> list[Any]:
    return items


def get_provided_props(widget, props, widgets_state, search_results, *args: Any) -> dict[str, Any]:
    results = get_results(search_results, widget.widget_context)
    if results is None:
        return {"items": [], "can_refine": False}

    user_data = results.get("userData") or []
    items = props["transform_items"](user_data)

    return {"items": items, "can_refine": len(items) > 0}


query_rules_description = ConnectorDescription(
    display_name="InstantSearchQueryRules",
    get_provided_props=get_provided_props,
    default_props={"transform_items": _identity},
)

connect_query_rules = create_connector(query_rules_description)
