"""
Infinite hits connector.

Accumulates the hits of successive pages so a "show more" list keeps
growing, and refines the search state to request the next page.
Each binding owns one PaginationAccumulator (`widget.memory`).
"""

from __future__ import annotations

import logging
from typing import Any

from instantsearch_core.core.connector import ConnectorDescription, create_connector
from instantsearch_core.core.index_utils import (
    PAGE_KEY,
    clean_up_value,
    get_current_refinement_value,
    get_results,
    refine_value,
)
from instantsearch_core.core.pagination import PaginationAccumulator, has_more_pages

logger = logging.getLogger(__name__)

# Page assumed before any results arrived (pages in the search state are one-based)
FIRST_PAGE = 1


def get_current_page(widget, props, widgets_state) -> int:
    """
    One-based page currently shown by the widget.

    Uses the page stored in the search state (text is converted to a
    number), else the page of the last merged results snapshot. Text that
    is not an integer falls back to the rendered page.
    """
    accumulator = widget.memory
    rendered_page = accumulator.current_page if accumulator is not None else None
    default = rendered_page if rendered_page is not None else FIRST_PAGE

    page = get_current_refinement_value(props, widgets_state, widget.widget_context, PAGE_KEY, default)
    if isinstance(page, str):
        try:
            return int(page)
        except ValueError:
            logger.warning("Ignoring non-numeric page %r in search state, using page %d", page, default)
            return default
    return page


def get_provided_props(widget, props, widgets_state, search_results, *args: Any) -> dict[str, Any]:
    results = get_results(search_results, widget.widget_context)
    if results is None:
        return {"hits": [], "has_more": False}

    hits = widget.memory.merge(results)
    return {"hits": hits, "has_more": has_more_pages(results)}


def refine(widget, props, widgets_state, *args: Any) -> dict[str, Any]:
    next_page = get_current_page(widget, props, widgets_state) + 1
    logger.debug(f"INFINITE HITS: requesting page {next_page}")
    return refine_value(widgets_state, {PAGE_KEY: next_page}, widget.widget_context, reset_page=False)


def get_search_parameters(widget, search_parameters, props, widgets_state) -> dict[str, Any]:
    """Backend pages are zero-based."""
    return {**(search_parameters or {}), PAGE_KEY: get_current_page(widget, props, widgets_state) - 1}


def clean_up(widget, props, widgets_state) -> dict[str, Any]:
    return clean_up_value(widgets_state, widget.widget_context, PAGE_KEY)


infinite_hits_description = ConnectorDescription(
    display_name="InstantSearchInfiniteHits",
    get_provided_props=get_provided_props,
    get_search_parameters=get_search_parameters,
    refine=refine,
    clean_up=clean_up,
    create_memory=PaginationAccumulator,
)

connect_infinite_hits = create_connector(infinite_hits_description)
