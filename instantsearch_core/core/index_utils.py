"""
Helpers that read and write a widget's slice of the search UI state.

Single-index pages keep refinements at the top level of the search state:
    {"query": "phone", "page": 2}

Multi-index pages nest them per index under "indices":
    {"indices": {"products": {"page": 2}, "articles": {"query": "x"}}}

Widget ids may be dotted ("refinementList.brand"): the first part names a
namespace mapping, the rest the attribute inside it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from instantsearch_core.core.context import IndexContext, WidgetContext
from instantsearch_core.core.utils import omit

INDICES_KEY = "indices"
PAGE_KEY = "page"


def has_multiple_indices(context: WidgetContext) -> bool:
    return context.multi_index_context is not None


def get_index_id(context: WidgetContext) -> str:
    if context.multi_index_context is not None:
        return context.multi_index_context.targeted_index
    return context.ais.main_targeted_index


def get_results(search_results: Mapping[str, Any], context: WidgetContext) -> Any:
    """
    Pick the results relevant to a widget.

    Returns:
        The single-index result, the targeted index's entry of a multi-index
        result mapping, or None when nothing is available yet.

    """
    results = search_results.get("results")
    if not results:
        return None
    if isinstance(results, Mapping) and results.get("hits") is None:
        return results.get(get_index_id(context)) or None
    return results


def _split_id(id: str) -> tuple[str | None, str | None]:
    namespace, dot, attribute = id.partition(".")
    if not dot:
        return None, None
    return namespace, attribute


def refine_value(
    search_state: Mapping[str, Any],
    next_refinement: Mapping[str, Any],
    context: WidgetContext,
    reset_page: bool = False,
    namespace: str | None = None,
) -> dict[str, Any]:
    """Merge `next_refinement` into the widget's slice of `search_state`."""
    if has_multiple_indices(context):
        index_id = get_index_id(context)
        if namespace:
            return _refine_multi_index_with_namespace(search_state, next_refinement, index_id, reset_page, namespace)
        return _refine_multi_index(search_state, next_refinement, index_id, reset_page)

    # Shared widgets on a multi-index page also reset every index's page
    if search_state.get(INDICES_KEY) and reset_page:
        for targeted_index in search_state[INDICES_KEY]:
            search_state = refine_value(
                search_state,
                {PAGE_KEY: 1},
                WidgetContext(ais=context.ais, multi_index_context=IndexContext(targeted_index)),
                True,
                namespace,
            )

    if namespace:
        return _refine_single_index_with_namespace(search_state, next_refinement, reset_page, namespace)
    return _refine_single_index(search_state, next_refinement, reset_page)


def _page_reset(reset_page: bool) -> dict[str, Any]:
    return {PAGE_KEY: 1} if reset_page else {}


def _refine_single_index(search_state: Mapping[str, Any], next_refinement: Mapping[str, Any], reset_page: bool) -> dict[str, Any]:
    return {**search_state, **next_refinement, **_page_reset(reset_page)}


def _refine_single_index_with_namespace(
    search_state: Mapping[str, Any],
    next_refinement: Mapping[str, Any],
    reset_page: bool,
    namespace: str,
) -> dict[str, Any]:
    return {
        **search_state,
        namespace: {**(search_state.get(namespace) or {}), **next_refinement},
        **_page_reset(reset_page),
    }


def _refine_multi_index(
    search_state: Mapping[str, Any],
    next_refinement: Mapping[str, Any],
    index_id: str,
    reset_page: bool,
) -> dict[str, Any]:
    indices = search_state.get(INDICES_KEY) or {}
    index_state = indices.get(index_id) or {}
    return {
        **search_state,
        INDICES_KEY: {**indices, index_id: {**index_state, **next_refinement, **_page_reset(reset_page)}},
    }


def _refine_multi_index_with_namespace(
    search_state: Mapping[str, Any],
    next_refinement: Mapping[str, Any],
    index_id: str,
    reset_page: bool,
    namespace: str,
) -> dict[str, Any]:
    indices = search_state.get(INDICES_KEY) or {}
    index_state = indices.get(index_id) or {}
    return {
        **search_state,
        INDICES_KEY: {
            **indices,
            index_id: {
                **index_state,
                namespace: {**(index_state.get(namespace) or {}), **next_refinement},
                **_page_reset(reset_page),
            },
        },
    }


def get_current_refinement_value(
    props: Mapping[str, Any],
    search_state: Mapping[str, Any] | None,
    context: WidgetContext,
    id: str,
    default: Any = None,
) -> Any:
    """
    Read the widget's current refinement.

    Falls back to the `default_refinement` prop, then to `default`.
    """
    search_state = search_state or {}
    namespace, attribute = _split_id(id)

    if has_multiple_indices(context):
        scope = (search_state.get(INDICES_KEY) or {}).get(get_index_id(context))
    else:
        scope = search_state

    if isinstance(scope, Mapping):
        if namespace:
            namespaced = scope.get(namespace)
            if isinstance(namespaced, Mapping) and attribute in namespaced:
                return namespaced[attribute]
        elif id in scope:
            return scope[id]

    if props.get("default_refinement"):
        return props["default_refinement"]
    return default


def clean_up_value(search_state: Mapping[str, Any], context: WidgetContext, id: str) -> dict[str, Any]:
    """Remove the widget's refinement from `search_state`."""
    namespace, attribute = _split_id(id)

    if has_multiple_indices(context) and search_state.get(INDICES_KEY):
        index_id = get_index_id(context)
        indices = search_state[INDICES_KEY]
        index_state = indices.get(index_id)
        if index_state is None:
            return dict(search_state)
        if namespace:
            next_index_state = {**index_state, namespace: omit(index_state.get(namespace), attribute)}
        else:
            next_index_state = omit(index_state, id)
        return {**search_state, INDICES_KEY: {**indices, index_id: next_index_state}}

    if namespace:
        return {**search_state, namespace: omit(search_state.get(namespace), attribute)}
    return omit(search_state, id)

