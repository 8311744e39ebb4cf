"""
Bind a connector to a PyQt6 widget.

The widget is the view: every render applies the merged props to it through
a caller-supplied function, and the binding unmounts when Qt destroys the
widget.

Usage:
    label = QLabel()
    binding = connect_widget(
        connect_hits,
        context,
        label,
        apply_props=lambda w, props: w.setText(f"{len(props['hits'])} hits"),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QWidget

    from instantsearch_core.core.connector import ConnectedComponent, Connector
    from instantsearch_core.core.context import IndexContext, InstantSearchContext

logger = logging.getLogger(__name__)

ApplyProps = Callable[["QWidget", dict[str, Any]], Any]


def connect_widget(
    connect: Callable[[Callable[[dict[str, Any]], Any]], ConnectedComponent],
    context: InstantSearchContext,
    widget: QWidget,
    apply_props: ApplyProps,
    props: Mapping[str, Any] | None = None,
    index_context: IndexContext | None = None,
) -> Connector:
    """
    Mount a binding that renders into `widget`.

    Args:
        connect: Connector function, e.g. `connect_hits` or
            `create_connector(description)`
        context: Session context
        widget: Target widget, updated on every accepted render
        apply_props: Called as apply_props(widget, merged_props)
        props: Consumer props
        index_context: Target index on multi-index pages

    Returns:
        The mounted binding

    """

    def render(merged_props: dict[str, Any]) -> Any:
        return apply_props(widget, merged_props)

    render.__name__ = type(widget).__name__
    binding = connect(render)(context, props=props, index_context=index_context)

    def on_destroyed(*_args: Any) -> None:
        logger.debug(f"QT WIDGET DESTROYED: unmounting {binding!r}")
        binding.unmount()

    widget.destroyed.connect(on_destroyed)
    binding.mount()
    return binding
