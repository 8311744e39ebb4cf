"""
Connector binding - turn a widget description into a store-bound widget.

A connector description is a bundle of plain functions. `create_connector`
inspects which of them are present once, and produces a `connect` function
that wraps a view component:

    description = ConnectorDescription(
        display_name="MyHits",
        get_provided_props=lambda widget, props, widgets, search_results, metadata, facet_values: {...},
    )
    MyHits = create_connector(description)(render_hits)

    widget = MyHits(context, props={"show_more": True})
    widget.mount()          # subscribe + register with the coordinator
    widget.receive_props({"show_more": False})
    widget.unmount()        # unsubscribe, unregister, clean up state

Every description function receives the binding as its first argument,
giving access to `widget.widget_context` (session + targeted index) and
`widget.memory` (private per-instance state created by `create_memory`).

Lifecycle:
    CONSTRUCTING -> MOUNTED -> UNMOUNTING -> UNMOUNTED
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from instantsearch_core.core.context import IndexContext, InstantSearchContext, WidgetContext
from instantsearch_core.core.exceptions import ConfigurationError, ErrorCodes
from instantsearch_core.core.utils import get_display_name, is_equal, remove_empty_key, shallow_equal

logger = logging.getLogger(__name__)

# Display names of the connectors shipped with this package
BUILT_IN_PREFIX = "InstantSearch"

Component = Callable[[dict[str, Any]], Any]


# =============================================================================
# Description & Capabilities
# =============================================================================


@dataclass(frozen=True)
class ConnectorDescription:
    """
    Static description of one connector.

    Function signatures (all receive the binding first):
        get_provided_props(widget, props, widgets_state, search_results, metadata, results_facet_values)
        get_search_parameters(widget, search_parameters, props, widgets_state)
        get_metadata(widget, props, widgets_state)
        transition_state(widget, props, prev_widgets_state, next_widgets_state)
        refine(widget, props, widgets_state, *args)
        search_for_facet_values(widget, props, widgets_state, *args)
        clean_up(widget, props, widgets_state)
        should_component_update(widget, props, next_props, provided_props, next_provided_props)
    """

    display_name: str
    get_provided_props: Callable[..., Any] | None = None
    get_search_parameters: Callable[..., Any] | None = None
    get_metadata: Callable[..., Any] | None = None
    transition_state: Callable[..., Any] | None = None
    refine: Callable[..., Any] | None = None
    search_for_facet_values: Callable[..., Any] | None = None
    clean_up: Callable[..., Any] | None = None
    should_component_update: Callable[..., bool] | None = None
    default_props: Mapping[str, Any] = field(default_factory=dict)
    create_memory: Callable[[], Any] | None = None


@dataclass(frozen=True)
class ConnectorCapabilities:
    """Which optional functions a description supplies."""

    has_provided_props: bool = False
    has_refine: bool = False
    has_search_for_facet_values: bool = False
    has_search_parameters: bool = False
    has_metadata: bool = False
    has_transition_state: bool = False
    has_clean_up: bool = False
    has_should_component_update: bool = False

    @property
    def is_widget(self) -> bool:
        """Search-contributing widgets register with the coordinator."""
        return self.has_search_parameters or self.has_metadata or self.has_transition_state

    @classmethod
    def from_description(cls, description: ConnectorDescription) -> ConnectorCapabilities:
        return cls(
            has_provided_props=description.get_provided_props is not None,
            has_refine=description.refine is not None,
            has_search_for_facet_values=description.search_for_facet_values is not None,
            has_search_parameters=description.get_search_parameters is not None,
            has_metadata=description.get_metadata is not None,
            has_transition_state=description.transition_state is not None,
            has_clean_up=description.clean_up is not None,
            has_should_component_update=description.should_component_update is not None,
        )


class LifecycleState(StrEnum):
    """Lifecycle of one binding instance."""

    CONSTRUCTING = auto()
    MOUNTED = auto()
    UNMOUNTING = auto()
    UNMOUNTED = auto()


# =============================================================================
# Binding
# =============================================================================


class Connector:
    """One bound occurrence of a view component."""

    def __init__(
        self,
        description: ConnectorDescription,
        capabilities: ConnectorCapabilities,
        component: Component,
        context: InstantSearchContext,
        props: Mapping[str, Any] | None = None,
        index_context: IndexContext | None = None,
        display_name: str | None = None,
    ) -> None:
        self.description = description
        self.capabilities = capabilities
        self.component = component
        self.context = context
        self.widget_context = WidgetContext(ais=context, multi_index_context=index_context)
        self.display_name = display_name or description.display_name
        self.props: dict[str, Any] = {**description.default_props, **(props or {})}

        self.lifecycle = LifecycleState.CONSTRUCTING
        self.memory: Any = description.create_memory() if description.create_memory else None
        self.rendered: Any = None
        self.render_count = 0

        self._unsubscribe: Callable[[], None] | None = None
        self._unregister_widget: Callable[[], None] | None = None

        self._warn_needless_usage()

        self.provided_props: Any = self.get_provided_props(self.props)

        # Contribute to the first search before mount completes
        if capabilities.has_search_parameters:
            context.on_search_parameters(self.get_search_parameters, context, self.props)

    def __repr__(self) -> str:
        return f"<Connector {self.display_name} {self.lifecycle}>"

    @property
    def is_mounted(self) -> bool:
        return self.lifecycle == LifecycleState.MOUNTED

    @property
    def is_unmounting(self) -> bool:
        return self.lifecycle in (LifecycleState.UNMOUNTING, LifecycleState.UNMOUNTED)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def mount(self) -> Any:
        """
        Render once, subscribe to the store and register with the coordinator.

        Returns:
            The initial render output

        """
        if self.lifecycle != LifecycleState.CONSTRUCTING:
            logger.debug(f"MOUNT IGNORED: {self!r}")
            return self.rendered

        self._render()
        self.lifecycle = LifecycleState.MOUNTED
        self._unsubscribe = self.context.store.subscribe(self._on_store_change)

        if self.capabilities.is_widget:
            self._unregister_widget = self.context.widgets_manager.register_widget(self)

        logger.debug(f"MOUNTED: {self!r}")
        return self.rendered

    def receive_props(self, next_props: Mapping[str, Any]) -> bool:
        """
        Apply new consumer props.

        Returns:
            True if the component re-rendered

        """
        if self.is_unmounting:
            logger.debug(f"PROPS IGNORED AFTER UNMOUNT: {self!r}")
            return False

        next_props = {**self.description.default_props, **next_props}
        if is_equal(self.props, next_props):
            return self._update(next_props, self.provided_props)

        next_provided_props = self.get_provided_props(next_props)
        widgets_state = self.context.store.get_state().widgets
        rendered = self._update(next_props, next_provided_props)

        if self.capabilities.is_widget:
            self.context.widgets_manager.update()

            if self.capabilities.has_transition_state:
                # Both slices are the pre-transition widgets state
                self.context.on_search_state_change(
                    self.description.transition_state(self, next_props, widgets_state, widgets_state)
                )

        return rendered

    def should_component_update(self, next_props: Mapping[str, Any], next_provided_props: Any) -> bool:
        """Decide whether a props/provided-props change needs a render."""
        if self.capabilities.has_should_component_update:
            return bool(
                self.description.should_component_update(
                    self, self.props, next_props, self.provided_props, next_provided_props
                )
            )

        props_equal = shallow_equal(self.props, next_props)

        # None provided props means "render nothing"
        if self.provided_props is None or next_provided_props is None:
            if self.provided_props is next_provided_props:
                return not props_equal
            return True

        return not props_equal or not shallow_equal(self.provided_props, next_provided_props)

    def unmount(self) -> None:
        """Tear the binding down. Safe to call more than once."""
        if self.is_unmounting:
            return

        was_mounted = self.is_mounted
        self.lifecycle = LifecycleState.UNMOUNTING

        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        if self._unregister_widget is not None:
            self._unregister_widget()
            self._unregister_widget = None

        if was_mounted and self.capabilities.has_clean_up:
            store = self.context.store
            next_widgets_state = self.description.clean_up(self, self.props, store.get_state().widgets)
            store.set_state(store.get_state().replace(widgets=next_widgets_state))
            self.context.on_search_state_change(remove_empty_key(next_widgets_state))

        self.memory = None
        self.lifecycle = LifecycleState.UNMOUNTED
        logger.debug(f"UNMOUNTED: {self!r}")

    def _on_store_change(self) -> None:
        if self.is_unmounting:
            return
        self._update(self.props, self.get_provided_props(self.props))

    def _update(self, next_props: dict[str, Any], next_provided_props: Any) -> bool:
        should_update = self.should_component_update(next_props, next_provided_props)
        self.props = next_props
        self.provided_props = next_provided_props
        if should_update:
            self._render()
        return should_update

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self) -> Any:
        """Call the wrapped component with the merged props, or return None."""
        if self.provided_props is None:
            return None

        props = {**self.props, **self.provided_props}
        if self.capabilities.has_refine:
            props["refine"] = self.refine
            props["create_url"] = self.create_url
        if self.capabilities.has_search_for_facet_values:
            props["search_for_items"] = self.search_for_facet_values

        return self.component(props)

    def _render(self) -> None:
        self.rendered = self.render()
        self.render_count += 1

    # =========================================================================
    # Description calls
    # =========================================================================

    def get_provided_props(self, props: Mapping[str, Any]) -> Any:
        """Derive provided props from the store; an empty mapping without get_provided_props."""
        if not self.capabilities.has_provided_props:
            return {}

        state = self.context.store.get_state()
        search_results = {
            "results": state.results,
            "searching": state.searching,
            "searching_for_facet_values": state.searching_for_facet_values,
            "is_search_stalled": state.is_search_stalled,
            "error": state.error,
        }
        return self.description.get_provided_props(
            self,
            props,
            state.widgets,
            search_results,
            state.metadata,
            state.results_facet_values,
        )

    def get_search_parameters(self, search_parameters: Any) -> Any:
        if self.capabilities.has_search_parameters:
            return self.description.get_search_parameters(
                self, search_parameters, self.props, self.context.store.get_state().widgets
            )
        return None

    def get_metadata(self, next_widgets_state: Mapping[str, Any]) -> Any:
        if self.capabilities.has_metadata:
            return self.description.get_metadata(self, self.props, next_widgets_state)
        return {}

    def transition_state(self, prev_widgets_state: Mapping[str, Any], next_widgets_state: Mapping[str, Any]) -> Any:
        if self.capabilities.has_transition_state:
            return self.description.transition_state(self, self.props, prev_widgets_state, next_widgets_state)
        return next_widgets_state

    def refine(self, *args: Any) -> None:
        """Compute the next search state and hand it to the session. No-op without refine."""
        if not self.capabilities.has_refine:
            logger.debug(f"REFINE IGNORED: {self!r} has no refine function")
            return
        self.context.on_internal_state_update(self._next_refinement(*args))

    def create_url(self, *args: Any) -> str | None:
        """Build a reference to the state `refine(*args)` would produce, or None without refine."""
        if not self.capabilities.has_refine:
            return None
        return self.context.create_href_for_state(self._next_refinement(*args))

    def search_for_facet_values(self, *args: Any) -> None:
        if not self.capabilities.has_search_for_facet_values:
            logger.debug(f"FACET SEARCH IGNORED: {self!r} has no search_for_facet_values function")
            return
        self.context.on_search_for_facet_values(
            self.description.search_for_facet_values(
                self, self.props, self.context.store.get_state().widgets, *args
            )
        )

    def _next_refinement(self, *args: Any) -> Any:
        return self.description.refine(self, self.props, self.context.store.get_state().widgets, *args)

    def _warn_needless_usage(self) -> None:
        if not self.context.config.development_mode:
            return

        description = self.description
        only_provided_props = (
            description.get_provided_props is not None
            and description.get_metadata is None
            and description.get_search_parameters is None
            and description.refine is None
            and description.clean_up is None
        )
        if only_provided_props and not description.display_name.startswith(BUILT_IN_PREFIX):
            logger.warning(
                "%s only uses get_provided_props to read the search state and results. "
                "Use connect_state_results instead of create_connector for this.",
                description.display_name,
            )


# =============================================================================
# Factory
# =============================================================================


class ConnectedComponent:
    """A view component wrapped by a connector; call it to create bindings."""

    def __init__(self, description: ConnectorDescription, capabilities: ConnectorCapabilities, component: Component) -> None:
        self.description = description
        self.capabilities = capabilities
        self.component = component
        self.display_name = f"{description.display_name}({get_display_name(component)})"

    @property
    def default_props(self) -> Mapping[str, Any]:
        return self.description.default_props

    def __call__(
        self,
        context: InstantSearchContext,
        props: Mapping[str, Any] | None = None,
        index_context: IndexContext | None = None,
    ) -> Connector:
        return Connector(
            self.description,
            self.capabilities,
            self.component,
            context,
            props=props,
            index_context=index_context,
            display_name=self.display_name,
        )


def create_connector(description: ConnectorDescription) -> Callable[[Component], ConnectedComponent]:
    """
    Validate a description and return a function wrapping view components.

    Optional functions that are missing only remove the matching capability;
    a description without get_provided_props provides an empty mapping.

    Raises:
        ConfigurationError: If the description has no display name.

    """
    if not getattr(description, "display_name", None):
        msg = "create_connector requires a description with a non-empty display_name."
        logger.error(msg)
        raise ConfigurationError(msg, ErrorCodes.MISSING_DISPLAY_NAME)

    capabilities = ConnectorCapabilities.from_description(description)
    logger.debug(f"CONNECTOR CREATED: {description.display_name} | {capabilities}")

    def connect(component: Component) -> ConnectedComponent:
        return ConnectedComponent(description, capabilities, component)

    return connect
