"""Tests for SearchConfig, context construction and logging setup."""

from __future__ import annotations

import logging

import pytest

from instantsearch_core.app_bootstrap import setup_logging
from instantsearch_core.core.config import SearchConfig
from instantsearch_core.core.context import DEFAULT_HREF, create_context
from instantsearch_core.core.exceptions import ConfigurationError, ErrorCodes, InstantSearchError
from instantsearch_core.core.store import Store


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self) -> None:
        config = SearchConfig()

        assert config.main_targeted_index == ""
        assert config.development_mode is False
        assert config.debug_logging is False

    def test_invalid_index_raises(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            SearchConfig(main_targeted_index=42)

        assert exc_info.value.error_code == ErrorCodes.CONFIG_INVALID
        assert exc_info.value.context == {"main_targeted_index": 42}

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSTANTSEARCH_INDEX", "products")
        monkeypatch.setenv("INSTANTSEARCH_ENV", "Development")
        monkeypatch.setenv("INSTANTSEARCH_DEBUG", "1")

        config = SearchConfig.from_env()

        assert config.main_targeted_index == "products"
        assert config.development_mode is True
        assert config.debug_logging is True

    def test_from_env_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("INSTANTSEARCH_INDEX", "INSTANTSEARCH_ENV", "INSTANTSEARCH_DEBUG"):
            monkeypatch.delenv(name, raising=False)

        assert SearchConfig.from_env() == SearchConfig()


class TestErrors:
    def test_message_includes_code(self) -> None:
        error = InstantSearchError("bad description", ErrorCodes.MISSING_DISPLAY_NAME)

        assert str(error) == "[MISSING_DISPLAY_NAME] bad description"

    def test_configuration_error_is_instantsearch_error(self) -> None:
        assert issubclass(ConfigurationError, InstantSearchError)


class TestCreateContext:
    """Tests for create_context."""

    def test_defaults(self) -> None:
        context = create_context()

        assert isinstance(context.store, Store)
        assert context.main_targeted_index == ""
        assert context.create_href_for_state({"query": "x"}) == DEFAULT_HREF
        assert context.on_internal_state_update({"query": "x"}) is None

    def test_main_index_from_config(self) -> None:
        context = create_context(config=SearchConfig(main_targeted_index="products"))

        assert context.main_targeted_index == "products"

    def test_hooks_and_store_kept(self, store: Store) -> None:
        def on_change(state):
            return state

        context = create_context(store=store, on_search_state_change=on_change)

        assert context.store is store
        assert context.on_search_state_change is on_change


class TestSetupLogging:
    def test_debug_level(self) -> None:
        assert setup_logging(SearchConfig(debug_logging=True)) == logging.DEBUG

    def test_default_level(self) -> None:
        assert setup_logging() == logging.WARNING
