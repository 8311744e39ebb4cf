"""Test fixtures for instantsearch core."""

from tests.fixtures.search_fixtures import make_hits, paged_results, set_results, set_widgets

__all__ = [
    "make_hits",
    "paged_results",
    "set_results",
    "set_widgets",
]
