"""
Tests for the PaginationAccumulator.

Covers growth, idempotent re-delivery, resets and the has-more flag.
"""

from __future__ import annotations

import pytest

from instantsearch_core.core.pagination import PaginationAccumulator, has_more_pages
from tests.fixtures import make_hits, paged_results


@pytest.fixture
def accumulator() -> PaginationAccumulator:
    return PaginationAccumulator()


class TestMergeGrowth:
    """Pages fed in order grow the accumulated list."""

    def test_first_snapshot(self, accumulator: PaginationAccumulator) -> None:
        hits = make_hits("a", 2)

        assert accumulator.merge(paged_results(hits, page=0)) == hits
        assert accumulator.highest_page == 0
        assert accumulator.current_page == 1

    def test_consecutive_pages_concatenate(self, accumulator: PaginationAccumulator) -> None:
        batches = [make_hits(prefix, 2) for prefix in "abcde"]

        expected = []
        for page, batch in enumerate(batches):
            expected += batch
            accumulated = accumulator.merge(paged_results(batch, page=page, nb_pages=5))

        assert accumulated == expected
        assert accumulator.highest_page == 4

    def test_many_pages_without_reset(self, accumulator: PaginationAccumulator) -> None:
        """Reusing the same batch object on later pages never resets."""
        hits = make_hits("a", 2)
        nb_pages = 100

        for page in range(nb_pages):
            accumulated = accumulator.merge(paged_results(hits, page=page, nb_pages=nb_pages))
            assert len(accumulated) == (page + 1) * 2

    def test_returns_a_copy(self, accumulator: PaginationAccumulator) -> None:
        first = accumulator.merge(paged_results(make_hits("a", 2), page=0))
        first.append({"objectID": "intruder"})

        assert accumulator.hits == make_hits("a", 2)

    def test_first_snapshot_not_on_page_zero(self, accumulator: PaginationAccumulator) -> None:
        """Results restored from a cache may start on a later page."""
        hits = make_hits("a", 3)

        assert accumulator.merge({"hits": hits, "page": 1, "nbPages": 3}) == hits
        assert accumulator.current_page == 2


class TestMergeIdempotence:
    """Re-delivering a page replaces its segment."""

    def test_same_snapshot_twice(self, accumulator: PaginationAccumulator) -> None:
        snapshot = paged_results(make_hits("a", 2), page=0)

        first = accumulator.merge(snapshot)
        second = accumulator.merge(snapshot)

        assert first == second == make_hits("a", 2)

    def test_same_later_page_twice(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0))
        page_one = paged_results(make_hits("b", 2), page=1)

        accumulator.merge(page_one)
        accumulated = accumulator.merge(page_one)

        assert accumulated == make_hits("a", 2) + make_hits("b", 2)

    def test_earlier_page_redelivered_is_replaced(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0))
        accumulator.merge(paged_results(make_hits("b", 2), page=1))
        accumulator.merge(paged_results(make_hits("c", 2), page=2))

        accumulated = accumulator.merge(paged_results(make_hits("x", 2), page=1))

        assert accumulated == make_hits("a", 2) + make_hits("x", 2) + make_hits("c", 2)
        assert accumulator.highest_page == 2


class TestMergeReset:
    """New queries and page-size changes restart accumulation."""

    def test_hits_per_page_change_on_later_page_keeps_accumulating(self, accumulator: PaginationAccumulator) -> None:
        """A new page size on a later page appends; re-sending that page replaces it."""
        first, second, third = make_hits("a", 6), make_hits("b", 6), make_hits("c", 8)
        accumulator.merge(paged_results(first, page=0, hits_per_page=6, nb_pages=10))
        accumulator.merge(paged_results(second, page=1, hits_per_page=6, nb_pages=10))

        accumulated = accumulator.merge(paged_results(third, page=2, hits_per_page=8, nb_pages=10))
        assert accumulated == first + second + third

        accumulated = accumulator.merge(paged_results(third, page=2, hits_per_page=8, nb_pages=10))
        assert accumulated == first + second + third

    def test_hits_per_page_change_on_page_zero_resets(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0, hits_per_page=2))
        accumulator.merge(paged_results(make_hits("b", 2), page=1, hits_per_page=2))

        accumulated = accumulator.merge(paged_results(make_hits("c", 3), page=0, hits_per_page=3))

        assert accumulated == make_hits("c", 3)
        assert accumulator.highest_page == 0

    def test_new_page_zero_batch_resets(self, accumulator: PaginationAccumulator) -> None:
        """A different page-0 batch means a fresh query."""
        accumulator.merge(paged_results(make_hits("a", 2), page=0))
        accumulator.merge(paged_results(make_hits("b", 2), page=1))

        accumulated = accumulator.merge(paged_results(make_hits("n", 2), page=0))

        assert accumulated == make_hits("n", 2)
        assert accumulator.highest_page == 0

    def test_empty_page_zero_is_a_fresh_empty_query(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0))

        assert accumulator.merge(paged_results([], page=0)) == []

    def test_explicit_reset(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0))

        accumulator.reset()

        assert accumulator.hits == []
        assert accumulator.current_page is None


class TestMergeNoOp:
    """Snapshots without hits leave the accumulation alone."""

    def test_missing_hits(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0))

        assert accumulator.merge({"page": 1, "nbPages": 3}) == make_hits("a", 2)

    def test_empty_later_page(self, accumulator: PaginationAccumulator) -> None:
        accumulator.merge(paged_results(make_hits("a", 2), page=0))

        assert accumulator.merge(paged_results([], page=1)) == make_hits("a", 2)
        assert accumulator.highest_page == 0


class TestHasMorePages:
    """Tests for has_more_pages."""

    @pytest.mark.parametrize("page", [0, 1, 2, 3])
    def test_true_before_last_page(self, page: int) -> None:
        assert has_more_pages({"page": page, "nbPages": 5}) is True

    def test_false_on_last_page(self) -> None:
        assert has_more_pages({"page": 4, "nbPages": 5}) is False

    def test_false_without_pages(self) -> None:
        assert has_more_pages({"page": 0, "nbPages": 0}) is False
        assert has_more_pages({}) is False
