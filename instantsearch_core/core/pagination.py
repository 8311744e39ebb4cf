"""
Pagination accumulator for infinite-scroll style result lists.

Successive result snapshots of the form
    {"hits": [...], "page": 0, "hitsPerPage": 20, "nbPages": 5}
are merged into one growing list:

    page 0 -> [h1, h2]
    page 1 -> [h1, h2, h3, h4]
    page 1 again (re-render) -> [h1, h2, h3, h4]   (replaced, not duplicated)
    page 0 with new hits (new query) -> [n1, n2]   (reset)
    page 1 with a new hitsPerPage -> [n1, n2, n3, n4, n5]   (still appended)

One accumulator belongs to exactly one paged-results binding and is dropped
when that binding unmounts.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

# Keys of the backend's paged result payload
HITS = "hits"
PAGE = "page"
HITS_PER_PAGE = "hitsPerPage"
NB_PAGES = "nbPages"


def has_more_pages(results: Mapping[str, Any]) -> bool:
    """True while the snapshot's page is not the last one."""
    page = results.get(PAGE) or 0
    nb_pages = results.get(NB_PAGES) or 0
    return page + 1 < nb_pages


class PaginationAccumulator:
    """Merges paged result snapshots into one ordered hit list."""

    def __init__(self) -> None:
        self._segments: dict[int, list[Any]] = {}
        self._hits_per_page: Any = None
        self._highest_page: int | None = None
        self._page_zero_batch: Any = None
        self._seen_snapshot = False

    @property
    def hits(self) -> list[Any]:
        """Copy of every accumulated hit, in page order."""
        accumulated: list[Any] = []
        for page in sorted(self._segments):
            accumulated.extend(self._segments[page])
        return accumulated

    @property
    def highest_page(self) -> int | None:
        """Highest zero-based page merged so far, None before any merge."""
        return self._highest_page

    @property
    def current_page(self) -> int | None:
        """One-based page currently rendered, None before any merge."""
        if self._highest_page is None:
            return None
        return self._highest_page + 1

    def reset(self) -> None:
        self._segments = {}
        self._highest_page = None
        self._page_zero_batch = None

    def merge(self, results: Mapping[str, Any]) -> list[Any]:
        """
        Merge one snapshot and return the accumulated hits.

        A snapshot without hits is a no-op tick, except on page 0 where an
        empty batch is a fresh query that matched nothing.
        """
        hits = results.get(HITS)
        page = results.get(PAGE) or 0
        hits_per_page = results.get(HITS_PER_PAGE)

        if not hits and (hits is None or page != 0):
            return self.hits

        if self._is_new_query(hits, page, hits_per_page):
            logger.debug(f"ACCUMULATOR RESET: page={page} hitsPerPage={hits_per_page}")
            self.reset()

        self._seen_snapshot = True
        self._hits_per_page = hits_per_page

        # A page at or below the highest one is a re-delivery: replace its segment
        self._segments[page] = list(hits)
        if self._highest_page is None or page > self._highest_page:
            self._highest_page = page

        if page == 0:
            self._page_zero_batch = hits

        return self.hits

    def _is_new_query(self, hits: Any, page: int, hits_per_page: Any) -> bool:
        if not self._seen_snapshot:
            return True
        # Later pages keep accumulating across a page-size change
        if page != 0:
            return False
        return hits_per_page != self._hits_per_page or hits is not self._page_zero_batch
