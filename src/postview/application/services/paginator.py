"""Derive the visible window of cached posts."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from postview.application.services.post_cache import PostCacheState
from postview.application.services.search_filter import filter_posts
from postview.domain.models import Post

T = TypeVar("T")


def window(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Half-open slice ``[page*page_size, page*page_size + page_size)``."""
    if page < 0 or page_size <= 0:
        return []
    start = page * page_size
    return list(items[start:start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0 or total <= 0:
        return 0
    return (total + page_size - 1) // page_size


class Paginator:
    """Windowing over a :class:`PostCacheState`.

    Two regimes apply.  Without a search query the visible rows are the
    page window of the tombstone-filtered cache.  With a query every cached
    match is shown at once and page/page size are ignored.
    """

    def __init__(self, state: PostCacheState) -> None:
        self._state = state

    def materialize(self, query: str = "") -> List[Post]:
        return filter_posts(self._state.live_posts(), query)

    def visible_slice(self, page: int, page_size: int, query: str = "") -> List[Post]:
        if self.search_active(query):
            return self.materialize(query)
        return window(self.materialize(), page, page_size)

    @staticmethod
    def search_active(query: str) -> bool:
        return bool(query)

    def page_count(self, page_size: int) -> int:
        """Number of pages according to the server total, not the cache."""
        return page_count(self._state.total_count or 0, page_size)

    def is_cached(self, page: int, page_size: int) -> bool:
        """``True`` when the cache already fills the window for *page*.

        The last page counts as filled when it holds every remaining item of
        the server total.
        """
        live = len(self._state.live_posts())
        total = self._state.total_count
        if total is None:
            return False
        end = min((page + 1) * page_size, total)
        return live >= end
