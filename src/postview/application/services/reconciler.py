"""Merge remotely fetched post pages into a :class:`PostCacheState`."""

from __future__ import annotations

import logging

from postview.application.dtos import ErrorKind, FetchOutcome
from postview.application.services.post_cache import PostCacheState
from postview.config import FETCH_POSTS_ERROR_MESSAGE
from postview.domain.models import PostPage, PostQuery
from postview.domain.repositories import IPostRepository
from postview.errors import FetchError

LOGGER = logging.getLogger(__name__)


class PageReconciler:
    """Fetch one page of an owner's posts and fold it into the shared cache.

    A fetch is split into :meth:`begin` (claims a request epoch),
    :meth:`request` (the blocking repository call, safe to run on a worker
    thread) and :meth:`complete` / :meth:`fail` (apply the result; must run
    on the thread that owns the view).  :meth:`fetch_page` runs all three
    inline.

    With ``discard_stale`` enabled a completion that was overtaken by a newer
    fetch still merges its posts but leaves the server total alone; otherwise
    the last completion to arrive also sets the total.
    """

    def __init__(
        self,
        repository: IPostRepository,
        state: PostCacheState,
        *,
        discard_stale: bool = True,
    ) -> None:
        self._repository = repository
        self._state = state
        self._discard_stale = discard_stale

    @property
    def state(self) -> PostCacheState:
        return self._state

    def fetch_page(self, page: int, page_size: int) -> FetchOutcome:
        epoch = self.begin()
        try:
            result = self.request(page, page_size)
        except FetchError as exc:
            return self.fail(epoch, page, page_size, exc)
        return self.complete(epoch, page, page_size, result)

    def begin(self) -> int:
        return self._state.next_epoch()

    def request(self, page: int, page_size: int) -> PostPage:
        query = PostQuery(owner_id=self._state.owner_id).paginate(page, page_size)
        LOGGER.debug("Fetching posts owner=%s page=%s limit=%s", query.owner_id, page, page_size)
        return self._repository.list_posts(query)

    def complete(self, epoch: int, page: int, page_size: int, result: PostPage) -> FetchOutcome:
        stale = self._is_stale(epoch)
        total = result.total_count
        if stale and self._state.has_fetched:
            # A newer request owns the total; the items are still valid.
            LOGGER.info("Keeping total from newer fetch for page %s (epoch %s < %s)",
                        page, epoch, self._state.epoch)
            total = None

        merged = self._state.merge(result.items, total)
        LOGGER.debug(
            "Merged %d of %d posts from page %s; total=%s",
            len(merged), len(result.items), page, self._state.total_count,
        )
        return FetchOutcome(
            ok=True,
            page=page,
            page_size=page_size,
            merged_ids=merged,
            total_count=self._state.total_count,
            stale=stale,
        )

    def fail(self, epoch: int, page: int, page_size: int, error: Exception) -> FetchOutcome:
        LOGGER.error("Error fetching posts: %s", error)
        return FetchOutcome(
            ok=False,
            error_kind=ErrorKind.FETCH,
            message=FETCH_POSTS_ERROR_MESSAGE,
            page=page,
            page_size=page_size,
            total_count=self._state.total_count,
            stale=self._is_stale(epoch),
        )

    def _is_stale(self, epoch: int) -> bool:
        return self._discard_stale and not self._state.is_current(epoch)
