"""Delete a post remotely and rebalance the current page."""

from __future__ import annotations

import logging
from typing import Optional

from postview.application.dtos import DeleteOutcome, ErrorKind, RebalanceAction
from postview.application.services.paginator import Paginator
from postview.application.services.post_cache import PostCacheState
from postview.domain.repositories import IPostRepository
from postview.errors import DeleteError
from postview.errors.handler import ErrorHandler, ErrorSeverity

LOGGER = logging.getLogger(__name__)


def decide_rebalance(window_size: int, page: int, total_count: Optional[int]) -> RebalanceAction:
    """Where the view goes after a successful delete.

    *window_size* is the number of rows the current window held before the
    delete and *total_count* is the total after the decrement.
    """
    if window_size == 1 and page > 0:
        return RebalanceAction.PREVIOUS_PAGE
    if window_size == 1 and page == 0 and (total_count or 0) > 1:
        return RebalanceAction.REFETCH_FIRST_PAGE
    return RebalanceAction.STAY


class DeletionCoordinator:
    """Issue deletes and keep PageCache, DeletedSet and TotalCount in step.

    As with :class:`PageReconciler` the work is split so the repository call
    can run off the view thread: measure the window with :meth:`window_size`
    when the delete is requested, call :meth:`request`, then apply with
    :meth:`complete` or :meth:`fail`.
    """

    def __init__(
        self,
        repository: IPostRepository,
        state: PostCacheState,
        paginator: Paginator,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._repository = repository
        self._state = state
        self._paginator = paginator
        self._error_handler = error_handler

    def delete_post(self, post_id: int, page: int, page_size: int, query: str = "") -> DeleteOutcome:
        window_size = self.window_size(page, page_size, query)
        try:
            self.request(post_id)
        except DeleteError as exc:
            return self.fail(post_id, exc)
        return self.complete(post_id, page, window_size)

    def window_size(self, page: int, page_size: int, query: str = "") -> int:
        return len(self._paginator.visible_slice(page, page_size, query))

    def request(self, post_id: int) -> None:
        LOGGER.debug("Deleting post %s", post_id)
        self._repository.delete_post(post_id)

    def complete(self, post_id: int, page: int, window_size: int) -> DeleteOutcome:
        self._state.tombstone(post_id)
        total = self._state.total_count
        action = decide_rebalance(window_size, page, total)
        target = page - 1 if action is RebalanceAction.PREVIOUS_PAGE else page
        LOGGER.info("Deleted post %s; total=%s action=%s", post_id, total, action.value)
        return DeleteOutcome(
            ok=True,
            post_id=post_id,
            action=action,
            target_page=target,
            total_count=total,
        )

    def fail(self, post_id: int, error: Exception) -> DeleteOutcome:
        if self._error_handler is not None:
            self._error_handler.handle(error, ErrorSeverity.ERROR, {"post_id": post_id})
        else:
            LOGGER.error("Error deleting post %s: %s", post_id, error)
        return DeleteOutcome(
            ok=False,
            error_kind=ErrorKind.DELETE,
            message=str(error),
            post_id=post_id,
            total_count=self._state.total_count,
        )
