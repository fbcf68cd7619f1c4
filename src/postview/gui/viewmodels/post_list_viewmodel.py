"""PostListViewModel: the per-owner posts table, independent of Qt.

Holds one :class:`PostCacheState` for its whole lifetime and drives the
reconciler, paginator and deletion coordinator against it.  Every user
action maps to one method here; each starts at most one request through the
injected :class:`RequestRunner` and applies its result in the completion
handler.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from postview.application.dtos import DeleteOutcome, FetchOutcome, RebalanceAction
from postview.application.services import (
    DeletionCoordinator,
    PageReconciler,
    Paginator,
    PostCacheState,
)
from postview.config import DEFAULT_PAGE_SIZE
from postview.domain.models import Post, PostPage
from postview.domain.repositories import IPostRepository
from postview.errors import PostViewError
from postview.errors.handler import ErrorHandler
from postview.events.bus import EventBus
from postview.events.post_events import PageFetchedEvent, PostDeletedEvent
from postview.gui.viewmodels.base import BaseViewModel
from postview.gui.viewmodels.runner import RequestRunner, SynchronousRunner
from postview.gui.viewmodels.signal import ObservableProperty, Signal


class PostListViewModel(BaseViewModel):
    """Posts of a single owner: fetch, search, paginate, delete."""

    def __init__(
        self,
        repository: IPostRepository,
        event_bus: EventBus,
        owner_id: int,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        runner: Optional[RequestRunner] = None,
        error_handler: Optional[ErrorHandler] = None,
        discard_stale: bool = True,
    ) -> None:
        super().__init__(event_bus)
        self._runner = runner or SynchronousRunner()
        self._logger = logging.getLogger(__name__)
        self._inflight = 0

        self._state = PostCacheState(owner_id=owner_id)
        self._reconciler = PageReconciler(repository, self._state, discard_stale=discard_stale)
        self._paginator = Paginator(self._state)
        self._deleter = DeletionCoordinator(repository, self._state, self._paginator, error_handler)

        # Observable properties
        self.posts = ObservableProperty([])
        self.page = ObservableProperty(0)
        self.page_size = ObservableProperty(page_size)
        self.total_count = ObservableProperty(0)
        self.page_count = ObservableProperty(0)
        self.search_text = ObservableProperty("")
        self.loading = ObservableProperty(False)
        self.error = ObservableProperty("")

        # Signals
        self.page_fetched = Signal()  # emits FetchOutcome
        self.post_deleted = Signal()  # emits DeleteOutcome
        self.delete_failed = Signal()  # emits DeleteOutcome

    # -- read-only accessors ------------------------------------------------

    @property
    def owner_id(self) -> int:
        return self._state.owner_id

    @property
    def state(self) -> PostCacheState:
        return self._state

    @property
    def search_active(self) -> bool:
        return self._paginator.search_active(self.search_text.value)

    def materialized(self) -> List[Post]:
        return self._paginator.materialize(self.search_text.value)

    # -- user actions -------------------------------------------------------

    def mount(self) -> None:
        """Fetch the first page; call once when the view is shown."""
        self._fetch(self.page.value)

    def change_page(self, page: int) -> None:
        if page < 0:
            return
        self.page.value = page
        self._refresh()
        self._fetch(page)

    def change_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        self.page_size.value = page_size
        self.page.value = 0
        self._refresh()
        if not self._paginator.is_cached(0, page_size):
            self._fetch(0)

    def set_search_text(self, text: str) -> None:
        self.search_text.value = text
        self._refresh()

    def delete_post(self, post_id: int) -> None:
        page = self.page.value
        window_size = self._deleter.window_size(page, self.page_size.value, self.search_text.value)
        self._runner.submit(
            lambda: self._deleter.request(post_id),
            lambda _result: self._on_deleted(post_id, page, window_size),
            lambda exc: self._on_delete_failed(post_id, exc),
        )

    def refetch(self) -> None:
        """Re-request the current page, e.g. after an error."""
        self._fetch(self.page.value)

    # -- fetch plumbing -----------------------------------------------------

    def _fetch(self, page: int) -> None:
        page_size = self.page_size.value
        epoch = self._reconciler.begin()
        self._inflight += 1
        self.loading.value = True
        self.error.value = ""
        self._runner.submit(
            lambda: self._reconciler.request(page, page_size),
            lambda result: self._on_fetched(epoch, page, page_size, result),
            lambda exc: self._on_fetch_failed(epoch, page, page_size, exc),
        )

    def _on_fetched(self, epoch: int, page: int, page_size: int, result: PostPage) -> None:
        if self.disposed:
            return
        outcome = self._reconciler.complete(epoch, page, page_size, result)
        self._settle(outcome)
        self.publish(PageFetchedEvent(
            owner_id=self.owner_id,
            page=page,
            page_size=page_size,
            merged_ids=list(outcome.merged_ids),
            total_count=outcome.total_count or 0,
        ))

    def _on_fetch_failed(self, epoch: int, page: int, page_size: int, exc: PostViewError) -> None:
        if self.disposed:
            return
        outcome = self._reconciler.fail(epoch, page, page_size, exc)
        if not outcome.stale:
            self.error.value = outcome.message
        self._settle(outcome)

    def _settle(self, outcome: FetchOutcome) -> None:
        self._inflight = max(0, self._inflight - 1)
        self.loading.value = self._inflight > 0
        self._refresh()
        self.page_fetched.emit(outcome)

    # -- delete plumbing ----------------------------------------------------

    def _on_deleted(self, post_id: int, page: int, window_size: int) -> None:
        if self.disposed:
            return
        outcome = self._deleter.complete(post_id, page, window_size)
        self.publish(PostDeletedEvent(
            owner_id=self.owner_id,
            post_id=post_id,
            total_count=outcome.total_count or 0,
        ))
        if outcome.action is RebalanceAction.PREVIOUS_PAGE:
            self.page.value = outcome.target_page
        self._refresh()
        self.post_deleted.emit(outcome)
        if outcome.action is RebalanceAction.REFETCH_FIRST_PAGE:
            self._fetch(0)

    def _on_delete_failed(self, post_id: int, exc: PostViewError) -> None:
        if self.disposed:
            return
        outcome: DeleteOutcome = self._deleter.fail(post_id, exc)
        # Not surfaced in the table: the post simply stays visible.
        self.delete_failed.emit(outcome)

    def _refresh(self) -> None:
        page_size = self.page_size.value
        self.posts.value = self._paginator.visible_slice(
            self.page.value, page_size, self.search_text.value
        )
        self.total_count.value = self._state.total_count or 0
        self.page_count.value = self._paginator.page_count(page_size)
