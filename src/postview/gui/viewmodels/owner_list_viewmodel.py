"""OwnerListViewModel: the sortable, paginated owner table."""

from __future__ import annotations

import logging
from typing import List, Optional

from postview.application.dtos import ErrorKind, OwnersOutcome
from postview.application.services import OwnerSorter, page_count
from postview.config import DEFAULT_PAGE_SIZE, FETCH_OWNERS_ERROR_MESSAGE
from postview.domain.models import Owner, OwnerSortKey
from postview.domain.repositories import IPostRepository
from postview.errors import PostViewError
from postview.events.bus import EventBus
from postview.events.post_events import OwnersLoadedEvent
from postview.gui.viewmodels.base import BaseViewModel
from postview.gui.viewmodels.runner import RequestRunner, SynchronousRunner
from postview.gui.viewmodels.signal import ObservableProperty, Signal


class OwnerListViewModel(BaseViewModel):
    """Owners are fetched once and then sorted and paged in memory."""

    def __init__(
        self,
        repository: IPostRepository,
        event_bus: EventBus,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort_key: OwnerSortKey = OwnerSortKey.NAME,
        runner: Optional[RequestRunner] = None,
    ) -> None:
        super().__init__(event_bus)
        self._repository = repository
        self._runner = runner or SynchronousRunner()
        self._logger = logging.getLogger(__name__)
        self._sorter = OwnerSorter(sort_key)
        self._all: List[Owner] = []

        self.owners = ObservableProperty([])
        self.total_count = ObservableProperty(0)
        self.page = ObservableProperty(0)
        self.page_size = ObservableProperty(page_size)
        self.page_count = ObservableProperty(0)
        self.sort_key = ObservableProperty(self._sorter.key)
        self.sort_order = ObservableProperty(self._sorter.order)
        self.loading = ObservableProperty(True)
        self.error = ObservableProperty("")

        self.owners_loaded = Signal()  # emits OwnersOutcome

    def load(self) -> None:
        self.loading.value = True
        self.error.value = ""
        self._runner.submit(self._repository.list_owners, self._on_loaded, self._on_failed)

    def sort_by(self, key: str | OwnerSortKey) -> None:
        try:
            self._sorter.select(key)
        except ValueError:
            self._logger.warning("Ignoring unknown owner sort key %r", key)
            return
        self.sort_key.value = self._sorter.key
        self.sort_order.value = self._sorter.order
        self._refresh()

    def sort_indicator(self, key: OwnerSortKey) -> str:
        return self._sorter.indicator(key)

    def change_page(self, page: int) -> None:
        if page < 0:
            return
        self.page.value = page
        self._refresh()

    def change_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        self.page_size.value = page_size
        self.page.value = 0
        self._refresh()

    def _on_loaded(self, owners: List[Owner]) -> None:
        if self.disposed:
            return
        self._all = list(owners)
        self.loading.value = False
        self._refresh()
        self.publish(OwnersLoadedEvent(owner_count=len(self._all)))
        self.owners_loaded.emit(OwnersOutcome(ok=True, owner_count=len(self._all)))

    def _on_failed(self, exc: PostViewError) -> None:
        if self.disposed:
            return
        self._logger.error("Error fetching users: %s", exc)
        self.error.value = FETCH_OWNERS_ERROR_MESSAGE
        self.loading.value = False
        self.owners_loaded.emit(OwnersOutcome(
            ok=False, error_kind=ErrorKind.FETCH, message=FETCH_OWNERS_ERROR_MESSAGE,
        ))

    def _refresh(self) -> None:
        size = self.page_size.value
        self.owners.value = self._sorter.visible(self._all, self.page.value, size)
        self.total_count.value = len(self._all)
        self.page_count.value = page_count(len(self._all), size)
