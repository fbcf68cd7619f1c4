"""Sorting and windowing for the owner list."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from postview.application.services.paginator import window
from postview.domain.models import Owner, OwnerSortKey, SortOrder

_SORT_KEYS: Dict[OwnerSortKey, Callable[[Owner], str]] = {
    OwnerSortKey.NAME: lambda owner: owner.name.lower(),
    OwnerSortKey.EMAIL: lambda owner: owner.email.lower(),
}


class OwnerSorter:
    """Toggleable sort state for the owner table.

    Selecting the key that is currently sorted ascending flips it to
    descending; anything else sorts ascending.
    """

    def __init__(self, key: OwnerSortKey = OwnerSortKey.NAME, order: SortOrder = SortOrder.ASC) -> None:
        self.key = key
        self.order = order

    def select(self, key: OwnerSortKey | str) -> None:
        key = OwnerSortKey(key)
        is_asc = self.key is key and self.order is SortOrder.ASC
        self.key = key
        self.order = SortOrder.DESC if is_asc else SortOrder.ASC

    def sort(self, owners: Sequence[Owner]) -> List[Owner]:
        return sorted(owners, key=_SORT_KEYS[self.key], reverse=self.order is SortOrder.DESC)

    def visible(self, owners: Sequence[Owner], page: int, page_size: int) -> List[Owner]:
        return window(self.sort(owners), page, page_size)

    def indicator(self, key: OwnerSortKey) -> str:
        if key is not self.key:
            return ""
        return "▲" if self.order is SortOrder.ASC else "▼"
