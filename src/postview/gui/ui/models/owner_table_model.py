"""Table model for the owner list."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QObject, Qt

from ....domain.models import Owner, OwnerSortKey

# Column order; the first two columns are sortable.
COLUMN_SORT_KEYS: tuple[Optional[OwnerSortKey], ...] = (OwnerSortKey.NAME, OwnerSortKey.EMAIL, None)
_HEADERS = ("Name", "Email", "Address")

OWNER_ID_ROLE = Qt.ItemDataRole.UserRole + 1


class OwnerTableModel(QAbstractTableModel):
    def __init__(
        self,
        indicator: Callable[[OwnerSortKey], str] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._owners: List[Owner] = []
        self._indicator = indicator or (lambda key: "")

    def set_owners(self, owners: List[Owner]) -> None:
        self.beginResetModel()
        self._owners = list(owners)
        self.endResetModel()

    def owner_at(self, row: int) -> Optional[Owner]:
        if 0 <= row < len(self._owners):
            return self._owners[row]
        return None

    def refresh_headers(self) -> None:
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, 0, len(_HEADERS) - 1)

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(self._owners)

    def columnCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(_HEADERS)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        owner = self.owner_at(index.row()) if index.isValid() else None
        if owner is None:
            return None
        if role == Qt.ItemDataRole.DisplayRole:
            return (owner.name, owner.email, owner.address.one_line())[index.column()]
        if role == OWNER_ID_ROLE:
            return owner.id
        return None

    def headerData(  # noqa: N802  # Qt override
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if orientation != Qt.Orientation.Horizontal or role != Qt.ItemDataRole.DisplayRole:
            return None
        if not 0 <= section < len(_HEADERS):
            return None
        key = COLUMN_SORT_KEYS[section]
        if key is None:
            return _HEADERS[section]
        return f"{_HEADERS[section]} {self._indicator(key)}".rstrip()
