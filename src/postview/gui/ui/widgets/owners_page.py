"""Root page listing every owner."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QModelIndex, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QProgressBar,
    QStackedWidget,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from ....config import NO_OWNERS_MESSAGE
from ...viewmodels.owner_list_viewmodel import OwnerListViewModel
from ...viewmodels.signal import observe
from ..models.owner_table_model import COLUMN_SORT_KEYS, OwnerTableModel
from .pagination_bar import PaginationBar


class OwnersPage(QWidget):
    """Sortable owner table; activating a row opens that owner's posts."""

    ownerActivated = Signal(int)  # noqa: N815

    def __init__(self, view_model: OwnerListViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = view_model

        self._model = OwnerTableModel(view_model.sort_indicator, self)
        self._table = QTableView(self)
        self._table.setModel(self._model)
        self._table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.verticalHeader().setVisible(False)
        header = self._table.horizontalHeader()
        header.setSectionsClickable(True)
        header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)

        self._empty = QLabel(NO_OWNERS_MESSAGE, self)
        self._busy = QProgressBar(self)
        self._busy.setRange(0, 0)
        self._error = QLabel(self)

        self._content = QStackedWidget(self)
        for widget in (self._table, self._empty, self._busy, self._error):
            self._content.addWidget(widget)

        self._pagination = PaginationBar(parent=self)

        layout = QVBoxLayout(self)
        layout.addWidget(self._content, 1)
        layout.addWidget(self._pagination)

        header.sectionClicked.connect(self._on_header_clicked)
        self._table.activated.connect(self._on_row_activated)
        self._pagination.pageRequested.connect(self._vm.change_page)
        self._pagination.pageSizeRequested.connect(self._vm.change_page_size)

        vm = self._vm
        self._release = observe(
            self._on_state_changed,
            vm.owners, vm.page, vm.page_size, vm.sort_key, vm.sort_order, vm.loading, vm.error,
        )
        self._render()

    @property
    def view_model(self) -> OwnerListViewModel:
        return self._vm

    def release(self) -> None:
        """Stop listening to the view model; call before discarding the page."""
        self._release()

    def _on_state_changed(self, *_args: Any) -> None:
        self._render()

    def _on_header_clicked(self, section: int) -> None:
        if 0 <= section < len(COLUMN_SORT_KEYS) and COLUMN_SORT_KEYS[section] is not None:
            self._vm.sort_by(COLUMN_SORT_KEYS[section])

    def _on_row_activated(self, index: QModelIndex) -> None:
        owner = self._model.owner_at(index.row())
        if owner is not None:
            self.ownerActivated.emit(owner.id)

    def _render(self) -> None:
        vm = self._vm
        self._model.set_owners(vm.owners.value)
        self._model.refresh_headers()
        if vm.error.value:
            self._error.setText(vm.error.value)
            self._content.setCurrentWidget(self._error)
        elif vm.loading.value:
            self._content.setCurrentWidget(self._busy)
        elif not vm.owners.value:
            self._content.setCurrentWidget(self._empty)
        else:
            self._content.setCurrentWidget(self._table)
        self._pagination.setVisible(not vm.error.value)
        self._pagination.set_state(vm.page.value, vm.page_size.value, vm.total_count.value)
