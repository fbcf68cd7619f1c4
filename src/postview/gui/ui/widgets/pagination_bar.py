"""Rows-per-page selector plus previous/next controls."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from ....config import PAGE_SIZE_OPTIONS


def range_label(page: int, page_size: int, count: int) -> str:
    """``"5–8 of 10"`` in the style of a table paginator."""
    if count <= 0:
        return "0–0 of 0"
    start = page * page_size + 1
    end = min(count, (page + 1) * page_size)
    return f"{start}–{end} of {count}"


class PaginationBar(QWidget):
    pageRequested = Signal(int)  # noqa: N815
    pageSizeRequested = Signal(int)  # noqa: N815

    def __init__(self, options: Sequence[int] = PAGE_SIZE_OPTIONS, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._page = 0
        self._page_size = options[0]
        self._count = 0

        self._size_label = QLabel("Rows per page:", self)
        self._size_combo = QComboBox(self)
        for option in options:
            self._size_combo.addItem(str(option), option)
        self._range_label = QLabel(self)
        self._prev_button = QPushButton("‹", self)
        self._next_button = QPushButton("›", self)
        self._prev_button.setToolTip("Previous page")
        self._next_button.setToolTip("Next page")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addStretch(1)
        layout.addWidget(self._size_label)
        layout.addWidget(self._size_combo)
        layout.addWidget(self._range_label)
        layout.addWidget(self._prev_button)
        layout.addWidget(self._next_button)

        self._prev_button.clicked.connect(lambda: self.pageRequested.emit(self._page - 1))
        self._next_button.clicked.connect(lambda: self.pageRequested.emit(self._page + 1))
        self._size_combo.activated.connect(self._on_size_activated)
        self._sync()

    def set_state(self, page: int, page_size: int, count: int) -> None:
        self._page = page
        self._page_size = page_size
        self._count = count
        index = self._size_combo.findData(page_size)
        if index >= 0:
            self._size_combo.setCurrentIndex(index)
        self._sync()

    def range_text(self) -> str:
        return self._range_label.text()

    def _on_size_activated(self, index: int) -> None:
        size = self._size_combo.itemData(index)
        if size is not None and size != self._page_size:
            self.pageSizeRequested.emit(int(size))

    def _sync(self) -> None:
        self._range_label.setText(range_label(self._page, self._page_size, self._count))
        self._prev_button.setEnabled(self._page > 0)
        self._next_button.setEnabled((self._page + 1) * self._page_size < self._count)
