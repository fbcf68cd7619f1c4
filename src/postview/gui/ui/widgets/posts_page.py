"""Per-owner posts page: search field, posts table and paginator."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QModelIndex, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from ....config import NO_POSTS_MESSAGE
from ...viewmodels.post_list_viewmodel import PostListViewModel
from ...viewmodels.signal import observe
from ..models.post_table_model import PostColumn, PostTableModel
from .pagination_bar import PaginationBar


class PostsPage(QWidget):
    """Qt view bound to a :class:`PostListViewModel`.

    The content area shows exactly one of: a busy indicator while a fetch
    is running, the error text after a failed fetch, or the table.
    """

    backRequested = Signal()  # noqa: N815

    def __init__(self, view_model: PostListViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = view_model

        self._back_button = QPushButton("← Users", self)
        self._title = QLabel(f"Posts of user {view_model.owner_id}", self)
        self._search = QLineEdit(self)
        self._search.setPlaceholderText("Search")
        self._search.setClearButtonEnabled(True)

        self._model = PostTableModel(self)
        self._table = QTableView(self)
        self._table.setModel(self._model)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setWordWrap(True)
        self._table.verticalHeader().setVisible(False)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(PostColumn.TITLE, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(PostColumn.BODY, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(PostColumn.ACTION, QHeaderView.ResizeMode.ResizeToContents)

        self._empty = QLabel(NO_POSTS_MESSAGE, self)
        self._busy = QProgressBar(self)
        self._busy.setRange(0, 0)
        self._error = QLabel(self)

        self._content = QStackedWidget(self)
        self._content.addWidget(self._table)
        self._content.addWidget(self._empty)
        self._content.addWidget(self._busy)
        self._content.addWidget(self._error)

        self._pagination = PaginationBar(parent=self)
        self._scope_hint = QLabel("Search covers loaded pages only.", self)
        self._scope_hint.setVisible(False)

        top = QHBoxLayout()
        top.addWidget(self._back_button)
        top.addWidget(self._title, 1)
        top.addWidget(self._search)

        layout = QVBoxLayout(self)
        layout.addLayout(top)
        layout.addWidget(self._content, 1)
        layout.addWidget(self._pagination)
        layout.addWidget(self._scope_hint)

        self._back_button.clicked.connect(self.backRequested.emit)
        self._search.textChanged.connect(self._vm.set_search_text)
        self._table.clicked.connect(self._on_cell_clicked)
        self._pagination.pageRequested.connect(self._vm.change_page)
        self._pagination.pageSizeRequested.connect(self._vm.change_page_size)

        vm = self._vm
        self._release = observe(
            self._on_state_changed,
            vm.posts, vm.page, vm.page_size, vm.total_count, vm.loading, vm.error, vm.search_text,
        )
        self._render()

    @property
    def view_model(self) -> PostListViewModel:
        return self._vm

    def release(self) -> None:
        """Stop listening to the view model; call before discarding the page."""
        self._release()

    def _on_state_changed(self, *_args: Any) -> None:
        self._render()

    def _on_cell_clicked(self, index: QModelIndex) -> None:
        if index.column() != PostColumn.ACTION:
            return
        post = self._model.post_at(index.row())
        if post is not None:
            self._vm.delete_post(post.id)

    def _render(self) -> None:
        vm = self._vm
        self._model.set_posts(vm.posts.value)
        if vm.loading.value:
            self._content.setCurrentWidget(self._busy)
        elif vm.error.value:
            self._error.setText(vm.error.value)
            self._content.setCurrentWidget(self._error)
        elif not vm.posts.value:
            self._content.setCurrentWidget(self._empty)
        else:
            self._content.setCurrentWidget(self._table)
        showing_table = not vm.loading.value and not vm.error.value
        self._pagination.setVisible(showing_table and not vm.search_active)
        self._scope_hint.setVisible(showing_table and vm.search_active)
        self._pagination.set_state(vm.page.value, vm.page_size.value, vm.total_count.value)
