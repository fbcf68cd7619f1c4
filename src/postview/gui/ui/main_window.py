"""Main window routing between the owners page and a posts page."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QMessageBox, QStackedWidget, QWidget

from ...appctx import AppContext
from ...errors.handler import ErrorSeverity
from ..viewmodels.post_list_viewmodel import PostListViewModel
from .tasks.request_worker import QtRequestRunner
from .widgets.owners_page import OwnersPage
from .widgets.posts_page import PostsPage

LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Hosts the owners page and at most one posts page at a time.

    Opening another owner discards the previous posts page together with its
    cache, so nothing is reused across owners.
    """

    def __init__(self, context: AppContext, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._context = context
        self._runner = QtRequestRunner(parent=self)
        self.setWindowTitle("Posts Viewer")
        self.resize(960, 640)

        self._stack = QStackedWidget(self)
        self.setCentralWidget(self._stack)

        self._owners_vm = context.create_owner_list(self._runner)
        self._owners_page = OwnersPage(self._owners_vm, self)
        self._owners_page.ownerActivated.connect(self.open_owner)
        self._stack.addWidget(self._owners_page)

        self._posts_page: Optional[PostsPage] = None
        context.error_handler.register_ui_callback(self._on_error)

    @property
    def posts_page(self) -> Optional[PostsPage]:
        return self._posts_page

    @property
    def owners_page(self) -> OwnersPage:
        return self._owners_page

    def start(self) -> None:
        self._owners_vm.load()

    def open_owner(self, owner_id: int) -> None:
        self._close_posts_page()
        vm: PostListViewModel = self._context.create_post_list(owner_id, self._runner)
        page = PostsPage(vm, self)
        page.backRequested.connect(self.show_owners)
        self._posts_page = page
        self._stack.addWidget(page)
        self._stack.setCurrentWidget(page)
        vm.mount()

    def show_owners(self) -> None:
        self._close_posts_page()
        self._stack.setCurrentWidget(self._owners_page)

    def closeEvent(self, event) -> None:  # noqa: N802  # Qt override
        self._close_posts_page()
        self._owners_page.release()
        self._owners_vm.dispose()
        super().closeEvent(event)

    def _close_posts_page(self) -> None:
        if self._posts_page is None:
            return
        page, self._posts_page = self._posts_page, None
        page.release()
        page.view_model.dispose()
        self._stack.removeWidget(page)
        page.deleteLater()

    def _on_error(self, message: str, severity: ErrorSeverity) -> None:
        # Delete failures stay off screen; only critical errors interrupt.
        if severity is ErrorSeverity.CRITICAL:
            QMessageBox.critical(self, "Error", message)
        else:
            LOGGER.debug("Suppressed UI error notification: %s", message)
