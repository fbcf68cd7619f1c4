"""Widget behaviour of the owners and posts pages (offscreen)."""

from __future__ import annotations

import os
import time
from unittest.mock import Mock

import pytest

pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from conftest import DeferredRunner, make_posts
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from postview.config import FETCH_POSTS_ERROR_MESSAGE
from postview.errors import FetchError
from postview.gui.ui.models.post_table_model import PostColumn
from postview.gui.ui.tasks.request_worker import QtRequestRunner
from postview.gui.ui.widgets import OwnersPage, PostsPage
from postview.gui.viewmodels.owner_list_viewmodel import OwnerListViewModel
from postview.gui.viewmodels.post_list_viewmodel import PostListViewModel


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def _wait_until(predicate, timeout: float = 3.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestPostsPage:
    def test_table_after_mount(self, qapp, repository, event_bus) -> None:
        vm = PostListViewModel(repository, event_bus, owner_id=1)
        page = PostsPage(vm)
        vm.mount()

        assert page._content.currentWidget() is page._table
        assert page._model.rowCount() == 4
        assert page._pagination.range_text() == "1–4 of 10"

    def test_busy_then_error(self, qapp, event_bus) -> None:
        repo = Mock()
        repo.list_posts = Mock(side_effect=FetchError("down"))
        runner = DeferredRunner()
        vm = PostListViewModel(repo, event_bus, owner_id=1, runner=runner)
        page = PostsPage(vm)

        vm.mount()
        assert page._content.currentWidget() is page._busy

        runner.run_all()
        assert page._content.currentWidget() is page._error
        assert page._error.text() == FETCH_POSTS_ERROR_MESSAGE

    def test_action_column_click_deletes(self, qapp, repository, event_bus) -> None:
        vm = PostListViewModel(repository, event_bus, owner_id=1)
        page = PostsPage(vm)
        vm.mount()

        page._on_cell_clicked(page._model.index(1, PostColumn.TITLE))
        assert page._model.rowCount() == 4

        page._on_cell_clicked(page._model.index(1, PostColumn.ACTION))

        assert [page._model.post_at(row).id for row in range(page._model.rowCount())] == [1, 3, 4]
        assert page._pagination.range_text() == "1–4 of 9"

    def test_search_hides_pagination(self, qapp, repository, event_bus) -> None:
        vm = PostListViewModel(repository, event_bus, owner_id=1)
        page = PostsPage(vm)
        vm.mount()

        page._search.setText("post 3")

        assert vm.search_text.value == "post 3"
        assert page._pagination.isHidden()
        assert not page._scope_hint.isHidden()
        assert page._model.rowCount() == 1

    def test_empty_owner(self, qapp, repository, event_bus) -> None:
        vm = PostListViewModel(repository, event_bus, owner_id=42)
        page = PostsPage(vm)
        vm.mount()
        assert page._content.currentWidget() is page._empty

    def test_release_stops_rendering(self, qapp, repository, event_bus) -> None:
        vm = PostListViewModel(repository, event_bus, owner_id=1)
        page = PostsPage(vm)
        page.release()

        vm.mount()

        assert page._model.rowCount() == 0


class TestOwnersPage:
    def test_header_click_sorts(self, qapp, repository, event_bus) -> None:
        vm = OwnerListViewModel(repository, event_bus)
        page = OwnersPage(vm)
        vm.load()
        assert page._model.owner_at(0).name == "Ervin Howell"

        page._on_header_clicked(0)

        assert page._model.owner_at(0).name == "Leanne Graham"
        assert page._model.headerData(0, Qt.Orientation.Horizontal) == "Name ▼"

    def test_row_activation_emits_owner_id(self, qapp, repository, event_bus) -> None:
        vm = OwnerListViewModel(repository, event_bus)
        page = OwnersPage(vm)
        vm.load()
        opened = []
        page.ownerActivated.connect(opened.append)

        page._on_row_activated(page._model.index(1, 0))

        assert opened == [1]

    def test_loading_before_first_response(self, qapp, repository, event_bus) -> None:
        page = OwnersPage(OwnerListViewModel(repository, event_bus))
        assert page._content.currentWidget() is page._busy


def test_qt_runner_completes_on_gui_thread(qapp) -> None:
    runner = QtRequestRunner()
    results, errors = [], []

    runner.submit(lambda: make_posts(2), results.append, errors.append)
    assert _wait_until(lambda: not runner.is_busy())

    def broken():
        raise FetchError("offline")

    runner.submit(broken, results.append, errors.append)
    assert _wait_until(lambda: not runner.is_busy())

    assert len(results) == 1 and len(results[0]) == 2
    assert isinstance(errors[0], FetchError)
