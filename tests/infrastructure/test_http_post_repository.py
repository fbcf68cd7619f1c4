"""HttpPostRepository against an httpx.MockTransport backend."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from postview.domain.models import PostQuery
from postview.errors import DeleteError, FetchError
from postview.events.bus import EventBus
from postview.gui.viewmodels.owner_list_viewmodel import OwnerListViewModel
from postview.gui.viewmodels.post_list_viewmodel import PostListViewModel
from postview.infrastructure.repositories import HttpPostRepository

BASE = "http://backend.test"

USERS = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "email": "Sincere@april.biz",
        "address": {"street": "Kulas Light", "suite": "Apt. 556", "city": "Gwenborough", "zipcode": "92998-3874"},
    },
    {"id": 2, "name": "Ervin Howell", "email": "Shanna@melissa.tv"},
]


def _repo(handler) -> HttpPostRepository:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpPostRepository(BASE, client=client)


class TestListOwners:
    def test_parses_users(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=USERS)

        owners = _repo(handler).list_owners()

        assert seen == [f"{BASE}/users"]
        assert [o.name for o in owners] == ["Leanne Graham", "Ervin Howell"]
        assert owners[0].address.one_line() == "Kulas Light, Apt. 556, Gwenborough, 92998-3874"
        assert owners[1].address.city == ""

    def test_non_list_payload(self):
        repo = _repo(lambda request: httpx.Response(200, json={"users": []}))
        with pytest.raises(FetchError):
            repo.list_owners()

    def test_server_error(self):
        repo = _repo(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(FetchError, match="fetch users"):
            repo.list_owners()


class TestListPosts:
    def test_query_parameters_and_parsing(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["path"] = request.url.path
            captured["params"] = dict(request.url.params)
            return httpx.Response(200, json={
                "posts": [
                    {"id": 5, "userId": 1, "title": "nesciunt quas odio", "body": "repudiandae"},
                    {"id": 6, "userId": 1, "title": "dolorem eum", "body": "ut aspernatur"},
                ],
                "totalPosts": 10,
            })

        page = _repo(handler).list_posts(PostQuery(owner_id=1, page=1, limit=4))

        assert captured == {"path": "/posts", "params": {"userId": "1", "page": "1", "limit": "4"}}
        assert [p.id for p in page.items] == [5, 6]
        assert page.items[0].owner_id == 1
        assert page.total_count == 10

    def test_missing_total_is_malformed(self):
        repo = _repo(lambda request: httpx.Response(200, json={"posts": []}))
        with pytest.raises(FetchError):
            repo.list_posts(PostQuery(owner_id=1))

    def test_invalid_json(self):
        repo = _repo(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(FetchError):
            repo.list_posts(PostQuery(owner_id=1))

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError):
            _repo(handler).list_posts(PostQuery(owner_id=1))


class TestDeletePost:
    def test_sends_post_id(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["postId"] = request.url.params["postId"]
            return httpx.Response(200, content=json.dumps({"message": "deleted"}).encode())

        _repo(handler).delete_post(12)

        assert captured == {"method": "DELETE", "path": "/posts/delete", "postId": "12"}

    def test_non_success_raises(self):
        repo = _repo(lambda request: httpx.Response(404))
        with pytest.raises(DeleteError, match="delete post 12"):
            repo.delete_post(12)


def test_trailing_slash_is_trimmed():
    repo = HttpPostRepository(f"{BASE}/")
    try:
        assert repo.base_url == BASE
    finally:
        repo.close()


class TestFailureLogging:
    """A backend failure shows up once in the log, from the layer that handles it."""

    @staticmethod
    def _errors(caplog):
        return [record for record in caplog.records if record.levelno >= logging.ERROR]

    def test_owner_fetch_failure(self, caplog):
        repo = _repo(lambda request: httpx.Response(500))
        vm = OwnerListViewModel(repo, EventBus())

        with caplog.at_level(logging.DEBUG, logger="postview"):
            vm.load()

        assert len(self._errors(caplog)) == 1

    def test_post_fetch_failure(self, caplog):
        repo = _repo(lambda request: httpx.Response(503))
        vm = PostListViewModel(repo, EventBus(), owner_id=1)

        with caplog.at_level(logging.DEBUG, logger="postview"):
            vm.mount()

        assert len(self._errors(caplog)) == 1

    def test_delete_failure(self, caplog):
        repo = _repo(lambda request: httpx.Response(404))
        vm = PostListViewModel(repo, EventBus(), owner_id=1)

        with caplog.at_level(logging.DEBUG, logger="postview"):
            vm.delete_post(12)

        assert len(self._errors(caplog)) == 1
