"""Tests for PageReconciler.fetch_page and its split begin/complete path."""

from __future__ import annotations

from unittest.mock import Mock

from conftest import make_post, make_posts

from postview.application.dtos import ErrorKind
from postview.application.services.post_cache import PostCacheState
from postview.application.services.reconciler import PageReconciler
from postview.config import FETCH_POSTS_ERROR_MESSAGE
from postview.domain.models import PostPage
from postview.errors import FetchError


def _reconciler(repository, owner_id=1, **kwargs):
    state = PostCacheState(owner_id=owner_id)
    return PageReconciler(repository, state, **kwargs), state


class TestFetchPage:
    def test_fetch_first_page(self, repository):
        reconciler, state = _reconciler(repository)

        outcome = reconciler.fetch_page(0, 4)

        assert outcome.ok
        assert outcome.merged_ids == [1, 2, 3, 4]
        assert outcome.total_count == 10
        assert list(state.posts) == [1, 2, 3, 4]
        assert repository.requests[-1] == ("posts", 1, 0, 4)

    def test_pages_accumulate(self, repository):
        reconciler, state = _reconciler(repository)

        reconciler.fetch_page(0, 4)
        reconciler.fetch_page(1, 4)

        assert list(state.posts) == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_scoped_to_owner(self, repository):
        reconciler, state = _reconciler(repository, owner_id=2)

        reconciler.fetch_page(0, 4)

        assert list(state.posts) == [101, 102, 103]
        assert state.total_count == 3

    def test_refetch_does_not_overwrite(self, repository):
        reconciler, state = _reconciler(repository)
        reconciler.fetch_page(0, 4)
        repository.replace_post(make_post(1, title="changed remotely"))

        outcome = reconciler.fetch_page(0, 4)

        assert outcome.merged_ids == []
        assert state.posts[1].title == "Post 1"

    def test_failure_leaves_state_untouched(self):
        repo = Mock()
        repo.list_posts = Mock(side_effect=[PostPage(items=make_posts(4), total_count=10),
                                            FetchError("boom")])
        reconciler, state = _reconciler(repo)
        reconciler.fetch_page(0, 4)
        state.tombstone(2)
        snapshot = (dict(state.posts), set(state.deleted_ids), state.total_count)

        outcome = reconciler.fetch_page(1, 4)

        assert not outcome.ok
        assert outcome.error_kind is ErrorKind.FETCH
        assert outcome.message == FETCH_POSTS_ERROR_MESSAGE
        assert (dict(state.posts), set(state.deleted_ids), state.total_count) == snapshot


class TestStaleCompletions:
    def test_stale_completion_merges_posts_but_keeps_total(self):
        repo = Mock()
        reconciler, state = _reconciler(repo)
        old_epoch = reconciler.begin()
        new_epoch = reconciler.begin()

        reconciler.complete(new_epoch, 1, 4, PostPage(items=make_posts(4, start=5), total_count=10))
        outcome = reconciler.complete(old_epoch, 0, 4, PostPage(items=make_posts(4), total_count=11))

        assert outcome.stale
        assert outcome.merged_ids == [1, 2, 3, 4]
        assert list(state.posts) == [5, 6, 7, 8, 1, 2, 3, 4]
        assert state.total_count == 10
        assert outcome.total_count == 10

    def test_stale_completion_arriving_first_is_kept_in_order(self):
        reconciler, state = _reconciler(Mock())
        old_epoch = reconciler.begin()
        new_epoch = reconciler.begin()

        outcome = reconciler.complete(old_epoch, 0, 4, PostPage(items=make_posts(4), total_count=11))
        reconciler.complete(new_epoch, 1, 4, PostPage(items=make_posts(4, start=5), total_count=10))

        assert outcome.stale
        assert outcome.total_count == 11
        assert list(state.posts) == [1, 2, 3, 4, 5, 6, 7, 8]
        assert state.total_count == 10

    def test_stale_completion_skips_tombstoned_posts(self):
        reconciler, state = _reconciler(Mock())
        old_epoch = reconciler.begin()
        new_epoch = reconciler.begin()
        reconciler.complete(new_epoch, 0, 4, PostPage(items=make_posts(4), total_count=10))
        state.tombstone(3)

        reconciler.complete(old_epoch, 0, 4, PostPage(items=make_posts(4), total_count=10))

        assert list(state.posts) == [1, 2, 4]
        assert state.total_count == 9

    def test_last_completion_wins_when_guard_disabled(self):
        repo = Mock()
        reconciler, state = _reconciler(repo, discard_stale=False)
        old_epoch = reconciler.begin()
        new_epoch = reconciler.begin()

        reconciler.complete(new_epoch, 1, 4, PostPage(items=make_posts(4, start=5), total_count=10))
        outcome = reconciler.complete(old_epoch, 0, 4, PostPage(items=make_posts(4), total_count=11))

        assert not outcome.stale
        assert list(state.posts) == [5, 6, 7, 8, 1, 2, 3, 4]
        assert state.total_count == 11

    def test_stale_failure_is_flagged(self):
        reconciler, _ = _reconciler(Mock())
        old_epoch = reconciler.begin()
        reconciler.begin()

        outcome = reconciler.fail(old_epoch, 0, 4, FetchError("late"))

        assert outcome.stale
        assert not outcome.ok
