"""Accumulated client-side state for one mounted posts view.

``PostCacheState`` is created empty when a posts view opens for an owner and
thrown away when the view closes or switches owner.  The reconciler, the
paginator and the deletion coordinator all receive the *same* instance, so
the cache survives any number of re-renders.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from postview.domain.models import Post

LOGGER = logging.getLogger(__name__)


@dataclass
class PostCacheState:
    """PageCache, DeletedSet and TotalCount for a single owner.

    Invariant: no key of :attr:`posts` is ever a member of :attr:`deleted_ids`.
    """

    owner_id: int
    posts: Dict[int, Post] = field(default_factory=dict)
    deleted_ids: Set[int] = field(default_factory=set)
    # ``None`` until the first fetch succeeds.
    total_count: Optional[int] = None
    epoch: int = 0
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    # -- reconciliation ----------------------------------------------------

    def merge(self, items: Iterable[Post], total_count: Optional[int]) -> List[int]:
        """Insert unseen, non-deleted posts and adopt the server total.

        Returns the ids that were actually inserted.  Posts already in the
        cache are left as they are (first write wins).  A ``None`` total
        keeps the current one.
        """
        merged: List[int] = []
        with self._lock:
            for post in items:
                if post.id in self.posts or post.id in self.deleted_ids:
                    continue
                self.posts[post.id] = post
                merged.append(post.id)
            if total_count is not None:
                self.total_count = total_count
        return merged

    def tombstone(self, post_id: int) -> None:
        """Drop *post_id* for good and account for it in the total."""
        with self._lock:
            self.posts.pop(post_id, None)
            self.deleted_ids.add(post_id)
            if self.total_count is not None:
                self.total_count = max(0, self.total_count - 1)

    # -- request epochs ----------------------------------------------------

    def next_epoch(self) -> int:
        with self._lock:
            self.epoch += 1
            return self.epoch

    def is_current(self, epoch: int) -> bool:
        with self._lock:
            return epoch == self.epoch

    # -- views -------------------------------------------------------------

    def live_posts(self) -> List[Post]:
        """Cached posts in discovery order, tombstones excluded."""
        with self._lock:
            return [post for post in self.posts.values() if post.id not in self.deleted_ids]

    def is_deleted(self, post_id: int) -> bool:
        return post_id in self.deleted_ids

    @property
    def has_fetched(self) -> bool:
        return self.total_count is not None

    def __len__(self) -> int:
        return len(self.posts)
