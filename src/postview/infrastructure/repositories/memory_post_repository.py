"""In-process repository used by demo mode and the test-suite."""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from ...config import DEMO_OWNER_COUNT, DEMO_POSTS_PER_OWNER
from ...domain.models import Address, Owner, Post, PostPage, PostQuery
from ...domain.repositories import IPostRepository
from ...errors import DeleteError


class InMemoryPostRepository(IPostRepository):
    """Serve owners and posts from memory with the backend's paging rules.

    Page ``p`` of an owner holds that owner's live posts at positions
    ``[p*limit, p*limit + limit)``; deleting a post shifts later posts
    forward exactly like the real backend.
    """

    def __init__(self, owners: Iterable[Owner] = (), posts: Iterable[Post] = ()) -> None:
        self._owners: List[Owner] = list(owners)
        self._posts: List[Post] = list(posts)
        self._lock = threading.Lock()
        self.requests: List[tuple] = []

    @classmethod
    def with_demo_data(
        cls,
        owner_count: int = DEMO_OWNER_COUNT,
        posts_per_owner: int = DEMO_POSTS_PER_OWNER,
    ) -> InMemoryPostRepository:
        owners = [_demo_owner(index) for index in range(1, owner_count + 1)]
        posts = [
            Post(
                id=(owner.id - 1) * posts_per_owner + n,
                title=f"{owner.name.split()[0]}'s post #{n}",
                body=f"Body of post {n} written by {owner.name}.",
                owner_id=owner.id,
            )
            for owner in owners
            for n in range(1, posts_per_owner + 1)
        ]
        return cls(owners, posts)

    def list_owners(self) -> List[Owner]:
        with self._lock:
            self.requests.append(("owners",))
            return list(self._owners)

    def list_posts(self, query: PostQuery) -> PostPage:
        with self._lock:
            self.requests.append(("posts", query.owner_id, query.page, query.limit))
            owned = [post for post in self._posts if post.owner_id == query.owner_id]
            items = owned[query.offset:query.offset + query.limit]
            return PostPage(items=items, total_count=len(owned))

    def delete_post(self, post_id: int) -> None:
        with self._lock:
            self.requests.append(("delete", post_id))
            index = self._index_of(post_id)
            if index is None:
                raise DeleteError(f"Post {post_id} does not exist")
            del self._posts[index]

    def replace_post(self, post: Post) -> None:
        """Swap the stored copy of *post*, simulating a server-side edit."""
        with self._lock:
            index = self._index_of(post.id)
            if index is None:
                self._posts.append(post)
            else:
                self._posts[index] = post

    def _index_of(self, post_id: int) -> Optional[int]:
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                return index
        return None


_DEMO_NAMES = (
    "Leanne Graham", "Ervin Howell", "Clementine Bauch", "Patricia Lebsack",
    "Chelsey Dietrich", "Dennis Schulist", "Kurtis Weissnat", "Nicholas Runolfsdottir",
    "Glenna Reichert", "Clementina DuBuque",
)


def _demo_owner(index: int) -> Owner:
    name = _DEMO_NAMES[(index - 1) % len(_DEMO_NAMES)]
    handle = name.split()[0].lower()
    return Owner(
        id=index,
        name=name,
        email=f"{handle}{index}@example.org",
        address=Address(
            street=f"{100 + index} Main Street",
            suite=f"Apt. {index}",
            city="Springfield",
            zipcode=f"{10000 + index}",
        ),
    )
