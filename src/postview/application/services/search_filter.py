"""Title search over posts that are already cached."""

from __future__ import annotations

from typing import List, Sequence

from postview.domain.models import Post


def matches_title(post: Post, query: str) -> bool:
    return query.lower() in post.title.lower()


def filter_posts(posts: Sequence[Post], query: str) -> List[Post]:
    """Case-insensitive substring match on ``title``.

    An empty query returns *posts* unchanged.  Only cached posts can match;
    pages that were never fetched are invisible to the search.
    """
    if not query:
        return list(posts)
    return [post for post in posts if matches_title(post, query)]
