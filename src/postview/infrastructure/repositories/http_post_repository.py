"""``IPostRepository`` backed by the JSON HTTP backend."""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from ...config import (
    DEFAULT_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    DELETE_POST_ENDPOINT,
    POSTS_ENDPOINT,
    USERS_ENDPOINT,
)
from ...domain.models import Owner, Post, PostPage, PostQuery
from ...domain.repositories import IPostRepository
from ...errors import DeleteError, FetchError


class HttpPostRepository(IPostRepository):
    """Talk to the backend with a shared :class:`httpx.Client`.

    Every request is single-shot: no retries, and no timeout unless one is
    configured.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=self._base_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def list_owners(self) -> List[Owner]:
        payload = self._get_json(USERS_ENDPOINT, what="users")
        if not isinstance(payload, list):
            raise FetchError("Malformed users payload: expected a list")
        try:
            return [Owner.from_payload(entry) for entry in payload]
        except (KeyError, TypeError, ValueError) as exc:
            raise FetchError(f"Malformed user entry: {exc}") from exc

    def list_posts(self, query: PostQuery) -> PostPage:
        params = {"userId": query.owner_id, "page": query.page, "limit": query.limit}
        payload = self._get_json(POSTS_ENDPOINT, what="user posts", params=params)
        try:
            items = [Post.from_payload(entry) for entry in payload["posts"]]
            total = int(payload["totalPosts"])
        except (KeyError, TypeError, ValueError) as exc:
            raise FetchError(f"Malformed posts payload: {exc}") from exc
        return PostPage(items=items, total_count=total)

    def delete_post(self, post_id: int) -> None:
        try:
            response = self._client.delete(self._url(DELETE_POST_ENDPOINT), params={"postId": post_id})
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DeleteError(f"Failed to delete post {post_id}: {exc}") from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpPostRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    def _get_json(self, endpoint: str, *, what: str, params: Optional[dict] = None) -> Any:
        try:
            response = self._client.get(self._url(endpoint), params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {what}: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"Invalid JSON while fetching {what}: {exc}") from exc
