"""Default configuration values for postview."""

from __future__ import annotations

from typing import Final

# The backend the viewer was built against serves on this address during
# development.  Settings and the ``--base-url`` CLI option override it.
DEFAULT_BASE_URL: Final[str] = "http://localhost:3001"

USERS_ENDPOINT: Final[str] = "/users"
POSTS_ENDPOINT: Final[str] = "/posts"
DELETE_POST_ENDPOINT: Final[str] = "/posts/delete"

# ``None`` disables request timeouts; a hung request keeps the view loading.
DEFAULT_REQUEST_TIMEOUT: Final[float | None] = None

DEFAULT_PAGE_SIZE: Final[int] = 4
PAGE_SIZE_OPTIONS: Final[tuple[int, ...]] = (4, 8, 12)

FETCH_POSTS_ERROR_MESSAGE: Final[str] = "Error fetching posts"
FETCH_OWNERS_ERROR_MESSAGE: Final[str] = "Error fetching users. Please try again."
NO_POSTS_MESSAGE: Final[str] = "Posts were not found"
NO_OWNERS_MESSAGE: Final[str] = "No users found."

DEMO_OWNER_COUNT: Final[int] = 10
DEMO_POSTS_PER_OWNER: Final[int] = 10
