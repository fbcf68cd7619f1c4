from dataclasses import dataclass
from enum import Enum

from ...config import DEFAULT_PAGE_SIZE


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


class OwnerSortKey(str, Enum):
    NAME = "name"
    EMAIL = "email"


@dataclass
class PostQuery:
    """Posts of one owner, addressed by zero-based page and page size."""

    owner_id: int
    page: int = 0
    limit: int = DEFAULT_PAGE_SIZE

    def paginate(self, page: int, page_size: int):
        if page < 0:
            raise ValueError(f"page must be >= 0, got {page}")
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        self.page = page
        self.limit = page_size
        return self

    @property
    def offset(self) -> int:
        return self.page * self.limit
