from abc import ABC, abstractmethod
from typing import List

from .models import Owner, PostPage, PostQuery


class IPostRepository(ABC):
    """Remote source of owners and their posts.

    Implementations raise :class:`postview.errors.FetchError` when a listing
    fails and :class:`postview.errors.DeleteError` when a delete fails.
    """

    @abstractmethod
    def list_owners(self) -> List[Owner]:
        """Return every owner."""
        pass

    @abstractmethod
    def list_posts(self, query: PostQuery) -> PostPage:
        """Return one page of posts for ``query.owner_id``."""
        pass

    @abstractmethod
    def delete_post(self, post_id: int) -> None:
        """Delete a single post by id."""
        pass
