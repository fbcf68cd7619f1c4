from .core import Address, Owner, Post, PostPage
from .query import OwnerSortKey, PostQuery, SortOrder

__all__ = [
    "Address",
    "Owner",
    "OwnerSortKey",
    "Post",
    "PostPage",
    "PostQuery",
    "SortOrder",
]
