from .owners_page import OwnersPage
from .pagination_bar import PaginationBar
from .posts_page import PostsPage

__all__ = ["OwnersPage", "PaginationBar", "PostsPage"]
