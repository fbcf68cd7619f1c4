from .http_post_repository import HttpPostRepository
from .memory_post_repository import InMemoryPostRepository

__all__ = ["HttpPostRepository", "InMemoryPostRepository"]
