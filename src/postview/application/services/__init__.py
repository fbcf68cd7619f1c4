from .deletion_coordinator import DeletionCoordinator, decide_rebalance
from .owner_sorter import OwnerSorter
from .paginator import Paginator, page_count, window
from .post_cache import PostCacheState
from .reconciler import PageReconciler
from .search_filter import filter_posts, matches_title

__all__ = [
    "DeletionCoordinator",
    "OwnerSorter",
    "PageReconciler",
    "Paginator",
    "PostCacheState",
    "decide_rebalance",
    "filter_posts",
    "matches_title",
    "page_count",
    "window",
]
