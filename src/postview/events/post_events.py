from dataclasses import dataclass, field

from .bus import Event


@dataclass(kw_only=True)
class OwnersLoadedEvent(Event):
    owner_count: int = 0


@dataclass(kw_only=True)
class PageFetchedEvent(Event):
    owner_id: int = 0
    page: int = 0
    page_size: int = 0
    merged_ids: list[int] = field(default_factory=list)
    total_count: int = 0


@dataclass(kw_only=True)
class PostDeletedEvent(Event):
    owner_id: int = 0
    post_id: int = 0
    total_count: int = 0
