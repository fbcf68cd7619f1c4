from .bus import Event, EventBus, Subscription
from .post_events import OwnersLoadedEvent, PageFetchedEvent, PostDeletedEvent

__all__ = [
    "Event",
    "EventBus",
    "OwnersLoadedEvent",
    "PageFetchedEvent",
    "PostDeletedEvent",
    "Subscription",
]
