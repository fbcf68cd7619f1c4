"""In-process publish/subscribe bus for reconciliation notifications."""

import logging
import threading
import uuid
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Type


@dataclass(kw_only=True)
class Event:
    """Base event class."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Subscription:
    """Handle returned by subscribe(); cancel() stops further deliveries."""
    event_type: Type[Event]
    handler: Callable[[Event], None]
    background: bool = False
    active: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Deliver events to subscribers of their exact type.

    Foreground handlers run inline inside :meth:`publish`, in subscription
    order.  Background handlers go to a small thread pool that is created on
    first use.  A failing handler is logged and never reaches the publisher.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_workers: int = 2):
        self._logger = logger or logging.getLogger(__name__)
        self._subscriptions: Dict[Type[Event], List[Subscription]] = defaultdict(list)
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    def subscribe(self, event_type: Type[Event], handler: Callable, async_: bool = False) -> Subscription:
        sub = Subscription(event_type=event_type, handler=handler, background=async_)
        with self._lock:
            self._subscriptions[event_type].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.cancel()
        with self._lock:
            subs = self._subscriptions.get(subscription.event_type, [])
            if subscription in subs:
                subs.remove(subscription)

    def subscriber_count(self, event_type: Type[Event]) -> int:
        with self._lock:
            return sum(1 for sub in self._subscriptions.get(event_type, []) if sub.active)

    def publish(self, event: Event) -> None:
        with self._lock:
            subs = [sub for sub in self._subscriptions.get(type(event), []) if sub.active]
        for sub in subs:
            if sub.background:
                self._pool().submit(self._deliver, sub, event)
            else:
                self._deliver(sub, event)

    def _deliver(self, sub: Subscription, event: Event) -> None:
        if not sub.active:
            return
        try:
            sub.handler(event)
        except Exception:
            self._logger.exception("Handler for %s failed", type(event).__name__)

    def _pool(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers, thread_name_prefix="postview-events",
                )
            return self._executor

    def shutdown(self) -> None:
        """Wait for background deliveries, then release the pool."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
