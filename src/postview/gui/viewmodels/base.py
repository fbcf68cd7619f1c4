"""BaseViewModel: event bus access and teardown shared by all view models."""

from __future__ import annotations

from typing import Callable, Optional, Type

from postview.events.bus import Event, EventBus, Subscription


class BaseViewModel:
    """Owns the bus subscriptions of one view model.

    After :meth:`dispose` the view model neither publishes nor receives
    events, and subclasses drop late request completions by checking
    :attr:`disposed`.
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._event_bus = event_bus
        self._subscriptions: list[Subscription] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def event_bus(self) -> Optional[EventBus]:
        return self._event_bus

    def publish(self, event: Event) -> None:
        if self._disposed or self._event_bus is None:
            return
        self._event_bus.publish(event)

    def subscribe_event(self, event_type: Type[Event], handler: Callable) -> Subscription:
        if self._event_bus is None:
            raise RuntimeError(f"{type(self).__name__} has no event bus")
        sub = self._event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def dispose(self) -> None:
        for sub in self._subscriptions:
            if self._event_bus is not None:
                self._event_bus.unsubscribe(sub)
            else:
                sub.cancel()
        self._subscriptions.clear()
        self._disposed = True
