"""Observer primitives shared by the view models, the widgets and the CLI.

Nothing here imports Qt: the Qt widgets subscribe to the same signals the
tests and the command line do.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

_logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class Signal:
    """Ordered list of callbacks with Qt-like ``connect``/``emit``.

    Emission works on a snapshot of the handlers, so a handler may connect
    or disconnect others while it runs.  A handler that raises is logged and
    the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: list[Handler] = []
        self._lock = threading.Lock()

    def connect(self, handler: Handler) -> None:
        with self._lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def disconnect(self, handler: Handler) -> None:
        """Remove *handler*; raises ``ValueError`` if it was never connected."""
        with self._lock:
            self._handlers.remove(handler)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            snapshot = tuple(self._handlers)
        for handler in snapshot:
            try:
                handler(*args, **kwargs)
            except Exception:
                _logger.exception("Signal handler %r failed", handler)

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._handlers)


class ObservableProperty:
    """A value that emits ``changed(new_value, old_value)`` when it differs."""

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value == new_value:
            return
        old_value, self._value = self._value, new_value
        self.changed.emit(new_value, old_value)


def observe(handler: Handler, *properties: ObservableProperty) -> Callable[[], None]:
    """Connect *handler* to every property's ``changed`` signal.

    Returns a callable that disconnects it again from all of them.
    """
    for prop in properties:
        prop.changed.connect(handler)

    def release() -> None:
        for prop in properties:
            try:
                prop.changed.disconnect(handler)
            except ValueError:
                pass  # already released

    return release
