"""How view models execute blocking repository calls."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from postview.errors import PostViewError


class RequestRunner(Protocol):
    """Run *call* and report back through exactly one of the callbacks.

    Implementations must invoke the callbacks on the thread that owns the
    view models, so completion handlers never race each other.
    Only :class:`PostViewError` is routed to *on_failure*; anything else is a
    programming error and propagates.
    """

    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[PostViewError], None],
    ) -> None: ...


class SynchronousRunner:
    """Complete every request inline on the calling thread."""

    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[PostViewError], None],
    ) -> None:
        try:
            result = call()
        except PostViewError as exc:
            on_failure(exc)
            return
        on_success(result)
