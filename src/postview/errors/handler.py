"""Central sink for failures that are logged rather than raised."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from ..events.bus import Event, EventBus


class ErrorSeverity(Enum):
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


UiCallback = Callable[[str, ErrorSeverity], None]


class ErrorHandler:
    """Log an error, announce it on the bus and optionally tell the UI.

    The UI callback only hears about ``ERROR`` and ``CRITICAL``; the window
    decides which of those it actually shows.
    """

    def __init__(self, logger: logging.Logger, event_bus: EventBus):
        self._logger = logger
        self._events = event_bus
        self._ui_callback: Optional[UiCallback] = None

    def register_ui_callback(self, callback: Optional[UiCallback]) -> None:
        self._ui_callback = callback

    def handle(
        self,
        error: Exception,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[dict] = None,
    ) -> ErrorOccurredEvent:
        context = dict(context or {})
        details = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        self._logger.log(
            severity.value, "%s: %s%s", type(error).__name__, error, f" [{details}]" if details else "",
        )

        event = ErrorOccurredEvent(error=error, severity=severity, context=context)
        self._events.publish(event)

        if self._ui_callback is not None and severity.value >= logging.ERROR:
            self._ui_callback(str(error), severity)
        return event
