"""Run repository calls on the Qt thread pool and finish on the GUI thread."""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from ....errors import ApplicationError, PostViewError

LOGGER = logging.getLogger(__name__)


class _RequestSignals(QObject):
    succeeded = Signal(int, object)
    failed = Signal(int, object)


class _RequestWorker(QRunnable):
    def __init__(self, token: int, call: Callable[[], Any], signals: _RequestSignals) -> None:
        super().__init__()
        self._token = token
        self._call = call
        self._signals = signals

    def run(self) -> None:
        try:
            result = self._call()
        except PostViewError as exc:
            self._signals.failed.emit(self._token, exc)
            return
        except Exception as exc:  # noqa: BLE001 - worker thread boundary
            LOGGER.exception("Request %s crashed", self._token)
            self._signals.failed.emit(self._token, ApplicationError(str(exc)))
            return
        self._signals.succeeded.emit(self._token, result)


class QtRequestRunner(QObject):
    """``RequestRunner`` that executes calls on a :class:`QThreadPool`.

    The runner must be created on the GUI thread.  Worker results travel back
    through queued signals, so every completion callback runs on the GUI
    thread, one at a time.
    """

    def __init__(self, pool: Optional[QThreadPool] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._signals = _RequestSignals(self)
        self._signals.succeeded.connect(self._on_succeeded)
        self._signals.failed.connect(self._on_failed)
        self._tokens = itertools.count(1)
        self._pending: Dict[int, Tuple[Callable[[Any], None], Callable[[PostViewError], None]]] = {}

    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[PostViewError], None],
    ) -> None:
        token = next(self._tokens)
        self._pending[token] = (on_success, on_failure)
        self._pool.start(_RequestWorker(token, call, self._signals))

    def is_busy(self) -> bool:
        return bool(self._pending)

    @Slot(int, object)
    def _on_succeeded(self, token: int, result: object) -> None:
        callbacks = self._pending.pop(token, None)
        if callbacks is not None:
            callbacks[0](result)

    @Slot(int, object)
    def _on_failed(self, token: int, error: object) -> None:
        callbacks = self._pending.pop(token, None)
        if callbacks is not None:
            callbacks[1](error)
