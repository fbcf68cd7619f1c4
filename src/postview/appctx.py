"""Application-wide context shared by the CLI and the GUI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .errors.handler import ErrorHandler
from .events.bus import EventBus
from .utils.console_logger import level_from_name

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .domain.repositories import IPostRepository
    from .gui.viewmodels.runner import RequestRunner
    from .settings.manager import SettingsManager


def _create_settings_manager() -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager()
    manager.load()
    return manager


@dataclass
class AppContext:
    """Container object wiring settings, events and the repository.

    ``repository`` is built lazily from the settings unless one is supplied,
    so tests and demo mode can inject an in-memory repository.
    """

    settings: "SettingsManager" = field(default_factory=_create_settings_manager)
    event_bus: EventBus = field(default_factory=EventBus)
    repository: Optional["IPostRepository"] = None
    base_url: Optional[str] = None
    error_handler: ErrorHandler = field(init=False)

    def __post_init__(self) -> None:
        self.error_handler = ErrorHandler(logging.getLogger("postview"), self.event_bus)
        if self.repository is None:
            from .infrastructure.repositories import HttpPostRepository

            self.repository = HttpPostRepository(
                self.base_url or self.settings.get("api.base_url"),
                timeout=self.settings.get("api.timeout"),
            )

    @property
    def page_size(self) -> int:
        return int(self.settings.get("ui.page_size"))

    @property
    def discard_stale_fetches(self) -> bool:
        return bool(self.settings.get("consistency.discard_stale_fetches", True))

    @property
    def log_level(self) -> int:
        return level_from_name(self.settings.get("logging.level", "WARNING"))

    def create_post_list(self, owner_id: int, runner: Optional["RequestRunner"] = None):
        from .gui.viewmodels.post_list_viewmodel import PostListViewModel

        return PostListViewModel(
            self.repository,
            self.event_bus,
            owner_id,
            page_size=self.page_size,
            runner=runner,
            error_handler=self.error_handler,
            discard_stale=self.discard_stale_fetches,
        )

    def create_owner_list(self, runner: Optional["RequestRunner"] = None):
        from .domain.models import OwnerSortKey
        from .gui.viewmodels.owner_list_viewmodel import OwnerListViewModel

        return OwnerListViewModel(
            self.repository,
            self.event_bus,
            page_size=self.page_size,
            sort_key=OwnerSortKey(self.settings.get("ui.owner_sort_key", "name")),
            runner=runner,
        )

    def close(self) -> None:
        close = getattr(self.repository, "close", None)
        if callable(close):
            close()
        self.event_bus.shutdown()
