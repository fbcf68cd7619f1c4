import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the sources importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from postview.domain.models import Address, Owner, Post  # noqa: E402
from postview.events.bus import EventBus  # noqa: E402
from postview.gui.viewmodels.runner import SynchronousRunner  # noqa: E402
from postview.infrastructure.repositories import InMemoryPostRepository  # noqa: E402


class DeferredRunner:
    """Queue requests until :meth:`run_next` is called.

    Lets a test choose the order in which in-flight requests complete.
    """

    def __init__(self) -> None:
        self._pending = []

    def submit(self, call, on_success, on_failure) -> None:
        self._pending.append((call, on_success, on_failure))

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_next(self, index: int = 0) -> None:
        call, on_success, on_failure = self._pending.pop(index)
        SynchronousRunner().submit(call, on_success, on_failure)

    def run_all(self) -> None:
        while self._pending:
            self.run_next()


def make_post(post_id: int, owner_id: int = 1, title: str | None = None) -> Post:
    return Post(
        id=post_id,
        title=title if title is not None else f"Post {post_id}",
        body=f"Body {post_id}",
        owner_id=owner_id,
    )


def make_posts(count: int, owner_id: int = 1, start: int = 1) -> list[Post]:
    return [make_post(i, owner_id) for i in range(start, start + count)]


def make_owner(owner_id: int, name: str, email: str) -> Owner:
    return Owner(
        id=owner_id,
        name=name,
        email=email,
        address=Address(street="Kulas Light", suite="Apt. 556", city="Gwenborough", zipcode="92998"),
    )


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real user settings file."""
    monkeypatch.setenv("POSTVIEW_SETTINGS", str(tmp_path / "settings.json"))


@pytest.fixture()
def event_bus():
    bus = EventBus()
    yield bus
    bus.shutdown()


@pytest.fixture()
def repository() -> InMemoryPostRepository:
    """Owner 1 with ten posts (ids 1-10) and owner 2 with three (ids 101-103)."""
    owners = [
        make_owner(1, "Leanne Graham", "Sincere@april.biz"),
        make_owner(2, "Ervin Howell", "Shanna@melissa.tv"),
    ]
    posts = make_posts(10, owner_id=1) + make_posts(3, owner_id=2, start=101)
    return InMemoryPostRepository(owners, posts)
