from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class Address:
    street: str = ""
    suite: str = ""
    city: str = ""
    zipcode: str = ""

    def one_line(self) -> str:
        return f"{self.street}, {self.suite}, {self.city}, {self.zipcode}"

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> Address:
        payload = payload or {}
        return cls(
            street=str(payload.get("street", "")),
            suite=str(payload.get("suite", "")),
            city=str(payload.get("city", "")),
            zipcode=str(payload.get("zipcode", "")),
        )


@dataclass(frozen=True)
class Owner:
    id: int
    name: str
    email: str
    address: Address = field(default_factory=Address)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Owner:
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            email=str(payload["email"]),
            address=Address.from_payload(payload.get("address")),
        )


@dataclass(frozen=True)
class Post:
    """A single post as served by the backend.

    Posts are never edited locally, so instances are frozen once created.
    """

    id: int
    title: str
    body: str
    owner_id: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Post:
        return cls(
            id=int(payload["id"]),
            title=str(payload["title"]),
            body=str(payload.get("body", "")),
            owner_id=int(payload["userId"]),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "body": self.body, "userId": self.owner_id}


@dataclass
class PostPage:
    """One page of posts plus the server's total for the owner."""

    items: List[Post] = field(default_factory=list)
    total_count: int = 0
