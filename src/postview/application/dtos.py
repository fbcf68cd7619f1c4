from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    FETCH = "fetch"
    DELETE = "delete"


@dataclass
class RequestOutcome:
    """Result of a single fetch or delete, handed back to the caller.

    The caller decides whether a failure is surfaced; the outcome only
    records what happened.
    """

    ok: bool
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return not self.ok


@dataclass
class FetchOutcome(RequestOutcome):
    page: int = 0
    page_size: int = 0
    merged_ids: List[int] = field(default_factory=list)
    total_count: Optional[int] = None
    # Set when a newer fetch started before this one completed; the posts
    # were merged but the total was left to the newer fetch.
    stale: bool = False


class RebalanceAction(Enum):
    STAY = "stay"
    PREVIOUS_PAGE = "previous_page"
    REFETCH_FIRST_PAGE = "refetch_first_page"


@dataclass
class DeleteOutcome(RequestOutcome):
    post_id: int = 0
    action: RebalanceAction = RebalanceAction.STAY
    target_page: int = 0
    total_count: Optional[int] = None


@dataclass
class OwnersOutcome(RequestOutcome):
    owner_count: int = 0
