from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    PREV = "prev"
    NEXT = "next"


class TurnStatus(str, Enum):
    ACCEPTED = "accepted"
    DENIED = "denied"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TurnResult:
    status: TurnStatus
    page_index: int
    page: list[str]


@dataclass
class ListingSession:
    """Page-turn state over a snapshot of the ledger.

    Only the owner may turn pages. Each accepted turn pushes the expiry
    forward by `timeout_seconds`; after that the session ignores turns.
    """

    session_id: str
    owner_id: str
    pages: list[list[str]]
    expires_at: float
    timeout_seconds: float
    current_page_index: int = 0

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def current_page(self) -> list[str]:
        if not self.pages:
            return []
        return self.pages[self.current_page_index]

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at

    def turn(self, requester_id: str, direction: Direction, now: float) -> TurnResult:
        if self.is_expired(now):
            return self._result(TurnStatus.EXPIRED)
        if requester_id != self.owner_id:
            return self._result(TurnStatus.DENIED)

        last_index = max(0, len(self.pages) - 1)
        if direction is Direction.PREV:
            self.current_page_index = max(0, self.current_page_index - 1)
        else:
            self.current_page_index = min(last_index, self.current_page_index + 1)
        self.expires_at = now + self.timeout_seconds
        return self._result(TurnStatus.ACCEPTED)

    def _result(self, status: TurnStatus) -> TurnResult:
        return TurnResult(
            status=status,
            page_index=self.current_page_index,
            page=self.current_page(),
        )
