import time
import uuid
from collections.abc import Callable

from subverify.ledger.base import BaseSubscriberLedger
from subverify.ledger.models import SubscriberRecord
from subverify.listing.exceptions import ListingAccessDeniedError
from subverify.listing.paginator import paginate
from subverify.listing.session import Direction, ListingSession, TurnResult, TurnStatus
from subverify.logging.logger import Log


def format_subscriber(position: int, record: SubscriberRecord) -> str:
    return (
        f"{position}. {record.username} ({record.id}) "
        f"verified {record.verified_at:%Y-%m-%d %H:%M}"
    )


class ListingService:
    """Opens owner-only listing sessions and routes page turns to them."""

    def __init__(
        self,
        ledger: BaseSubscriberLedger,
        owner_id: str,
        *,
        page_size: int = 10,
        timeout_seconds: float = 120,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ledger = ledger
        self._owner_id = owner_id
        self._page_size = page_size
        self._timeout_seconds = timeout_seconds
        self._clock = clock
        self._sessions: dict[str, ListingSession] = {}

    def open(self, requester_id: str) -> ListingSession:
        """Snapshot the ledger into a new session.

        Raises:
            ListingAccessDeniedError: if the requester is not the owner.
        """
        if not self._owner_id or requester_id != self._owner_id:
            Log.warning(f"Listing denied for {requester_id}")
            raise ListingAccessDeniedError(f"{requester_id} may not list subscribers")

        self._drop_expired()
        lines = [
            format_subscriber(i, record)
            for i, record in enumerate(self._ledger.records(), start=1)
        ]
        now = self._clock()
        session = ListingSession(
            session_id=uuid.uuid4().hex,
            owner_id=requester_id,
            pages=paginate(lines, self._page_size),
            expires_at=now + self._timeout_seconds,
            timeout_seconds=self._timeout_seconds,
        )
        self._sessions[session.session_id] = session
        Log.info(
            f"Listing session {session.session_id} opened: "
            f"{len(lines)} subscribers, {session.page_count} pages"
        )
        return session

    def turn(self, session_id: str, requester_id: str, direction: Direction) -> TurnResult:
        now = self._clock()
        session = self._sessions.get(session_id)
        if session is None:
            return TurnResult(status=TurnStatus.EXPIRED, page_index=0, page=[])
        result = session.turn(requester_id, direction, now)
        if result.status is TurnStatus.EXPIRED:
            del self._sessions[session_id]
        elif result.status is TurnStatus.DENIED:
            Log.info(f"Page turn on {session_id} denied for {requester_id}")
        return result

    def _drop_expired(self) -> None:
        now = self._clock()
        for session_id in [s for s, sess in self._sessions.items() if sess.is_expired(now)]:
            del self._sessions[session_id]


def render_listing_page(session: ListingSession) -> str:
    """Plain-text view of the session's current page."""
    if not session.pages:
        return "No subscribers yet."
    header = f"Subscribers (page {session.current_page_index + 1}/{session.page_count})"
    return "\n".join([header, *session.current_page()])
