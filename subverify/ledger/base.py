from abc import ABC, abstractmethod

from subverify.ledger.models import SubscriberRecord


class BaseSubscriberLedger(ABC):
    """Contract for append-only stores of verified subscribers."""

    @abstractmethod
    def exists(self, subscriber_id: str) -> bool:
        """Return True if a record with this id is stored.

        A store that does not exist yet counts as empty.
        """

    @abstractmethod
    def append(self, record: SubscriberRecord) -> None:
        """Add a record at the end of the ledger.

        Does not deduplicate; callers check `exists` first.
        """

    @abstractmethod
    def records(self) -> list[SubscriberRecord]:
        """Return all records in verification order."""
