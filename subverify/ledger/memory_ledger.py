from subverify.ledger.base import BaseSubscriberLedger
from subverify.ledger.models import SubscriberRecord


class InMemoryLedger(BaseSubscriberLedger):
    """Process-local ledger used when persistence is turned off."""

    def __init__(self, records: list[SubscriberRecord] | None = None) -> None:
        self._records: list[SubscriberRecord] = list(records or [])

    def exists(self, subscriber_id: str) -> bool:
        return any(r.id == subscriber_id for r in self._records)

    def append(self, record: SubscriberRecord) -> None:
        self._records.append(record)

    def records(self) -> list[SubscriberRecord]:
        return list(self._records)
