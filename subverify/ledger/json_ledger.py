import json
import os
import tempfile
from pathlib import Path

from subverify.ledger.base import BaseSubscriberLedger
from subverify.ledger.exceptions import LedgerCorruptError
from subverify.ledger.models import SubscriberRecord
from subverify.logging.logger import Log


class JsonFileLedger(BaseSubscriberLedger):
    """Ledger stored as one pretty-printed JSON array, rewritten on every append.

    There is no locking: two appends racing on the same file can lose one of
    the records, and `exists` may observe the file before a concurrent append
    lands. Use the PostgreSQL ledger when that matters.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self, subscriber_id: str) -> bool:
        return any(r.id == subscriber_id for r in self._read())

    def append(self, record: SubscriberRecord) -> None:
        records = self._read()
        records.append(record)
        self._write(records)
        Log.info(f"Ledger now holds {len(records)} subscribers")

    def records(self) -> list[SubscriberRecord]:
        return self._read()

    def _read(self) -> list[SubscriberRecord]:
        """Load all records, resetting the file to [] if it is corrupt."""
        if not self._path.exists():
            return []
        try:
            return self._parse(self._path.read_bytes())
        except LedgerCorruptError as exc:
            Log.warning(f"{self._path} is corrupted, resetting: {exc}")
            self._write([])
            return []

    @staticmethod
    def _parse(raw: bytes) -> list[SubscriberRecord]:
        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise LedgerCorruptError(f"not UTF-8 text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise LedgerCorruptError(f"invalid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise LedgerCorruptError("ledger root must be a list")
        try:
            return [SubscriberRecord.from_json(item) for item in data]
        except (KeyError, TypeError, ValueError) as exc:
            raise LedgerCorruptError(f"invalid record: {exc}") from exc

    def _write(self, records: list[SubscriberRecord]) -> None:
        payload = json.dumps([r.to_json() for r in records], indent=2)
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
