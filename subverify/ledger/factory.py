from pathlib import Path

from subverify.config.settings import Settings
from subverify.database.connection import init_pool, pool_initialized
from subverify.ledger.base import BaseSubscriberLedger
from subverify.ledger.json_ledger import JsonFileLedger
from subverify.ledger.memory_ledger import InMemoryLedger
from subverify.ledger.postgres_ledger import PostgresSubscriberLedger


class LedgerFactory:
    """Creates the configured subscriber ledger."""

    BACKENDS = ("json", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseSubscriberLedger:
        if not settings.save_data:
            return InMemoryLedger()
        backend = settings.ledger_backend.lower()
        if backend == "json":
            return JsonFileLedger(Path(settings.ledger_path))
        if backend == "postgres":
            if not pool_initialized():
                init_pool(settings)
            ledger = PostgresSubscriberLedger()
            ledger.ensure_schema()
            return ledger
        raise ValueError(
            f"Unknown ledger backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
