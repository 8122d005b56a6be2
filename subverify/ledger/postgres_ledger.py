from psycopg.rows import dict_row

from subverify.database.connection import get_connection
from subverify.ledger.base import BaseSubscriberLedger
from subverify.ledger.models import SubscriberRecord
from subverify.logging.logger import Log


class PostgresSubscriberLedger(BaseSubscriberLedger):
    """Ledger backed by the subscribers table.

    The primary key on id makes `append` atomic and idempotent, so concurrent
    verifications cannot drop each other's records.
    """

    def ensure_schema(self) -> None:
        """Create the subscribers table if it does not exist yet."""
        with get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS subscribers (
                    seq BIGSERIAL,
                    id TEXT PRIMARY KEY,
                    username TEXT NOT NULL,
                    verified_at TIMESTAMPTZ NOT NULL,
                    account_created_at TIMESTAMPTZ NOT NULL
                )
                """
            )
            conn.commit()

    def exists(self, subscriber_id: str) -> bool:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT 1 FROM subscribers WHERE id = %s",
                    (subscriber_id,),
                )
                row = cur.fetchone()
        return row is not None

    def append(self, record: SubscriberRecord) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO subscribers (id, username, verified_at, account_created_at)
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (id) DO NOTHING
                    """,
                    (
                        record.id,
                        record.username,
                        record.verified_at,
                        record.account_created_at,
                    ),
                )
                if cur.rowcount == 0:
                    Log.warning(f"Subscriber {record.id} already stored, append skipped")
            conn.commit()

    def records(self) -> list[SubscriberRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, username, verified_at, account_created_at
                    FROM subscribers
                    ORDER BY seq
                    """
                )
                rows = cur.fetchall()

        return [
            SubscriberRecord(
                id=row["id"],
                username=row["username"],
                verified_at=row["verified_at"],
                account_created_at=row["account_created_at"],
            )
            for row in rows
        ]
