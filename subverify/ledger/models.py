from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SubscriberRecord:
    """One verified subscriber. Unique by id within a ledger."""

    id: str
    username: str
    verified_at: datetime
    account_created_at: datetime

    def to_json(self) -> dict[str, str]:
        return {
            "username": self.username,
            "id": self.id,
            "time": self.verified_at.isoformat(),
            "accountCreated": self.account_created_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: dict[str, str]) -> "SubscriberRecord":
        """Build a record from its stored form.

        Raises:
            KeyError, TypeError, ValueError: if a field is missing or malformed.
        """
        return cls(
            id=str(data["id"]),
            username=str(data["username"]),
            verified_at=_parse_timestamp(data["time"]),
            account_created_at=_parse_timestamp(data["accountCreated"]),
        )


def _parse_timestamp(value: object) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    # Files written by older deployments use a trailing "Z".
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
