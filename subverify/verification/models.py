from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


@dataclass(frozen=True)
class Requester:
    """Identity of the user asking to be verified."""

    id: str
    username: str
    account_created_at: datetime


@dataclass(frozen=True)
class Attachment:
    """An uploaded file as reported by the chat platform."""

    url: str
    filename: str | None = None


@dataclass(frozen=True)
class VerificationRequest:
    """One inbound verification attempt."""

    requester: Requester
    image_url: str | None = None
    image_name: str | None = None
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class OutcomeReason(str, Enum):
    ALREADY_VERIFIED = "already_verified"
    NO_IMAGE = "no_image"
    UNSUPPORTED_FORMAT = "unsupported_format"
    RULE_MISMATCH = "rule_mismatch"
    PROCESSING_ERROR = "processing_error"
    SUCCESS = "success"


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of one pipeline run."""

    verified: bool
    reason: OutcomeReason
    evidence_text: str | None = None
