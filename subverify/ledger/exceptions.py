class LedgerError(Exception):
    """Base exception for subscriber ledger failures."""


class LedgerCorruptError(LedgerError):
    """Raised when the stored ledger cannot be parsed into records."""
