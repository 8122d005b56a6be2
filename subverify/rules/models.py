from enum import Enum


class MatchMode(str, Enum):
    """How the channel and subscribe-word checks combine."""

    EXACT = "exact"
    LENIENT = "lenient"
