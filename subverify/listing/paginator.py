from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page_size: int) -> list[list[T]]:
    """Split items into consecutive pages; the last page may be shorter.

    Raises:
        ValueError: if page_size is not positive.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return [list(items[i : i + page_size]) for i in range(0, len(items), page_size)]
