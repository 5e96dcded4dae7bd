from typing import List, Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, size: int) -> List[T]:
    """Return the zero-based ``page`` of ``size`` items."""
    start = page * size
    return list(items[start : start + size])
