from typing import Tuple, TypeVar

T = TypeVar("T")

def map_range(from_range: Tuple[T, T], to_range: Tuple[T, T], value: T) -> T:
    """Linearly map ``value`` from ``from_range`` onto ``to_range``.

    The source interval must not be degenerate.
    """
    from_lo, from_hi = from_range
    to_lo, to_hi = to_range
    assert from_hi != from_lo, f"degenerate source interval {from_range!r}"
    return to_lo + (value - from_lo) * (to_hi - to_lo) / (from_hi - from_lo)
