"""Interval coverage set - pure data structure, no I/O dependencies."""

import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator
from numbers import Real

Range = tuple[float, float]


class InvalidRangeError(ValueError):
    """Raised when a range is not a pair of numbers with start < end."""

    pass


def is_valid_range(value: object) -> bool:
    """Check if an object is a valid range.

    A valid range is a 2-item tuple or list of real numbers where the start
    is strictly less than the end. Zero-width ranges are not valid.
    """
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return False
    start, end = value
    for bound in (start, end):
        if isinstance(bound, bool) or not isinstance(bound, Real):
            return False
    return start < end


def _check_range(value: object) -> Range:
    if not is_valid_range(value):
        raise InvalidRangeError(f"Invalid Range: {value!r}")
    start, end = value
    return start, end


class RangeSet:
    """
    A set of disjoint numeric ranges.

    Ranges are stored as a flat ascending list of boundary points. Each even
    index is the start of a range, each odd index is the end of one. Points
    strictly increase, so touching ranges are always merged on insert.
    """

    def __init__(self, ranges: Iterable[Range] = ()):
        self._bounds: list[float] = []
        for range_ in ranges:
            self.add_range(range_)

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self._bounds) // 2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self._bounds == other._bounds

    def __repr__(self) -> str:
        return f"RangeSet({self.ranges!r})"

    @property
    def ranges(self) -> list[Range]:
        """All ranges in ascending order."""
        bounds = self._bounds
        return [(bounds[i], bounds[i + 1]) for i in range(0, len(bounds), 2)]

    def has_range(self, range_: Range) -> bool:
        """Check if a range is completely covered by a single range in the set."""
        start, end = _check_range(range_)

        lower = self._lower_bound_index(start)
        if lower is None or lower % 2 != 0:
            return False

        return end <= self._bounds[lower + 1]

    def add_range(self, range_: Range) -> None:
        """Add a range, merging it with any range it overlaps or touches."""
        start, end = _check_range(range_)

        first = self._upper_bound_index(start)
        if first is None:
            self._bounds.extend((start, end))
            return

        last = self._lower_bound_index(end)
        if last is None:
            self._bounds[0:0] = [start, end]
            return

        new_bounds = []
        if first % 2 == 0:
            new_bounds.append(start)
        if last % 2 != 0:
            new_bounds.append(end)

        self._bounds[first : last + 1] = new_bounds

    def remove_range(self, range_: Range) -> None:
        """Remove a range, truncating any range that partially overlaps it."""
        start, end = _check_range(range_)

        first = self._upper_bound_index(start)
        if first is None:
            return

        last = self._lower_bound_index(end)
        if last is None:
            return

        new_bounds = []
        if first % 2 != 0:
            new_bounds.append(start)
        if last % 2 == 0:
            new_bounds.append(end)

        self._bounds[first : last + 1] = new_bounds

    def inverse(self) -> "RangeSet":
        """Create a new set covering everything this set does not."""
        inverse = RangeSet()
        bounds = [-math.inf, *self._bounds, math.inf]
        # Drop the zero-width ranges left when this set reaches either infinity
        if bounds[0] == bounds[1]:
            del bounds[:2]
        if len(bounds) >= 2 and bounds[-1] == bounds[-2]:
            del bounds[-2:]
        inverse._bounds = bounds
        return inverse

    def intersection(self, other: "RangeSet") -> "RangeSet":
        """Create a new set covering everything in both this set and other."""
        intersection = RangeSet()
        bounds_a = self._bounds
        bounds_b = other._bounds
        if not bounds_a or not bounds_b:
            return intersection

        index_a = self._lower_bound_index(bounds_b[0]) or 0
        index_b = other._lower_bound_index(bounds_a[0]) or 0

        # An odd index means the walk is currently inside a range of that set
        while index_a < len(bounds_a) and index_b < len(bounds_b):
            a = bounds_a[index_a]
            b = bounds_b[index_b]
            if a < b or (a == b and index_a % 2 != 0):
                if index_b % 2 != 0:
                    intersection._bounds.append(a)
                index_a += 1
            else:
                if index_a % 2 != 0:
                    intersection._bounds.append(b)
                index_b += 1

        return intersection

    def _lower_bound_index(self, target: float) -> int | None:
        """Index of the largest boundary <= target, or None if all are larger."""
        index = bisect_right(self._bounds, target) - 1
        return index if index >= 0 else None

    def _upper_bound_index(self, target: float) -> int | None:
        """Index of the smallest boundary >= target, or None if all are smaller."""
        index = bisect_left(self._bounds, target)
        return index if index < len(self._bounds) else None
