"""
The Series container: a discrete step function over int64 x values.

A Series stores a sparse set of (x, y) breakpoints. Each breakpoint is a
transition, i.e. if (x0, y0) and (x1, y1) are consecutive breakpoints then
f(x) = y0 for x0 <= x < x1. Below the first breakpoint f(x) = 0.
"""

from dataclasses import dataclass, field, InitVar
from typing import Dict, Iterator, List, Mapping, Optional, Tuple
import numpy as np

from .kernels import redundant_mask
from .utils import as_int64

def _empty_keys() -> np.ndarray:
    return np.empty((0,), dtype=np.int64)

@dataclass(eq=False, repr=False)
class Series:
    data: InitVar[Optional[Mapping[int, int]]] = None
    debug_check: bool = False
    # Every key of _points appears exactly once in either _sorted or _pending,
    # and _sorted is strictly increasing.
    _points: Dict[int, int] = field(init=False, default_factory=dict)
    _sorted: np.ndarray = field(init=False, default_factory=_empty_keys)
    _pending: List[int] = field(init=False, default_factory=list)

    def __post_init__(self, data: Optional[Mapping[int, int]]):
        if data is not None:
            for key, val in data.items():
                x = as_int64(key)
                if x not in self._points:
                    self._pending.append(x)
                self._points[x] = as_int64(val)
        if self.debug_check:
            self.check_consistency()

    @classmethod
    def from_dict(cls, data: Mapping[int, int], debug_check: bool = False) -> "Series":
        """Build a series prefilled with the points in data."""
        return cls(data, debug_check=debug_check)

    @classmethod
    def _from_sorted(cls, xs: np.ndarray, ys: np.ndarray) -> "Series":
        # xs must already be strictly increasing
        s = cls()
        s._sorted = np.ascontiguousarray(xs, dtype=np.int64)
        s._points = dict(zip(s._sorted.tolist(), np.asarray(ys, dtype=np.int64).tolist()))
        return s

    def _sort(self) -> None:
        """Merge any pending keys into _sorted."""
        if not self._pending:
            return
        pending = np.asarray(self._pending, dtype=np.int64)
        self._sorted = np.sort(np.concatenate((self._sorted, pending)))
        self._pending = []

    def _find(self, x: int) -> int:
        """
        Largest index i into _sorted such that _sorted[i] <= x, or -1 if
        _sorted is empty or x lies below _sorted[0].
        """
        if self._sorted.size == 0 or x < self._sorted[0]:
            return -1
        return int(np.searchsorted(self._sorted, x, side="right")) - 1

    def _after_mutation(self) -> None:
        if self.debug_check:
            self.check_consistency()

    def check_consistency(self) -> None:
        """
        Validate the internal bookkeeping.

        Raises ValueError if the keys of the stored points are not matched
        one-to-one by the sorted and pending keys, or if the sorted keys are
        out of order.
        """
        matcher = set(self._points)
        for x in self._sorted.tolist():
            if x not in matcher:
                raise ValueError(f"Inconsistent series: x-value {x} from sorted not in points")
            matcher.discard(x)
        for x in self._pending:
            if x not in matcher:
                raise ValueError(f"Inconsistent series: x-value {x} from pending not in points")
            matcher.discard(x)
        if matcher:
            raise ValueError(f"Inconsistent series: x-values {sorted(matcher)} in neither sorted nor pending")
        diffs = np.diff(self._sorted)
        if np.any(diffs <= 0):
            idx = int(np.where(diffs <= 0)[0][0])
            raise ValueError(f"Inconsistent series: sorted is not in order "
                             f"({self._sorted[idx]} !< {self._sorted[idx + 1]})")

    def size(self) -> int:
        return len(self._points)

    def has(self, x: int) -> bool:
        return as_int64(x) in self._points

    def set(self, x: int, y: int) -> None:
        """Add the point (x, y), replacing an existing point at x."""
        x = as_int64(x)
        y = as_int64(y)
        if x not in self._points:
            self._pending.append(x)
        self._points[x] = y
        self._after_mutation()

    def get(self, x: int) -> int:
        """
        Evaluate f(x).

        If x is not a stored point then f(x) is the value of the largest
        stored x0 < x, or 0 if there is no such x0.
        """
        x = as_int64(x)
        y = self._points.get(x)
        if y is not None:
            return y
        self._sort()
        i = self._find(x)
        if i < 0:
            return 0
        return self._points[int(self._sorted[i])]

    def remove(self, x: int) -> None:
        """Remove the stored point at x. Does nothing if there is none."""
        x = as_int64(x)
        if x not in self._points:
            return
        self._sort()
        i = self._find(x)
        self._sorted = np.delete(self._sorted, i)
        del self._points[x]
        self._after_mutation()

    def compact(self) -> None:
        """
        Remove redundant stored points.

        A redundant point is the second of two consecutive points (x0, y0)
        and (x1, y1) with y0 == y1. Removing it does not change f. The first
        point is never removed, even if its value is 0.
        """
        if len(self._points) < 2:
            return
        self._sort()
        ys = np.fromiter((self._points[x] for x in self._sorted.tolist()),
                         dtype=np.int64, count=self._sorted.size)
        keep = redundant_mask(ys)
        for x in self._sorted[~keep].tolist():
            del self._points[x]
        self._sorted = self._sorted[keep]
        self._after_mutation()

    def xs(self) -> List[int]:
        """Ascending list of stored x values. Pair with get() to walk (x, f(x))."""
        self._sort()
        return self._sorted.tolist()

    def x0(self) -> int:
        """Lowest stored x, or 0 if the series is empty."""
        self._sort()
        if self._sorted.size == 0:
            return 0
        return int(self._sorted[0])

    def floor(self, x: int) -> Tuple[int, bool]:
        """Largest stored x0 <= x as (x0, True), or (0, False) if none."""
        x = as_int64(x)
        if not self._points:
            return 0, False
        self._sort()
        i = self._find(x)
        if i < 0:
            return 0, False
        return int(self._sorted[i]), True

    def ceiling(self, x: int) -> Tuple[int, bool]:
        """Smallest stored x1 >= x as (x1, True), or (0, False) if none."""
        x = as_int64(x)
        if not self._points:
            return 0, False
        # an exact hit needs no merge, and rules out x1 == x below
        if x in self._points:
            return x, True
        self._sort()
        i = self._find(x) + 1
        if i >= self._sorted.size:
            return 0, False
        return int(self._sorted[i]), True

    def copy(self) -> "Series":
        """Independent copy of the series."""
        # Merge first so neither side has to sort again; the copy then has
        # nothing pending.
        self._sort()
        s = Series(debug_check=self.debug_check)
        s._points = dict(self._points)
        s._sorted = self._sorted.copy()
        return s

    def equals(self, other: "Series") -> bool:
        """
        True if both series store exactly the same points.

        Redundant points are not ignored, so compact both series first when
        comparing the functions they describe.
        """
        return self._points == other._points

    def items(self) -> List[Tuple[int, int]]:
        self._sort()
        return [(x, self._points[x]) for x in self._sorted.tolist()]

    def to_dict(self) -> Dict[int, int]:
        return dict(self._points)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Stored points as (xs, ys) int64 arrays in ascending x order."""
        self._sort()
        xs = self._sorted.copy()
        ys = np.fromiter((self._points[x] for x in xs.tolist()), dtype=np.int64, count=xs.size)
        return xs, ys

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, x) -> bool:
        return self.has(x)

    def __iter__(self) -> Iterator[int]:
        return iter(self.xs())

    def __eq__(self, other):
        if not isinstance(other, Series):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __copy__(self) -> "Series":
        return self.copy()

    def __deepcopy__(self, memo) -> "Series":
        return self.copy()

    def __repr__(self) -> str:
        body = ", ".join(f"{x}: {y}" for x, y in self.items())
        return f"Series({{{body}}})"
