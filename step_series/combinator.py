from typing import Callable
import numpy as np

from .kernels import floor_values
from .series import Series
from .utils import union_keys, wrap_int64

Reducer = Callable[..., int]

def combine(f: Reducer, *series: Series) -> Series:
    """
    Combine several series pointwise with a reducing function.

    The result has a stored point at every x stored in any of the inputs,
    and its value there is f(s0.get(x), s1.get(x), ...), with the values
    passed in input order. The result is not compacted.

    Parameters:
    -----------
    f : callable
        Reducer taking one int per input series and returning an int,
        e.g. sum_, diff, any_ or all_
    *series : Series
        Input series; they need not share any breakpoints

    Returns:
    --------
    Series
        The combined series (empty if no series are given)

    Usage:
    ------
    total = combine(sum_, s0, s1, s2)
    """
    if not callable(f):
        raise TypeError(f"combine expects a callable reducer, got {type(f).__name__}")
    if not series:
        return Series()

    arrays = [s.to_arrays() for s in series]
    keys = union_keys([xs for xs, _ in arrays])
    # one row of interpolated values per input series
    values = np.empty((len(arrays), keys.size), dtype=np.int64)
    for i, (xs, ys) in enumerate(arrays):
        values[i] = floor_values(xs, ys, keys)

    out = np.empty(keys.size, dtype=np.int64)
    for k, column in enumerate(values.T.tolist()):
        out[k] = wrap_int64(int(f(*column)), op="combine")
    return Series._from_sorted(keys, out)

def sum_(*vals: int) -> int:
    """Sum of all the values."""
    return wrap_int64(sum(int(v) for v in vals), op="sum")

def diff(*vals: int) -> int:
    """The first value minus all the remaining values."""
    if not vals:
        return 0
    return wrap_int64(int(vals[0]) - sum(int(v) for v in vals[1:]), op="diff")

def any_(*vals: int) -> int:
    """1 if any value is nonzero, 0 otherwise."""
    return int(any(v != 0 for v in vals))

def all_(*vals: int) -> int:
    """1 if every value is nonzero, 0 otherwise. Vacuously 1 for no values."""
    return int(all(v != 0 for v in vals))
