import operator
import warnings
from typing import Sequence
import numpy as np

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

def as_int64(v) -> int:
    """Coerce an integer-like value to a Python int inside the int64 range."""
    i = operator.index(v)
    if i < INT64_MIN or i > INT64_MAX:
        raise ValueError(f"value {i} is outside the int64 range [{INT64_MIN}, {INT64_MAX}]")
    return i

def wrap_int64(v: int, op: str = "reducer") -> int:
    """Wrap an exact integer result to int64 two's complement, warning if it overflowed."""
    if INT64_MIN <= v <= INT64_MAX:
        return v
    wrapped = ((v - INT64_MIN) % (1 << 64)) + INT64_MIN
    warnings.warn(f"{op} overflowed int64: {v} wrapped to {wrapped}", RuntimeWarning, stacklevel=3)
    return wrapped

def union_keys(xs: Sequence[np.ndarray]) -> np.ndarray:
    if not xs:
        return np.empty((0,), dtype=np.int64)
    cat = np.concatenate([np.asarray(x, dtype=np.int64).ravel() for x in xs], axis=0)
    return np.ascontiguousarray(np.unique(cat), dtype=np.int64)
