import numpy as np
from numba import njit

@njit(cache=True)
def redundant_mask(ys: np.ndarray) -> np.ndarray:
    """
    Numba kernel for compaction.

    Given breakpoint values in ascending x order, marks the points to keep:
    a point is dropped when its value repeats the last kept value. The first
    point is always kept.

    Returns: boolean keep-mask of the same length as ys
    """
    keep = np.ones(ys.size, dtype=np.bool_)
    if ys.size == 0:
        return keep
    last_y = ys[0]
    for i in range(1, ys.size):
        if ys[i] == last_y:
            keep[i] = False
        else:
            last_y = ys[i]
    return keep

@njit(cache=True)
def floor_values(xs: np.ndarray, ys: np.ndarray, query: np.ndarray) -> np.ndarray:
    """
    Numba kernel evaluating a step function at many points.

    xs must be strictly increasing with ys aligned to it, and query must be
    ascending. For each q the value of the largest xs[i] <= q is returned,
    or 0 when q lies below xs[0].
    """
    out = np.zeros(query.size, dtype=np.int64)
    last_idx = 0
    for k in range(query.size):
        q = query[k]
        # query is monotone, so we only ever walk forward
        while last_idx < xs.size and xs[last_idx] <= q:
            last_idx += 1
        if last_idx > 0:
            out[k] = ys[last_idx - 1]
    return out
