import sys
from pathlib import Path

# Add project root to path so we can import step_series_api
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np
import pytest

from step_series.series import Series

# (points, probe xs) pairs shared by the container tests
NO_POINTS = ({}, [])
ONE_POINT = ({1: 25}, [-10, -1, 0, 1, 2, 3, 24, 25, 26])
TWO_POINTS = ({32: -7, -5: 20}, [-6, -5, -4, 0, 31, 32, 33])
THREE_POINTS = ({100: 10, 101: 0, 102: -50}, [99, 100, 101, 102, 130])
MANY_POINTS = ({-100: 12345678, 0: 1, 1: 5, 3: 77, 5: 0, 8: 1}, [0, 1, 2, 3, 4, 5])
REDUNDANT = ({0: 0, 2: 10, 4: 10, 5: 9, 10: 8, 20: 8, 22: 8, 30: 0},
             [-1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 20, 22, 30, 100])
REDUNDANT_COMPACTED = {0: 0, 2: 10, 5: 9, 10: 8, 30: 0}

ALL_CASES = [NO_POINTS, ONE_POINT, TWO_POINTS, THREE_POINTS, MANY_POINTS, REDUNDANT]
CASE_IDS = ["none", "one", "two", "three", "many", "redundant"]

@pytest.fixture(scope="session")
def rng():
    return np.random.default_rng(12345)

def assert_consistent(s: Series):
    """
    Check that the keys of s._points match s._sorted and s._pending
    one-to-one and that s._sorted is strictly increasing.
    """
    matcher = set(s._points)
    for x in list(s._sorted.tolist()) + list(s._pending):
        if x not in matcher:
            raise AssertionError(f"Inconsistent series: x-value {x} not in points or duplicated")
        matcher.discard(x)
    if matcher:
        raise AssertionError(f"Inconsistent series: x-values {sorted(matcher)} in neither sorted nor pending")
    diffs = np.diff(s._sorted)
    if np.any(diffs <= 0):
        idx = int(np.where(diffs <= 0)[0][0])
        raise AssertionError(f"Sorted keys out of order at idx {idx}: {s._sorted[idx]} !< {s._sorted[idx + 1]}")

def reference_get(points: dict, x: int) -> int:
    below = [k for k in points if k <= x]
    return points[max(below)] if below else 0
