from typing import Callable, Mapping, Optional

from step_series import combinator as _impl_combinator
from step_series.series import Series
from step_series.combinator import combine, sum_, diff, any_, all_

def new_series(data: Optional[Mapping[int, int]] = None, debug_check: bool = False) -> Series:
    """
    Create a series, empty or prefilled from a {x: y} mapping.

    Usage:
    ------
    s = new_series({-5: 20, 32: -7})
    s.get(0)   # 20
    """
    return Series(data, debug_check=debug_check)

def _combined(f: Callable[..., int], series, compact: bool) -> Series:
    result = _impl_combinator.combine(f, *series)
    if compact:
        result.compact()
    return result

def sum_series(*series: Series, compact: bool = False) -> Series:
    """Pointwise sum of the series."""
    return _combined(sum_, series, compact)

def diff_series(*series: Series, compact: bool = False) -> Series:
    """Pointwise difference: the first series minus all the others."""
    return _combined(diff, series, compact)

def any_series(*series: Series, compact: bool = False) -> Series:
    """1 wherever at least one series is nonzero, 0 elsewhere."""
    return _combined(any_, series, compact)

def all_series(*series: Series, compact: bool = False) -> Series:
    """1 wherever every series is nonzero, 0 elsewhere."""
    return _combined(all_, series, compact)
