"""
Sparse step functions over int64 x values.

This package contains the Series container and the combinator used to build
a new series pointwise from several others.
"""

from .series import Series
from .combinator import combine, sum_, diff, any_, all_

__all__ = [
    'Series',
    'combine',
    'sum_',
    'diff',
    'any_',
    'all_',
]
