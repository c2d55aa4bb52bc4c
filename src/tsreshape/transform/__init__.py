"""Transform module for time-series tables.

Functions for moving between wide and long format, unpivoting period
headers, and deriving lag and seasonal frames for charts.
"""
from .reshape import (
    validate_wide,
    to_long,
    to_wide,
)
from .unpivot import (
    is_period_column,
    unpivot_wide_periods,
    detect_and_unpivot,
)
from .features import (
    add_lags,
    lag_frame,
    add_seasonal_columns,
)

__all__ = [
    'validate_wide',
    'to_long',
    'to_wide',
    'is_period_column',
    'unpivot_wide_periods',
    'detect_and_unpivot',
    'add_lags',
    'lag_frame',
    'add_seasonal_columns',
]
