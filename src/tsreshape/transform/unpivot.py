"""Period-header unpivot - one column per period, one row per series, to long format."""
import logging
from typing import Any, List, Tuple

import pandas as pd

from ..errors import ShapeError
from ..utils.period import parse_period_label, normalize_time

logger = logging.getLogger(__name__)


def is_period_column(col_name: Any) -> bool:
    """Check if column name looks like a period header ("1956 Q1", "Jul 1991")."""
    if not isinstance(col_name, str) or not col_name.strip():
        return False
    return parse_period_label(col_name) is not None


def unpivot_wide_periods(
    df: pd.DataFrame, static_columns: List[str], period_columns: List[str],
    value_name: str = 'value', time_name: str = 'time', convention: str = 'start'
) -> pd.DataFrame:
    """Transform period-header format to long format."""
    missing_static = [c for c in static_columns if c not in df.columns]
    missing_period = [c for c in period_columns if c not in df.columns]
    if missing_static:
        raise ShapeError(f"Static columns not found: {missing_static}")
    if missing_period:
        raise ShapeError(f"Period columns not found: {missing_period}")

    df_long = pd.melt(df, id_vars=static_columns, value_vars=period_columns,
                      var_name='_raw_period', value_name=value_name)
    df_long[time_name] = df_long['_raw_period'].map(lambda p: normalize_time(p, convention=convention))
    return df_long[static_columns + [time_name, '_raw_period', value_name]]


def detect_and_unpivot(df: pd.DataFrame, min_period_columns: int = 3) -> Tuple[pd.DataFrame, dict]:
    """Auto-detect period headers and unpivot if found."""
    headers = df.columns.tolist()
    period_cols = [h for h in headers if is_period_column(h)]
    static_cols = [h for h in headers if h and not is_period_column(h)]

    metadata = {
        'transformed': False, 'period_columns': period_cols, 'static_columns': static_cols,
        'original_shape': df.shape, 'final_shape': df.shape
    }
    if len(period_cols) < min_period_columns:
        logger.debug(f"Found {len(period_cols)} period headers, need {min_period_columns}; leaving as is")
        return df, metadata

    df_transformed = unpivot_wide_periods(df, static_cols, period_cols)
    metadata['transformed'] = True
    metadata['final_shape'] = df_transformed.shape
    return df_transformed, metadata
