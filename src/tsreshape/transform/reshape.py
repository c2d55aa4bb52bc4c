"""Reshaper - moves time-series tables between wide and long format.

Wide: one row per time key, one column per series.
Long: one row per (time, series) pair with explicit name and value columns.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from ..errors import ShapeError
from ..utils.period import normalize_series

logger = logging.getLogger(__name__)

# How many offending keys to list in an error message
MAX_REPORTED = 5


def _check_columns(df: pd.DataFrame, columns: Sequence[str], kind: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ShapeError(f"{kind} columns not found: {missing}")


def _format_keys(keys: List[Any]) -> str:
    shown = ', '.join(repr(k) for k in keys[:MAX_REPORTED])
    if len(keys) > MAX_REPORTED:
        shown += f" and {len(keys) - MAX_REPORTED} more"
    return shown


def _check_null_times(times: pd.Series, time_col: str) -> None:
    if times.isna().any():
        raise ShapeError(f"Null time keys in '{time_col}' at rows {times[times.isna()].index.tolist()}")


def validate_wide(
    df: pd.DataFrame, time_col: str, value_cols: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Check the wide-table invariants and return the value columns.

    value_cols=None means every column except time_col.
    Raises ShapeError on repeated column labels, null or duplicate time keys.
    """
    if df.columns.duplicated().any():
        repeated = df.columns[df.columns.duplicated()].unique().tolist()
        raise ShapeError(f"Repeated column labels: {repeated}")
    _check_columns(df, [time_col], 'Time')

    if value_cols is None:
        value_cols = [c for c in df.columns if c != time_col]
    else:
        value_cols = list(value_cols)
        _check_columns(df, value_cols, 'Value')
        if time_col in value_cols:
            raise ShapeError(f"Time column '{time_col}' cannot also be a value column")

    times = df[time_col]
    _check_null_times(times, time_col)
    dupes = times[times.duplicated()].unique().tolist()
    if dupes:
        raise ShapeError(f"Duplicate time keys in '{time_col}': {_format_keys(dupes)}")
    return value_cols


def to_long(
    wide: pd.DataFrame,
    time_col: str,
    value_cols: Optional[Sequence[str]] = None,
    name_col: str = 'name',
    value_col: str = 'value',
    unit: Optional[str] = None,
    convention: str = 'start',
) -> pd.DataFrame:
    """
    Transform a wide table to long format.

    Emits one row per (row, value column), series by series: all rows of the
    first value column, then all rows of the second, and so on.
    When unit is given the time column is normalized to dates first.

    Returns a frame with columns [time_col, name_col, value_col].
    """
    if len({time_col, name_col, value_col}) != 3:
        raise ShapeError(f"Output columns must be distinct: {[time_col, name_col, value_col]}")

    if unit is not None:
        _check_columns(wide, [time_col], 'Time')
        _check_null_times(wide[time_col], time_col)
        wide = wide.copy()
        wide[time_col] = normalize_series(wide[time_col], unit, convention)

    value_cols = validate_wide(wide, time_col, value_cols)
    if not value_cols:
        logger.debug(f"No value columns in {len(wide)} rows, long table is empty")
        return pd.DataFrame(columns=[time_col, name_col, value_col])

    long = pd.melt(wide, id_vars=[time_col], value_vars=value_cols,
                   var_name=name_col, value_name=value_col)
    logger.debug(f"Unpivoted {len(wide)} rows x {len(value_cols)} series -> {len(long)} rows")
    return long[[time_col, name_col, value_col]]


def _key_pairs(keys: pd.DataFrame) -> List[Tuple[Any, Any]]:
    return list(keys.itertuples(index=False, name=None))


def to_wide(
    long: pd.DataFrame, time_col: str, name_col: str = 'name', value_col: str = 'value'
) -> pd.DataFrame:
    """
    Transform a long table back to wide format.

    Rows follow the first appearance of each time key, columns the first
    appearance of each series name. Every (time, name) pair must occur exactly
    once; duplicates or gaps raise ShapeError. Null values are kept.
    """
    _check_columns(long, [time_col, name_col, value_col], 'Long')
    keys = long[[time_col, name_col]]

    if keys.isna().any().any():
        null_rows = keys[keys.isna().any(axis=1)].index.tolist()
        raise ShapeError(f"Null keys in ({time_col}, {name_col}) at rows {null_rows[:MAX_REPORTED]}")

    dup_mask = keys.duplicated(keep=False)
    if dup_mask.any():
        pairs = _key_pairs(keys[dup_mask].drop_duplicates())
        raise ShapeError(f"Duplicate ({time_col}, {name_col}) pairs: {_format_keys(pairs)}")

    times = pd.unique(long[time_col])
    names = pd.unique(long[name_col])
    if time_col in list(names):
        raise ShapeError(f"Series name '{time_col}' collides with the time column")
    if len(long) != len(times) * len(names):
        present = set(_key_pairs(keys))
        missing = [(t, n) for t in times for n in names if (t, n) not in present]
        raise ShapeError(f"Missing ({time_col}, {name_col}) pairs: {_format_keys(missing)}")

    if long.empty:
        return pd.DataFrame(columns=[time_col])

    wide = long.pivot(index=time_col, columns=name_col, values=value_col)
    wide = wide.reindex(index=times, columns=names)
    wide.index.name = time_col
    wide.columns.name = None
    logger.debug(f"Pivoted {len(long)} rows -> {len(times)} rows x {len(names)} series")
    return wide.reset_index()
