"""Derived frames for lag, seasonal and subseries charts."""
import numbers
from typing import Iterable, List, Optional

import pandas as pd

from ..errors import ShapeError
from ..utils.period import normalize_time

# Lag plots show lags 1..9 by default
DEFAULT_LAGS = range(1, 10)

# Calendar part used as the season for each unit
SEASON_PARTS = {'quarter': 'quarter', 'month': 'month', 'day': 'dayofyear'}


def _check_lags(lags: Iterable[int]) -> List[int]:
    lags = list(lags)
    bad = [k for k in lags
           if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 1]
    if not lags or bad:
        raise ValueError(f"Lags must be positive integers, got {lags}")
    return [int(k) for k in lags]


def add_lags(
    df: pd.DataFrame,
    value_col: str,
    lags: Iterable[int] = DEFAULT_LAGS,
    time_col: Optional[str] = None,
    group_col: Optional[str] = None,
) -> pd.DataFrame:
    """
    Add lag_k columns holding value_col shifted k rows back.

    Rows are sorted by time_col when given. With group_col (long tables)
    each series is lagged on its own.
    """
    lags = _check_lags(lags)
    needed = [c for c in (value_col, time_col, group_col) if c is not None]
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise ShapeError(f"Columns not found: {missing}")
    clash = [f"lag_{k}" for k in lags if f"lag_{k}" in df.columns]
    if clash:
        raise ShapeError(f"Input already has columns {clash}")

    out = df.sort_values(time_col, kind='stable') if time_col else df.copy()
    source = out.groupby(group_col, sort=False)[value_col] if group_col else out[value_col]
    for k in lags:
        out[f"lag_{k}"] = source.shift(k)
    return out.reset_index(drop=True)


def lag_frame(
    df: pd.DataFrame,
    value_col: str,
    lags: Iterable[int] = DEFAULT_LAGS,
    time_col: Optional[str] = None,
    group_col: Optional[str] = None,
) -> pd.DataFrame:
    """
    Long layout for a lag plot grid: one row per (observation, lag).

    Columns: the input columns, 'lag' (int) and 'lagged'.
    Observations without a value k rows back are dropped.
    """
    clash = [c for c in ('lag', 'lagged') if c in df.columns]
    if clash:
        raise ShapeError(f"Input already has columns {clash}")

    lags = _check_lags(lags)
    lagged = add_lags(df, value_col, lags, time_col=time_col, group_col=group_col)
    lag_cols = [f"lag_{k}" for k in lags]
    id_cols = [c for c in lagged.columns if c not in lag_cols]

    long = pd.melt(lagged, id_vars=id_cols, value_vars=lag_cols,
                   var_name='lag', value_name='lagged')
    long['lag'] = long['lag'].str.slice(len('lag_')).astype(int)
    return long.dropna(subset=['lagged']).reset_index(drop=True)


def add_seasonal_columns(
    df: pd.DataFrame,
    time_col: str,
    unit: str,
    year_col: str = 'year',
    season_col: str = 'season',
) -> pd.DataFrame:
    """
    Add the calendar year and the position within the year.

    Season is the quarter (1-4), month (1-12), ISO week (1-53) or day of year.
    Weekly data uses the ISO year so week 1 never lands in the previous December.
    """
    if unit == 'year':
        raise ValueError("Yearly data has no season")
    if time_col not in df.columns:
        raise ShapeError(f"Time column not found: {time_col}")

    stamps = pd.to_datetime(df[time_col].map(lambda v: normalize_time(v, unit)))
    out = df.copy()
    if unit == 'week':
        iso = stamps.dt.isocalendar()
        out[year_col] = iso['year'].astype(int)
        out[season_col] = iso['week'].astype(int)
    else:
        out[year_col] = stamps.dt.year
        out[season_col] = getattr(stamps.dt, SEASON_PARTS[unit])
    return out
