"""Utility functions"""
from .period import (
    UNITS,
    CONVENTIONS,
    parse_period_label,
    normalize_time,
    normalize_series,
    floor_date,
    infer_unit,
    format_period,
)
