"""TimeSeriesTable - a wide table with a known time column"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .errors import ShapeError
from .transform.reshape import validate_wide, to_long, to_wide
from .utils.period import UNITS, normalize_series


@dataclass
class TimeSeriesTable:
    """Wide table: one row per time key, one numeric column per series"""
    frame: pd.DataFrame
    time_col: str
    unit: Optional[str] = None      # "quarter", "month", ... when known

    def __post_init__(self):
        if self.unit is not None and self.unit not in UNITS:
            raise ValueError(f"Unknown unit: {self.unit!r} (expected one of {UNITS})")
        validate_wide(self.frame, self.time_col)
        self.frame = self.frame.reset_index(drop=True)

    def __len__(self) -> int:
        return len(self.frame)

    @property
    def series_names(self) -> List[str]:
        return [c for c in self.frame.columns if c != self.time_col]

    @classmethod
    def from_records(
        cls, records: Iterable[Dict[str, Any]], time_col: str, unit: Optional[str] = None
    ) -> 'TimeSeriesTable':
        """Build from row dicts; every row must carry the same keys."""
        records = list(records)
        if not records:
            return cls(pd.DataFrame(columns=[time_col]), time_col, unit)

        columns = list(records[0].keys())
        if time_col not in columns:
            raise ShapeError(f"Time column '{time_col}' not in record keys {columns}")
        expected = set(columns)
        for i, record in enumerate(records):
            if set(record) != expected:
                extra = sorted(map(str, set(record) - expected))
                missing = sorted(map(str, expected - set(record)))
                raise ShapeError(f"Ragged record {i}: missing {missing}, unexpected {extra}")

        return cls(pd.DataFrame.from_records(records, columns=columns), time_col, unit)

    def to_records(self) -> List[Dict[str, Any]]:
        return self.frame.to_dict(orient='records')

    def to_long(self, name_col: str = 'name', value_col: str = 'value') -> pd.DataFrame:
        return to_long(self.frame, self.time_col, self.series_names,
                       name_col=name_col, value_col=value_col)

    @classmethod
    def from_long(
        cls, long: pd.DataFrame, time_col: str, name_col: str = 'name',
        value_col: str = 'value', unit: Optional[str] = None
    ) -> 'TimeSeriesTable':
        return cls(to_wide(long, time_col, name_col, value_col), time_col, unit)

    def normalized(self, unit: Optional[str] = None, convention: str = 'start') -> 'TimeSeriesTable':
        """Copy with the time column mapped to dates."""
        unit = unit or self.unit
        if unit is None:
            raise ValueError("A unit is required to normalize the time column")
        frame = self.frame.copy()
        frame[self.time_col] = normalize_series(frame[self.time_col], unit, convention)
        return TimeSeriesTable(frame, self.time_col, unit)
