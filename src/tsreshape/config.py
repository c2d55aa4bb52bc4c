"""Reshape configuration dataclass"""
from dataclasses import dataclass, field, asdict
from typing import List, Optional
import json

import pandas as pd

from .settings import get_default_convention
from .transform.reshape import to_long, to_wide
from .utils.period import CONVENTIONS, UNITS


@dataclass
class ReshapeConfig:
    """How a dataset moves between wide and long format"""
    time_col: str                   # "Quarter"
    name_col: str = 'name'          # long-format series name column
    value_col: str = 'value'        # long-format value column
    unit: Optional[str] = None      # "quarter", "month", ... None keeps raw keys
    convention: str = field(default_factory=get_default_convention)
    value_cols: Optional[List[str]] = None  # None = all non-time columns

    def __post_init__(self):
        if self.unit is not None and self.unit not in UNITS:
            raise ValueError(f"Unknown unit: {self.unit!r} (expected one of {UNITS})")
        if self.convention not in CONVENTIONS:
            raise ValueError(f"Unknown convention: {self.convention!r} (expected one of {CONVENTIONS})")

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict) -> 'ReshapeConfig':
        # Older configs may omit optional fields
        return cls(
            time_col=data['time_col'],
            name_col=data.get('name_col', 'name'),
            value_col=data.get('value_col', 'value'),
            unit=data.get('unit'),
            convention=data.get('convention') or get_default_convention(),
            value_cols=data.get('value_cols'),
        )

    @classmethod
    def from_json(cls, json_str: str) -> 'ReshapeConfig':
        return cls.from_dict(json.loads(json_str))

    def to_long(self, wide: pd.DataFrame) -> pd.DataFrame:
        return to_long(wide, self.time_col, self.value_cols, name_col=self.name_col,
                       value_col=self.value_col, unit=self.unit, convention=self.convention)

    def to_wide(self, long: pd.DataFrame) -> pd.DataFrame:
        return to_wide(long, self.time_col, self.name_col, self.value_col)
