"""Load CSV/Excel files into TimeSeriesTables"""
import logging
import os
from typing import Optional, Union

import pandas as pd

from .settings import get_data_dir
from .table import TimeSeriesTable

logger = logging.getLogger(__name__)


def resolve_data_path(name: str) -> str:
    """Resolve a relative dataset name against TSRESHAPE_DATA_DIR."""
    name = os.fspath(name)
    if os.path.isabs(name):
        return name
    return os.path.join(get_data_dir(), name)


def read_table(path: str, sheet_name: Optional[Union[str, int]] = None) -> pd.DataFrame:
    """Read a CSV or Excel file into a DataFrame."""
    ext = os.path.splitext(path)[1].lower()

    if ext == '.csv':
        return pd.read_csv(path)
    elif ext in ['.xlsx', '.xls']:
        return pd.read_excel(path, sheet_name=sheet_name or 0)
    raise ValueError(f"Unsupported file type: {ext}")


def load_table(
    path: str,
    time_col: str,
    unit: Optional[str] = None,
    convention: str = 'start',
    sheet_name: Optional[Union[str, int]] = None,
) -> TimeSeriesTable:
    """
    Load a wide dataset file as a TimeSeriesTable.

    With unit given, the time column is normalized to dates.
    Raises ShapeError if the file breaks the wide-table invariants.
    """
    local_path = resolve_data_path(path)
    df = read_table(local_path, sheet_name=sheet_name)
    logger.debug(f"Read {os.path.basename(local_path)}: {df.shape[0]} rows x {df.shape[1]} cols")

    # Validate raw keys first so a blank time cell is a ShapeError
    table = TimeSeriesTable(df, time_col, unit)
    if unit is not None:
        table = table.normalized(convention=convention)
    return table
