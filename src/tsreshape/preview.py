"""Render the head of a table to the terminal."""
from typing import Optional

import pandas as pd
from rich.table import Table

from .console import console


def _cell(value) -> str:
    if pd.isna(value):
        return "-"
    return str(value)


def display_table(df: pd.DataFrame, title: Optional[str] = None, max_rows: int = 10) -> Table:
    """Display the first max_rows rows of a frame with a row/column count caption."""
    table = Table(title=title, caption=f"{len(df)} rows x {len(df.columns)} cols")
    for col in df.columns:
        justify = "right" if pd.api.types.is_numeric_dtype(df[col]) else "left"
        table.add_column(str(col), justify=justify)

    for row in df.head(max_rows).itertuples(index=False, name=None):
        table.add_row(*(_cell(v) for v in row))
    if len(df) > max_rows:
        table.add_row(*(["[muted]...[/]"] * len(df.columns)))

    console.print(table)
    return table
