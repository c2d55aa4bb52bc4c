"""Wide/long reshaping and period normalization for time-series tables"""
from .errors import ShapeError
from .table import TimeSeriesTable
from .config import ReshapeConfig
from .transform import to_long, to_wide, add_lags, lag_frame, add_seasonal_columns, detect_and_unpivot
from .utils.period import normalize_time, format_period, parse_period_label
from .loader import load_table
