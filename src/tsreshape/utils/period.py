"""Period label utilities - map "1956 Q1", "1991 Jul", "2020 W05" to dates"""
import numbers
import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd
from dateutil.relativedelta import relativedelta

UNITS = ('year', 'quarter', 'month', 'week', 'day')
CONVENTIONS = ('start', 'end')

# Month name mappings
MONTHS = {
    'january': 1, 'jan': 1,
    'february': 2, 'feb': 2,
    'march': 3, 'mar': 3,
    'april': 4, 'apr': 4,
    'may': 5,
    'june': 6, 'jun': 6,
    'july': 7, 'jul': 7,
    'august': 8, 'aug': 8,
    'september': 9, 'sep': 9, 'sept': 9,
    'october': 10, 'oct': 10,
    'november': 11, 'nov': 11,
    'december': 12, 'dec': 12,
}
MONTH_ABBR = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

# Longest first so "march" wins over "mar"
MONTH_PATTERN = '|'.join(sorted(MONTHS.keys(), key=len, reverse=True))

# Length of one period, used to find the last day
STEPS = {
    'year': relativedelta(years=1),
    'quarter': relativedelta(months=3),
    'month': relativedelta(months=1),
    'week': relativedelta(weeks=1),
    'day': relativedelta(days=1),
}

# pandas Period frequency prefix -> unit
PERIOD_FREQS = {'A': 'year', 'Y': 'year', 'Q': 'quarter', 'M': 'month', 'W': 'week', 'D': 'day'}

PeriodValue = Union[str, int, date, datetime, pd.Period, pd.Timestamp]


def _expand_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        year += 2000
    return year


def _quarter_start(year: int, quarter: int) -> date:
    return date(year, (quarter - 1) * 3 + 1, 1)


def _month_start(year: int, month: int) -> Optional[date]:
    if not 1 <= month <= 12:
        return None
    return date(year, month, 1)


def _week_start(year: int, week: int) -> Optional[date]:
    try:
        return date.fromisocalendar(year, week, 1)
    except ValueError:
        return None


def parse_period_label(text: str) -> Optional[Tuple[str, date]]:
    """
    Parse a period label into (unit, first day of the period).

    Handles:
    - 1956 Q1, 1956Q1, 1956-Q1, Q1 1956, Q1-56 (calendar quarters)
    - 1991 Jul, 1991 July, Jul 1991, 1991-07, 1991_07, 1991/07, 1991M07
    - 2020 W05, 2020-W05, 2020W5 (ISO weeks, Monday start)
    - 1965 (year)
    - 2020-01-31 (day)

    Returns None if the text is not a recognizable period.
    """
    if not isinstance(text, str):
        return None
    label = text.strip().lower()
    if not label:
        return None

    # Full ISO date must be checked before year-month
    match = re.match(r'^(\d{4})-(\d{1,2})-(\d{1,2})$', label)
    if match:
        try:
            return ('day', date(*(int(g) for g in match.groups())))
        except ValueError:
            return None

    match = re.match(r'^(\d{4})\s*[-_]?\s*w(\d{1,2})$', label)
    if match:
        start = _week_start(int(match.group(1)), int(match.group(2)))
        return ('week', start) if start else None

    match = re.match(r'^(\d{4})\s*[-_]?\s*q([1-4])$', label)
    if match:
        return ('quarter', _quarter_start(int(match.group(1)), int(match.group(2))))

    match = re.match(r'^q([1-4])\s*[-_]?\s*(\d{4}|\d{2})$', label)
    if match:
        return ('quarter', _quarter_start(_expand_year(match.group(2)), int(match.group(1))))

    match = re.match(rf'^(\d{{4}})\s*[-_/]?\s*({MONTH_PATTERN})\.?$', label)
    if match:
        return ('month', date(int(match.group(1)), MONTHS[match.group(2)], 1))

    match = re.match(rf'^({MONTH_PATTERN})\.?\s*[-_/]?\s*(\d{{4}}|\d{{2}})$', label)
    if match:
        return ('month', date(_expand_year(match.group(2)), MONTHS[match.group(1)], 1))

    match = re.match(r'^(\d{4})(?:\s*[-_/]\s*|\s*m\s*|\s+)(\d{1,2})$', label)
    if match:
        start = _month_start(int(match.group(1)), int(match.group(2)))
        return ('month', start) if start else None

    match = re.match(r'^(\d{4})$', label)
    if match:
        return ('year', date(int(match.group(1)), 1, 1))

    return None


def floor_date(value: date, unit: str) -> date:
    """Return the first day of the period of the given unit containing value."""
    if isinstance(value, datetime):
        value = value.date()
    if unit == 'year':
        return date(value.year, 1, 1)
    if unit == 'quarter':
        return _quarter_start(value.year, (value.month - 1) // 3 + 1)
    if unit == 'month':
        return value.replace(day=1)
    if unit == 'week':
        return value - timedelta(days=value.weekday())
    if unit == 'day':
        return value
    raise ValueError(f"Unknown unit: {unit!r} (expected one of {UNITS})")


def _period_unit(period: pd.Period) -> str:
    prefix = period.freqstr[:1].upper()
    if prefix not in PERIOD_FREQS:
        raise ValueError(f"Unsupported period frequency: {period.freqstr}")
    return PERIOD_FREQS[prefix]


def _resolve(value: PeriodValue, unit: Optional[str]) -> Tuple[str, date]:
    if value is pd.NaT:
        raise ValueError("Cannot normalize a missing time (NaT)")
    if isinstance(value, pd.Period):
        label_unit = _period_unit(value)
        start = value.start_time.date()
    elif isinstance(value, date):
        if unit is None:
            raise ValueError(f"A unit is required to normalize {value!r}")
        return unit, floor_date(value, unit)
    elif isinstance(value, numbers.Integral) and not isinstance(value, bool):
        label_unit, start = 'year', date(int(value), 1, 1)
    elif isinstance(value, str):
        parsed = parse_period_label(value)
        if parsed is None:
            raise ValueError(f"Unrecognized period label: {value!r}")
        label_unit, start = parsed
    else:
        raise ValueError(f"Cannot normalize {type(value).__name__} value {value!r}")

    if unit is not None and unit != label_unit:
        raise ValueError(f"Period {value!r} is a {label_unit}, not a {unit}")
    return label_unit, start


def normalize_time(
    period_value: PeriodValue, unit: Optional[str] = None, convention: str = 'start'
) -> date:
    """
    Map a period to a concrete calendar date.

    convention='start' returns the first day of the period, 'end' the last.
    With unit=None the unit is taken from the label; dates and timestamps
    need an explicit unit and are floored to the period containing them.

    Examples:
        normalize_time("1956 Q1") -> date(1956, 1, 1)
        normalize_time("1956 Q1", convention="end") -> date(1956, 3, 31)
        normalize_time("1991 Jul") -> date(1991, 7, 1)
        normalize_time("2020 W05") -> date(2020, 1, 27)
    """
    if unit is not None and unit not in UNITS:
        raise ValueError(f"Unknown unit: {unit!r} (expected one of {UNITS})")
    if convention not in CONVENTIONS:
        raise ValueError(f"Unknown convention: {convention!r} (expected one of {CONVENTIONS})")

    resolved_unit, start = _resolve(period_value, unit)
    if convention == 'start':
        return start
    return start + STEPS[resolved_unit] - relativedelta(days=1)


def normalize_series(
    values: Iterable[PeriodValue], unit: Optional[str] = None, convention: str = 'start'
) -> Union[pd.Series, List[date]]:
    """Apply normalize_time to every value, keeping the index of a Series."""
    if isinstance(values, pd.Series):
        return values.map(lambda v: normalize_time(v, unit, convention))
    return [normalize_time(v, unit, convention) for v in values]


def infer_unit(text: str) -> Optional[str]:
    """Get the unit of a period label, or None if it is not one."""
    parsed = parse_period_label(text)
    return parsed[0] if parsed else None


def format_period(value: date, unit: str) -> str:
    """Render the period containing value as its canonical label."""
    start = floor_date(value, unit)
    if unit == 'year':
        return f"{start.year}"
    if unit == 'quarter':
        return f"{start.year} Q{(start.month - 1) // 3 + 1}"
    if unit == 'month':
        return f"{start.year} {MONTH_ABBR[start.month - 1]}"
    if unit == 'week':
        iso_year, iso_week, _ = start.isocalendar()
        return f"{iso_year} W{iso_week:02d}"
    return start.isoformat()
