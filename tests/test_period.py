"""Test period label parsing and normalization."""
from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from tsreshape.utils.period import (
    parse_period_label,
    normalize_time,
    normalize_series,
    floor_date,
    infer_unit,
    format_period,
)


class TestParsePeriodLabel:

    def test_quarters(self):
        assert parse_period_label("1956 Q1") == ('quarter', date(1956, 1, 1))
        assert parse_period_label("1956Q2") == ('quarter', date(1956, 4, 1))
        assert parse_period_label("1956-Q3") == ('quarter', date(1956, 7, 1))
        assert parse_period_label("Q4 1956") == ('quarter', date(1956, 10, 1))

    def test_two_digit_quarter_year(self):
        assert parse_period_label("Q1-25") == ('quarter', date(2025, 1, 1))

    def test_month_names(self):
        assert parse_period_label("1991 Jul") == ('month', date(1991, 7, 1))
        assert parse_period_label("1991 July") == ('month', date(1991, 7, 1))
        assert parse_period_label("Jul 1991") == ('month', date(1991, 7, 1))
        assert parse_period_label("March 2020") == ('month', date(2020, 3, 1))
        assert parse_period_label("nov25") == ('month', date(2025, 11, 1))

    def test_numeric_months(self):
        assert parse_period_label("1991-07") == ('month', date(1991, 7, 1))
        assert parse_period_label("1991_07") == ('month', date(1991, 7, 1))
        assert parse_period_label("1991/07") == ('month', date(1991, 7, 1))
        assert parse_period_label("1991M07") == ('month', date(1991, 7, 1))

    def test_weeks(self):
        assert parse_period_label("2020 W05") == ('week', date(2020, 1, 27))
        assert parse_period_label("2020-W05") == ('week', date(2020, 1, 27))
        assert parse_period_label("2020W5") == ('week', date(2020, 1, 27))
        # ISO week 1 of 2020 starts in December 2019
        assert parse_period_label("2020 W01") == ('week', date(2019, 12, 30))

    def test_year_and_day(self):
        assert parse_period_label("1965") == ('year', date(1965, 1, 1))
        assert parse_period_label("2020-01-31") == ('day', date(2020, 1, 31))

    def test_surrounding_whitespace(self):
        assert parse_period_label("  1956 Q1 ") == ('quarter', date(1956, 1, 1))

    def test_invalid(self):
        assert parse_period_label("") is None
        assert parse_period_label("no date here") is None
        assert parse_period_label("1991-13") is None
        assert parse_period_label("2021 W53") is None
        assert parse_period_label("2020-02-30") is None
        assert parse_period_label("1956 Q5") is None
        assert parse_period_label(None) is None


class TestNormalizeTime:

    def test_start_convention(self):
        assert normalize_time("1956 Q1") == date(1956, 1, 1)
        assert normalize_time("1991 Jul") == date(1991, 7, 1)
        assert normalize_time("2020 W05") == date(2020, 1, 27)
        assert normalize_time("1965") == date(1965, 1, 1)

    def test_end_convention(self):
        assert normalize_time("1956 Q1", convention='end') == date(1956, 3, 31)
        assert normalize_time("1956 Q4", convention='end') == date(1956, 12, 31)
        assert normalize_time("1991 Jul", convention='end') == date(1991, 7, 31)
        assert normalize_time("1992 Feb", convention='end') == date(1992, 2, 29)
        assert normalize_time("2020 W05", convention='end') == date(2020, 2, 2)
        assert normalize_time("1965", convention='end') == date(1965, 12, 31)
        assert normalize_time("2020-01-31", convention='end') == date(2020, 1, 31)

    def test_explicit_unit_must_match(self):
        assert normalize_time("1956 Q1", unit='quarter') == date(1956, 1, 1)
        with pytest.raises(ValueError, match="quarter"):
            normalize_time("1956 Q1", unit='month')

    def test_integer_year(self):
        assert normalize_time(1965) == date(1965, 1, 1)
        assert normalize_time(np.int64(1965), convention='end') == date(1965, 12, 31)

    def test_pandas_period(self):
        assert normalize_time(pd.Period('1956Q1', freq='Q')) == date(1956, 1, 1)
        assert normalize_time(pd.Period('1956Q1', freq='Q'), convention='end') == date(1956, 3, 31)
        assert normalize_time(pd.Period('1991-07', freq='M')) == date(1991, 7, 1)

    def test_dates_are_floored(self):
        assert normalize_time(date(1956, 2, 15), unit='quarter') == date(1956, 1, 1)
        assert normalize_time(datetime(1956, 2, 15, 13, 30), unit='quarter', convention='end') == date(1956, 3, 31)
        assert normalize_time(pd.Timestamp('1991-07-15'), unit='month') == date(1991, 7, 1)
        assert normalize_time(date(2020, 1, 29), unit='week') == date(2020, 1, 27)

    def test_dates_need_unit(self):
        with pytest.raises(ValueError, match="unit is required"):
            normalize_time(date(1956, 2, 15))

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            normalize_time("not a period")
        with pytest.raises(ValueError):
            normalize_time(float('nan'))
        with pytest.raises(ValueError):
            normalize_time(True)
        with pytest.raises(ValueError, match="NaT"):
            normalize_time(pd.NaT, unit='month')
        with pytest.raises(ValueError, match="convention"):
            normalize_time("1956 Q1", convention='middle')
        with pytest.raises(ValueError, match="unit"):
            normalize_time("1956 Q1", unit='decade')

    def test_deterministic(self):
        assert normalize_time("1956 Q3", convention='end') == normalize_time("1956 Q3", convention='end')


class TestNormalizeSeries:

    def test_series_keeps_index(self):
        values = pd.Series(["1956 Q1", "1956 Q2"], index=[10, 11])
        result = normalize_series(values)
        assert result.index.tolist() == [10, 11]
        assert result.tolist() == [date(1956, 1, 1), date(1956, 4, 1)]

    def test_list(self):
        assert normalize_series(["1991 Jul", "1991 Aug"], convention='end') == [
            date(1991, 7, 31), date(1991, 8, 31)
        ]


class TestFormatPeriod:

    def test_canonical_labels(self):
        assert format_period(date(1956, 2, 1), 'quarter') == "1956 Q1"
        assert format_period(date(1991, 7, 1), 'month') == "1991 Jul"
        assert format_period(date(2020, 1, 27), 'week') == "2020 W05"
        assert format_period(date(1965, 6, 30), 'year') == "1965"
        assert format_period(date(2020, 1, 31), 'day') == "2020-01-31"

    def test_week_uses_iso_year(self):
        assert format_period(date(2021, 1, 1), 'week') == "2020 W53"

    def test_labels_survive_normalization(self):
        for label in ["1956 Q3", "1991 Dec", "2020 W05", "1965", "2020-02-29"]:
            assert format_period(normalize_time(label), infer_unit(label)) == label

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            floor_date(date(2020, 1, 1), 'decade')


class TestInferUnit:

    def test_units(self):
        assert infer_unit("1956 Q1") == 'quarter'
        assert infer_unit("1991 Jul") == 'month'
        assert infer_unit("2020 W05") == 'week'
        assert infer_unit("1965") == 'year'
        assert infer_unit("Beer") is None
