"""Pytest configuration and shared fixtures for the tsreshape test suite."""

import pandas as pd
import pytest


@pytest.fixture
def production_wide():
    """A slice of quarterly Australian production, one column per series."""
    return pd.DataFrame({
        'Quarter': ['1956 Q1', '1956 Q2', '1956 Q3', '1956 Q4'],
        'Beer': [284, 213, 227, 308],
        'Tobacco': [5225.0, 5178.0, 5297.0, 5681.0],
        'Bricks': [189, 204, 208, 197],
    })


@pytest.fixture
def scripts_wide():
    """Monthly script counts labelled by month name."""
    return pd.DataFrame({
        'Month': ['1991 Jul', '1991 Aug', '1991 Sep'],
        'Concessional': [1.2, 1.4, 1.1],
        'General': [0.3, 0.2, 0.4],
    })
