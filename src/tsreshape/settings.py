"""Environment settings"""
import os

from dotenv import load_dotenv

from .utils.period import CONVENTIONS

# Load .env file if present
load_dotenv()


def get_data_dir() -> str:
    """Base directory for relative dataset paths."""
    return os.getenv('TSRESHAPE_DATA_DIR', 'data')


def get_default_convention() -> str:
    """Whether periods map to their first or last day unless told otherwise."""
    convention = os.getenv('TSRESHAPE_TIME_CONVENTION', 'start').strip().lower()
    if convention not in CONVENTIONS:
        raise ValueError(f"TSRESHAPE_TIME_CONVENTION must be one of {CONVENTIONS}, got {convention!r}")
    return convention
