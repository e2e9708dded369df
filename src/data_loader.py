import logging
from pathlib import Path

import pandas as pd

from config import DATA_PATH, INTEGER_FIELDS, NULLABLE_FIELDS

logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    """The listings file could not be read."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read listings from {self.path}: {reason}")


def clean_cell(value):  # Takes a raw cell like ' "Brooklyn" '
    return value.replace('"', '').strip()  # Drop every double quote, then trim


def coerce_fields(df):
    """Convert the known numeric columns; everything else stays text."""
    df = df.copy()
    for col in INTEGER_FIELDS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors='coerce').astype(float).fillna(0.0)  # Bad or empty -> 0
    for col in NULLABLE_FIELDS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors='coerce').astype(float)  # Bad or empty -> NaN, never 0
    return df


def parse_listings(text):
    """
    Parse raw CSV text into a DataFrame with one row per non-blank line.

    Splits on the literal comma only. Quoted fields containing commas are
    not supported and will shift the remaining columns of that row.
    """
    lines = text.split('\n')  # Only newline ends a row; a trailing \r is trimmed per cell
    if not lines or not lines[0].strip():  # No header means no listings
        return pd.DataFrame()

    headers = [clean_cell(h) for h in lines[0].split(',')]
    rows = []
    for line in lines[1:]:
        if not line.strip():  # Skip blank lines entirely
            continue
        values = [clean_cell(v) for v in line.split(',')]
        values = (values + [''] * len(headers))[:len(headers)]  # Pad short rows, cut long ones
        rows.append(values)

    df = pd.DataFrame(rows, columns=headers)
    df = df.loc[:, ~df.columns.duplicated(keep='last')]  # Repeated header: the last column wins
    return coerce_fields(df)


def read_source(path):
    """Read the whole file as UTF-8 text (a leading BOM is dropped)."""
    try:
        return Path(path).read_text(encoding='utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, e) from e


# Define a function called load_listings
def load_listings(path=None):
    """
    Load rental listings from the local CSV file.
    """
    filepath = path or DATA_PATH  # Path to our data file
    text = read_source(filepath)
    df = parse_listings(text)
    logger.info("Loaded %d listings from %s", len(df), filepath)
    return df
