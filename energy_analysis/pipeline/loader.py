"""Track table loading.

Reads a delimited audio-features export (one row per song) into a DataFrame
and checks the columns the pipeline depends on.
"""

import csv
import logging
from pathlib import Path
from typing import Union

import pandas as pd

from energy_analysis.pipeline import config
from energy_analysis.pipeline.errors import LoadError

logger = logging.getLogger(__name__)


def _sniff_delimiter(path: Path) -> str:
    """Guess the delimiter from the header line (comma, tab or semicolon)."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        header = f.readline()
    try:
        return csv.Sniffer().sniff(header, delimiters=",\t;").delimiter
    except csv.Error:
        return ","


def _validate_schema(df: pd.DataFrame, path: Path) -> pd.DataFrame:
    missing = [col for col in config.REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise LoadError(f"{path}: missing required column(s) {missing}")

    if df[config.ALBUM_COLUMN].isna().any():
        raise LoadError(f"{path}: {config.ALBUM_COLUMN} has missing values")

    energy = pd.to_numeric(df[config.ENERGY_COLUMN], errors="coerce")
    if energy.isna().any():
        bad_rows = energy[energy.isna()].index.tolist()[:5]
        raise LoadError(f"{path}: non-numeric or missing {config.ENERGY_COLUMN} at rows {bad_rows}")

    if ((energy < 0) | (energy > 1)).any():
        raise LoadError(f"{path}: {config.ENERGY_COLUMN} values must lie in [0, 1]")

    df = df.copy()
    df[config.ALBUM_COLUMN] = df[config.ALBUM_COLUMN].astype(str)
    df[config.ENERGY_COLUMN] = energy.astype(float)
    return df


def load_tracks(path: Union[str, Path] = config.DEFAULT_DATA_PATH) -> pd.DataFrame:
    """Load the track-level audio features table.

    Args:
        path: Path to a comma, tab or semicolon separated file

    Returns:
        DataFrame with one row per track; ``album_name`` and ``energy`` are
        guaranteed present, other columns are passed through untouched

    Raises:
        LoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.is_file():
        raise LoadError(f"Track file not found: {path}")

    try:
        delimiter = _sniff_delimiter(path)
        df = pd.read_csv(path, sep=delimiter)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not parse {path}: {e}") from e
    except OSError as e:
        raise LoadError(f"Could not read {path}: {e}") from e

    df = _validate_schema(df, path)

    logger.info(f"Loaded {len(df)} tracks across {df[config.ALBUM_COLUMN].nunique()} albums from {path}")
    return df
