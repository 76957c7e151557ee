"""Release-year enrichment from the static album lookup."""

import logging
from typing import List, Mapping

import pandas as pd

from energy_analysis.pipeline import config
from energy_analysis.pipeline.errors import MappingGapError

logger = logging.getLogger(__name__)


def add_release_year(
    df: pd.DataFrame,
    album_years: Mapping[str, int] = config.ALBUM_YEARS,
) -> pd.DataFrame:
    """Return a copy of ``df`` with a ``release_year`` column.

    Albums without a mapping entry get a missing year (``<NA>``) instead of
    raising; use validate_mapping_coverage() to fail fast on such gaps.
    """
    enriched = df.copy()
    enriched[config.YEAR_COLUMN] = (
        enriched[config.ALBUM_COLUMN].map(dict(album_years)).astype("Int64")
    )

    n_missing = int(enriched[config.YEAR_COLUMN].isna().sum())
    if n_missing:
        logger.warning(f"{n_missing} tracks have no release year mapping")
    return enriched


def find_unmapped_albums(
    df: pd.DataFrame,
    album_years: Mapping[str, int] = config.ALBUM_YEARS,
) -> List[str]:
    """Distinct album names in ``df`` that are absent from ``album_years``."""
    albums = df[config.ALBUM_COLUMN].dropna().unique()
    return sorted(name for name in albums if name not in album_years)


def validate_mapping_coverage(
    df: pd.DataFrame,
    album_years: Mapping[str, int] = config.ALBUM_YEARS,
) -> None:
    """Raise MappingGapError if any album in ``df`` has no release year."""
    missing = find_unmapped_albums(df, album_years)
    if missing:
        raise MappingGapError(missing)
    logger.info(f"All {df[config.ALBUM_COLUMN].nunique()} albums have a release year")
