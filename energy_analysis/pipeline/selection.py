"""Scope filtering and era labelling."""

import logging
from typing import Collection

import numpy as np
import pandas as pd

from energy_analysis.pipeline import config

logger = logging.getLogger(__name__)


def filter_scope(
    df: pd.DataFrame,
    year_cutoff: int = config.YEAR_CUTOFF,
    excluded_albums: Collection[str] = config.EXCLUDED_ALBUMS,
) -> pd.DataFrame:
    """Keep tracks released before ``year_cutoff`` that are not on an excluded album.

    A missing release year never satisfies the cutoff, so unmapped albums
    are dropped here.
    """
    before_cutoff = df[config.YEAR_COLUMN].lt(year_cutoff).fillna(False).astype(bool)
    not_excluded = ~df[config.ALBUM_COLUMN].isin(list(excluded_albums))

    kept = df[before_cutoff & not_excluded].copy()
    logger.info(
        f"Scope filter kept {len(kept)}/{len(df)} tracks "
        f"(year < {year_cutoff}, excluding {sorted(excluded_albums)})"
    )
    return kept


def assign_era(
    df: pd.DataFrame,
    pre_albums: Collection[str] = config.PRE_BARRETT_ALBUMS,
) -> pd.DataFrame:
    """Return a copy of ``df`` with an ``era`` column (Pre-Barrett / Post-Barrett)."""
    labelled = df.copy()
    is_pre = labelled[config.ALBUM_COLUMN].isin(list(pre_albums))
    labelled[config.ERA_COLUMN] = np.where(is_pre, config.PRE_ERA, config.POST_ERA)
    return labelled


def select_tracks(
    df: pd.DataFrame,
    year_cutoff: int = config.YEAR_CUTOFF,
    excluded_albums: Collection[str] = config.EXCLUDED_ALBUMS,
    pre_albums: Collection[str] = config.PRE_BARRETT_ALBUMS,
) -> pd.DataFrame:
    """Filter to the analysis scope, then label eras."""
    scoped = filter_scope(df, year_cutoff=year_cutoff, excluded_albums=excluded_albums)
    labelled = assign_era(scoped, pre_albums=pre_albums)

    counts = labelled[config.ERA_COLUMN].value_counts()
    logger.info(
        f"Era split: {counts.get(config.PRE_ERA, 0)} {config.PRE_ERA}, "
        f"{counts.get(config.POST_ERA, 0)} {config.POST_ERA} tracks"
    )
    return labelled
