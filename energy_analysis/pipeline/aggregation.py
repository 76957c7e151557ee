"""Album-level and era-level energy means."""

import logging
from typing import Tuple

import numpy as np
import pandas as pd

from energy_analysis.pipeline import config
from energy_analysis.pipeline.errors import ComputationError

logger = logging.getLogger(__name__)


def _require_tracks(df: pd.DataFrame, what: str) -> None:
    if df.empty:
        raise ComputationError(f"Cannot compute {what}: no tracks left after filtering")


def album_means(df: pd.DataFrame) -> pd.DataFrame:
    """Mean energy per (album, release year, era).

    Returns:
        DataFrame with columns album_name, release_year, era, energy, n_tracks,
        sorted by release year then album name

    Raises:
        ComputationError: If ``df`` has no rows
    """
    _require_tracks(df, "album means")

    albums = (
        df.groupby([config.ALBUM_COLUMN, config.YEAR_COLUMN, config.ERA_COLUMN], as_index=False)
        .agg(
            energy=(config.ENERGY_COLUMN, "mean"),
            n_tracks=(config.ENERGY_COLUMN, "size"),
        )
        .sort_values([config.YEAR_COLUMN, config.ALBUM_COLUMN])
        .reset_index(drop=True)
    )

    logger.info(f"Computed mean energy for {len(albums)} albums")
    return albums


def era_means(df: pd.DataFrame) -> pd.DataFrame:
    """Mean energy per era over all retained tracks (not over album means).

    Raises:
        ComputationError: If ``df`` has no rows
    """
    _require_tracks(df, "era means")

    eras = df.groupby(config.ERA_COLUMN).agg(
        energy=(config.ENERGY_COLUMN, "mean"),
        n_tracks=(config.ENERGY_COLUMN, "size"),
        n_albums=(config.ALBUM_COLUMN, "nunique"),
    )
    present = [era for era in config.ERA_ORDER if era in eras.index]
    eras = eras.loc[present].reset_index()

    for row in eras.itertuples(index=False):
        logger.info(f"{row.era}: mean energy {row.energy:.3f} over {row.n_tracks} tracks")
    return eras


def era_samples(df: pd.DataFrame) -> Tuple[np.ndarray, np.ndarray]:
    """Track-level energy values for the (pre, post) eras."""
    energy_by_era = df.groupby(config.ERA_COLUMN)[config.ENERGY_COLUMN]
    samples = {era: values.to_numpy(dtype=float) for era, values in energy_by_era}
    empty = np.array([], dtype=float)
    return samples.get(config.PRE_ERA, empty), samples.get(config.POST_ERA, empty)
