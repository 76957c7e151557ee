import numpy as np
import pandas as pd
import pytest

from energy_analysis.pipeline import config
from energy_analysis.pipeline.aggregation import album_means, era_means, era_samples
from energy_analysis.pipeline.enrichment import add_release_year
from energy_analysis.pipeline.errors import ComputationError
from energy_analysis.pipeline.selection import select_tracks


@pytest.fixture
def tracks(sample_tracks):
    return select_tracks(add_release_year(sample_tracks))


def test_album_means_match_track_energies(tracks):
    albums = album_means(tracks)

    assert len(albums) == 11
    for row in albums.itertuples(index=False):
        album_tracks = tracks[tracks[config.ALBUM_COLUMN] == row.album_name]
        assert row.energy == pytest.approx(album_tracks[config.ENERGY_COLUMN].mean())
        assert row.n_tracks == len(album_tracks)
        assert row.release_year == config.ALBUM_YEARS[row.album_name]


def test_album_means_sorted_by_year(tracks):
    albums = album_means(tracks)

    years = albums[config.YEAR_COLUMN].tolist()
    assert years == sorted(years)
    assert albums[config.ALBUM_COLUMN].iloc[0] == "The Piper at the Gates of Dawn"


def test_aggregation_is_idempotent_and_pure(tracks):
    before = tracks.copy()

    first = album_means(tracks)
    second = album_means(tracks)

    pd.testing.assert_frame_equal(first, second)
    pd.testing.assert_frame_equal(era_means(tracks), era_means(tracks))
    pd.testing.assert_frame_equal(tracks, before)


def test_era_means_over_tracks_not_albums(tracks):
    eras = era_means(tracks).set_index(config.ERA_COLUMN)

    post = tracks[tracks[config.ERA_COLUMN] == config.POST_ERA]
    assert eras.loc[config.POST_ERA, "energy"] == pytest.approx(post[config.ENERGY_COLUMN].mean())
    assert eras.loc[config.PRE_ERA, "n_tracks"] == 15
    assert eras.loc[config.POST_ERA, "n_albums"] == 8


def test_era_means_order(tracks):
    assert era_means(tracks)[config.ERA_COLUMN].tolist() == [config.PRE_ERA, config.POST_ERA]


def test_pre_barrett_energy_is_higher(tracks):
    eras = era_means(tracks).set_index(config.ERA_COLUMN)

    assert eras.loc[config.PRE_ERA, "energy"] > eras.loc[config.POST_ERA, "energy"]


def test_empty_table_raises(tracks):
    empty = tracks.iloc[0:0]

    with pytest.raises(ComputationError):
        album_means(empty)
    with pytest.raises(ComputationError):
        era_means(empty)


def test_era_samples(tracks):
    pre, post = era_samples(tracks)

    assert len(pre) == 15
    assert len(post) == 32
    assert isinstance(pre, np.ndarray)
    assert pre.sum() == pytest.approx(
        tracks.loc[tracks[config.ERA_COLUMN] == config.PRE_ERA, config.ENERGY_COLUMN].sum()
    )


def test_era_samples_missing_era_is_empty(tracks):
    only_post = tracks[tracks[config.ERA_COLUMN] == config.POST_ERA]

    pre, post = era_samples(only_post)

    assert len(pre) == 0
    assert len(post) == 32
