import pytest

from energy_analysis.pipeline import config
from energy_analysis.pipeline.errors import LoadError
from energy_analysis.pipeline.loader import load_tracks


def test_loads_sample_discography(sample_csv):
    df = load_tracks(sample_csv)

    assert len(df) == 54
    assert df[config.ALBUM_COLUMN].nunique() == 15
    assert df[config.ENERGY_COLUMN].dtype == float
    # Extra columns pass through
    assert "valence" in df.columns


def test_tab_separated_file(write_csv):
    path = write_csv("album_name\tenergy\nMeddle\t0.4\nAnimals\t0.5\n", "tracks.tsv")

    df = load_tracks(path)

    assert df[config.ALBUM_COLUMN].tolist() == ["Meddle", "Animals"]
    assert df[config.ENERGY_COLUMN].tolist() == [0.4, 0.5]


def test_missing_file_raises(tmp_path):
    with pytest.raises(LoadError, match="not found"):
        load_tracks(tmp_path / "nope.csv")


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(LoadError):
        load_tracks(tmp_path)


def test_empty_file_raises(write_csv):
    with pytest.raises(LoadError, match="Could not parse"):
        load_tracks(write_csv(""))


def test_ragged_rows_raise(write_csv):
    path = write_csv("album_name,energy\nMeddle,0.4\nAnimals,0.5,extra,fields\n")

    with pytest.raises(LoadError, match="Could not parse"):
        load_tracks(path)


def test_missing_energy_column(write_csv):
    path = write_csv("album_name,valence\nMeddle,0.4\n")

    with pytest.raises(LoadError, match="energy"):
        load_tracks(path)


def test_non_numeric_energy(write_csv):
    path = write_csv("album_name,energy\nMeddle,loud\n")

    with pytest.raises(LoadError, match="non-numeric"):
        load_tracks(path)


def test_energy_out_of_range(write_csv):
    path = write_csv("album_name,energy\nMeddle,1.4\n")

    with pytest.raises(LoadError, match=r"\[0, 1\]"):
        load_tracks(path)


def test_missing_album_name(write_csv):
    path = write_csv("album_name,energy\n,0.4\nMeddle,0.5\n")

    with pytest.raises(LoadError, match="album_name"):
        load_tracks(path)


def test_load_error_is_an_ioerror(tmp_path):
    with pytest.raises(IOError):
        load_tracks(tmp_path / "nope.csv")
