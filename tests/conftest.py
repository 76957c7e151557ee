from pathlib import Path

import pandas as pd
import pytest

from energy_analysis.pipeline import config

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_csv() -> Path:
    """Full discography sample: all 15 mapped albums, several tracks each."""
    return FIXTURES / "discography_sample.csv"


@pytest.fixture
def sample_tracks(sample_csv) -> pd.DataFrame:
    return pd.read_csv(sample_csv)


@pytest.fixture
def small_tracks() -> pd.DataFrame:
    """Two albums in scope, one excluded, one after the cutoff, one unmapped."""
    return pd.DataFrame({
        "track_name": ["t1", "t2", "t3", "t4", "t5", "t6", "t7", "t8"],
        config.ALBUM_COLUMN: [
            "The Piper at the Gates of Dawn",
            "The Piper at the Gates of Dawn",
            "Meddle",
            "Meddle",
            "Meddle",
            "Ummagumma",
            "The Division Bell",
            "Relics",
        ],
        config.ENERGY_COLUMN: [0.7, 0.5, 0.2, 0.4, 0.3, 0.1, 0.6, 0.9],
    })


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(content: str, name: str = "tracks.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
