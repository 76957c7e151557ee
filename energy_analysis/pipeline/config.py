#!/usr/bin/env python3
"""Centralized configuration for the energy analysis pipeline.

This module is the single source of truth for the static lookup tables
(album release years, era membership, exclusions) and the constants shared
by the CLI (run_analysis.py) and the pipeline stages.
"""

from typing import Dict, FrozenSet

# =============================================================================
# INPUT SCHEMA
# =============================================================================

ALBUM_COLUMN = "album_name"
ENERGY_COLUMN = "energy"
YEAR_COLUMN = "release_year"
ERA_COLUMN = "era"

REQUIRED_COLUMNS = (ALBUM_COLUMN, ENERGY_COLUMN)

DEFAULT_DATA_PATH = "data/pink_floyd_audio_features.csv"


# =============================================================================
# ALBUM LOOKUPS
# =============================================================================

# Studio album -> original release year
ALBUM_YEARS: Dict[str, int] = {
    "The Piper at the Gates of Dawn": 1967,
    "A Saucerful of Secrets": 1968,
    "More": 1969,
    "Ummagumma": 1969,
    "Atom Heart Mother": 1970,
    "Meddle": 1971,
    "Obscured by Clouds": 1972,
    "The Dark Side of the Moon": 1973,
    "Wish You Were Here": 1975,
    "Animals": 1977,
    "The Wall": 1979,
    "The Final Cut": 1983,
    "A Momentary Lapse of Reason": 1987,
    "The Division Bell": 1994,
    "The Endless River": 2014,
}

# Albums recorded while Barrett's songwriting still shaped the band
PRE_BARRETT_ALBUMS: FrozenSet[str] = frozenset({
    "The Piper at the Gates of Dawn",
    "A Saucerful of Secrets",
    "More",
})

# Half-live double album, not comparable with the studio records
EXCLUDED_ALBUMS: FrozenSet[str] = frozenset({"Ummagumma"})

# Keep albums released strictly before this year (Waters-era line-up)
YEAR_CUTOFF = 1985


# =============================================================================
# ERA LABELS
# =============================================================================

PRE_ERA = "Pre-Barrett"
POST_ERA = "Post-Barrett"
ERA_ORDER = (PRE_ERA, POST_ERA)


# =============================================================================
# ANALYSIS PARAMETERS
# =============================================================================

# Number of cubic B-spline basis functions for the trend smoother
SPLINE_DF = 3

SIGNIFICANCE_LEVEL = 0.05
CONFIDENCE_LEVEL = 0.95


# =============================================================================
# OUTPUT PATHS
# =============================================================================

DEFAULT_OUTPUT_DIR = "analysis_outputs"
REPORT_FILENAME = "energy_report.md"
LOG_DIR = "logging"

CHART_NAMES = ("distribution", "trend", "ranking")
