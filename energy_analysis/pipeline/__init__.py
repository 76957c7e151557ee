"""Energy Analysis Pipeline

Pure stage functions (load, enrich, select, aggregate, visualize, test) and
the orchestrator that runs them in order.
"""

from .aggregation import album_means, era_means, era_samples
from .enrichment import add_release_year, find_unmapped_albums, validate_mapping_coverage
from .errors import AnalysisError, ComputationError, LoadError, MappingGapError
from .hypothesis import EnergyTestResult, welch_ttest
from .loader import load_tracks
from .orchestrator import AnalysisResults, run_full_pipeline
from .selection import assign_era, filter_scope, select_tracks

__all__ = [
    # Stages
    'load_tracks',
    'add_release_year',
    'find_unmapped_albums',
    'validate_mapping_coverage',
    'filter_scope',
    'assign_era',
    'select_tracks',
    'album_means',
    'era_means',
    'era_samples',
    'welch_ttest',
    'EnergyTestResult',
    # Orchestration
    'run_full_pipeline',
    'AnalysisResults',
    # Errors
    'AnalysisError',
    'LoadError',
    'MappingGapError',
    'ComputationError',
]
