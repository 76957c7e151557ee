#!/usr/bin/env python3
"""Pipeline orchestration for the era energy analysis.

Wires the stages together in order:

    load -> enrich -> filter/label -> aggregate -> visualize -> test -> report

Each stage returns a new table; this module only passes them along and
collects the results. Used by run_analysis.py.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from energy_analysis.pipeline import config
from energy_analysis.pipeline.aggregation import album_means, era_means, era_samples
from energy_analysis.pipeline.enrichment import (
    add_release_year, find_unmapped_albums, validate_mapping_coverage
)
from energy_analysis.pipeline.hypothesis import EnergyTestResult, welch_ttest
from energy_analysis.pipeline.loader import load_tracks
from energy_analysis.pipeline.report import write_report
from energy_analysis.pipeline.selection import select_tracks
from energy_analysis.pipeline.visualization import create_all_charts, save_charts

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResults:
    tracks: pd.DataFrame
    albums: pd.DataFrame
    eras: pd.DataFrame
    test: EnergyTestResult
    charts: Dict[str, go.Figure] = field(default_factory=dict)
    chart_paths: List[str] = field(default_factory=list)
    report_path: Optional[Path] = None


def run_full_pipeline(
    data_path: Union[str, Path] = config.DEFAULT_DATA_PATH,
    output_dir: Optional[str] = config.DEFAULT_OUTPUT_DIR,
    strict_mapping: bool = True,
    export_charts: bool = True,
) -> AnalysisResults:
    """Run the complete analysis.

    Args:
        data_path: Track-level audio features file
        output_dir: Where charts and the report go; None skips all file output
        strict_mapping: Fail on albums missing from the release-year mapping
            instead of dropping them with a warning
        export_charts: Write the charts as HTML (ignored when output_dir is None)

    Returns:
        AnalysisResults with every derived table, the charts and the test result

    Raises:
        LoadError, MappingGapError, ComputationError
    """
    logger.info(f"Starting pipeline: data={data_path}, strict_mapping={strict_mapping}")

    # =========================================================================
    # STEP 1: Load
    # =========================================================================
    print("\n[1/6] Loading tracks...")
    raw = load_tracks(data_path)
    print(f"  ✓ Loaded {len(raw)} tracks")

    # =========================================================================
    # STEP 2: Enrich with release years
    # =========================================================================
    print("\n[2/6] Adding release years...")
    if strict_mapping:
        validate_mapping_coverage(raw)
    else:
        missing = find_unmapped_albums(raw)
        if missing:
            logger.warning(f"Albums without a release year will be dropped: {missing}")
            print(f"  ! {len(missing)} unmapped album(s) will be dropped")
    enriched = add_release_year(raw)
    print(f"  ✓ Mapped {enriched[config.YEAR_COLUMN].notna().sum()} tracks to a release year")

    # =========================================================================
    # STEP 3: Filter scope and label eras
    # =========================================================================
    print("\n[3/6] Selecting tracks and labelling eras...")
    tracks = select_tracks(enriched)
    print(f"  ✓ Kept {len(tracks)} tracks")

    # =========================================================================
    # STEP 4: Aggregate
    # =========================================================================
    print("\n[4/6] Aggregating energy...")
    albums = album_means(tracks)
    eras = era_means(tracks)
    print(f"  ✓ {len(albums)} albums, {len(eras)} eras")

    # =========================================================================
    # STEP 5: Charts
    # =========================================================================
    print("\n[5/6] Building charts...")
    charts = create_all_charts(albums)
    chart_paths = []
    if output_dir is not None and export_charts:
        chart_paths = save_charts(charts, output_dir)
        print(f"  ✓ Saved {len(chart_paths)} charts to {output_dir}/")
    else:
        print(f"  ✓ Built {len(charts)} charts (not exported)")

    # =========================================================================
    # STEP 6: Hypothesis test (track-level values)
    # =========================================================================
    print("\n[6/6] Testing era difference...")
    pre, post = era_samples(tracks)
    test = welch_ttest(pre, post)
    print(f"  ✓ p = {test.p_value:.4g}")

    results = AnalysisResults(
        tracks=tracks,
        albums=albums,
        eras=eras,
        test=test,
        charts=charts,
        chart_paths=chart_paths,
    )

    if output_dir is not None:
        results.report_path = write_report(eras, albums, test, output_dir, chart_paths)

    logger.info("Pipeline complete")
    return results
