#!/usr/bin/env python3
"""Energy Before and After Barrett - Analysis Runner

Loads a track-level audio features export, keeps the studio albums in
scope, compares mean energy between the Pre-Barrett and Post-Barrett eras
and writes three charts plus a markdown report.

Usage:
    python run_analysis.py                               # Default data file
    python run_analysis.py data/my_export.csv            # Custom data file
    python run_analysis.py --output-dir outputs          # Custom output folder
    python run_analysis.py --allow-unmapped              # Drop unknown albums instead of failing
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from energy_analysis.pipeline import config, orchestrator
from energy_analysis.pipeline.errors import AnalysisError
from energy_analysis.pipeline.report import format_era_table, format_test_result


def setup_logging():
    """Configure logging to file and console."""
    log_dir = Path(config.LOG_DIR)
    log_dir.mkdir(exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"analysis_{timestamp}.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(),
        ],
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging to {log_file}")
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare track energy before and after Barrett's departure",
        epilog="""
Examples:
  python run_analysis.py                               # Default data file
  python run_analysis.py data/my_export.csv            # Custom data file
  python run_analysis.py --no-charts                   # Report only
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "data",
        nargs="?",
        default=config.DEFAULT_DATA_PATH,
        help=f"Track-level audio features file (default: {config.DEFAULT_DATA_PATH})",
    )
    parser.add_argument(
        "--output-dir",
        default=config.DEFAULT_OUTPUT_DIR,
        help=f"Folder for charts and report (default: {config.DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--allow-unmapped",
        action="store_true",
        help="Drop albums missing from the release-year mapping instead of failing",
    )
    parser.add_argument(
        "--no-charts",
        action="store_true",
        help="Skip HTML chart export",
    )
    return parser


def main(argv=None):
    """Run the era energy analysis."""
    args = build_parser().parse_args(argv)
    logger = setup_logging()

    print("=" * 60)
    print("ENERGY BEFORE AND AFTER BARRETT")
    print("=" * 60)
    print(f"Data: {args.data}")
    print(f"Output: {args.output_dir}")
    print("=" * 60)

    start_time = datetime.now()

    try:
        results = orchestrator.run_full_pipeline(
            data_path=args.data,
            output_dir=args.output_dir,
            strict_mapping=not args.allow_unmapped,
            export_charts=not args.no_charts,
        )
    except AnalysisError as e:
        logger.error(f"Analysis failed: {e}")
        print(f"\nERROR: {e}")
        return 1

    # =========================================================================
    # Print summary
    # =========================================================================
    elapsed = datetime.now() - start_time
    print("\n" + "=" * 60)
    print("ENERGY BY ERA")
    print("=" * 60)
    print(format_era_table(results.eras))
    print("\n" + "=" * 60)
    print("HYPOTHESIS TEST")
    print("=" * 60)
    print(format_test_result(results.test))
    print(f"\nReport: {results.report_path}")
    print(f"Total time: {elapsed}")

    logger.info(f"Analysis complete! Total time: {elapsed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
