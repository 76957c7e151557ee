"""Plain-text summaries of the era means and the t-test."""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from energy_analysis.pipeline import config
from energy_analysis.pipeline.hypothesis import EnergyTestResult

logger = logging.getLogger(__name__)


def format_era_table(eras: pd.DataFrame) -> str:
    """Markdown table of mean energy per era."""
    lines = [
        "| Era | Mean energy | Tracks | Albums |",
        "|---|---|---|---|",
    ]
    for row in eras.itertuples(index=False):
        lines.append(f"| {row.era} | {row.energy:.3f} | {row.n_tracks} | {row.n_albums} |")
    return "\n".join(lines)


def format_test_result(result: EnergyTestResult) -> str:
    """Text block with statistic, df, p-value, CI bounds and sample means."""
    ci_pct = int(round(result.confidence_level * 100))
    return "\n".join([
        "Welch Two Sample t-test (two-sided)",
        f"t = {result.t_statistic:.4f}, df = {result.df:.2f}, p-value = {result.p_value:.4g}",
        f"{ci_pct}% confidence interval for {config.PRE_ERA} - {config.POST_ERA}: "
        f"[{result.ci_low:.4f}, {result.ci_high:.4f}]",
        f"mean of {config.PRE_ERA} = {result.mean_pre:.4f} (n = {result.n_pre})",
        f"mean of {config.POST_ERA} = {result.mean_post:.4f} (n = {result.n_post})",
        f"Cohen's d = {result.cohens_d:.3f}",
        result.conclusion,
    ])


def write_report(
    eras: pd.DataFrame,
    albums: pd.DataFrame,
    result: EnergyTestResult,
    output_dir: str = config.DEFAULT_OUTPUT_DIR,
    chart_paths: Optional[List[str]] = None,
) -> Path:
    """Write the markdown summary report and return its path."""
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    report = f"""# Energy Before and After Barrett

**Generated**: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}

---

## Energy by Era

{format_era_table(eras)}

---

## Albums

"""

    for row in albums.itertuples(index=False):
        report += f"- **{row.album_name}** ({row.release_year}, {row.era}): {row.energy:.3f} over {row.n_tracks} tracks\n"

    report += f"""
---

## Hypothesis Test

```
{format_test_result(result)}
```
"""

    if chart_paths:
        report += "\n---\n\n## Charts\n\n"
        for i, path in enumerate(chart_paths, start=1):
            report += f"{i}. {path}\n"

    report_file = output_path / config.REPORT_FILENAME
    with open(report_file, 'w', encoding='utf-8') as f:
        f.write(report)

    logger.info(f"Report saved to {report_file}")
    return report_file
