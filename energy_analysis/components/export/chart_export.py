"""Chart export to standalone HTML.

Each chart is written to its own folder so the output directory can be
hosted as-is:

    from energy_analysis.components.export.chart_export import export_charts

    paths = export_charts({"trend": fig}, "analysis_outputs")
"""

import logging
import os
from typing import Dict, List

import plotly.graph_objects as go

logger = logging.getLogger(__name__)


def export_chart_to_html(
    fig: go.Figure,
    filename: str,
    output_dir: str = "analysis_outputs"
) -> str:
    """Export a plotly figure to HTML file in its own folder.

    Args:
        fig: Plotly figure to export
        filename: Name for the chart folder
        output_dir: Parent directory to save to

    Returns:
        Path to the exported file

    Creates: output_dir/filename/index.html
    """
    chart_dir = os.path.join(output_dir, filename)
    os.makedirs(chart_dir, exist_ok=True)

    # Web-friendly layout applied to a copy, the caller's figure is left as is
    fig = go.Figure(fig)
    fig.update_layout(
        autosize=True,
        margin=dict(l=60, r=20, t=60, b=60),
    )

    html = fig.to_html(
        include_plotlyjs='cdn',
        config={
            'displayModeBar': 'hover',
            'displaylogo': False,
            'responsive': True,
        },
        div_id="plotly-div"
    )

    output_path = os.path.join(chart_dir, "index.html")
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(html)

    return output_path


def export_charts(figures: Dict[str, go.Figure], output_dir: str) -> List[str]:
    """Export every figure in ``figures`` (name -> figure) and return the paths."""
    os.makedirs(output_dir, exist_ok=True)

    exported = []
    for name, fig in figures.items():
        path = export_chart_to_html(fig, name, output_dir)
        file_size = os.path.getsize(path) / 1024
        logger.info(f"Saved {name} chart to {path} ({file_size:.1f} KB)")
        exported.append(path)

    return exported
