#!/usr/bin/env python3
"""
Descriptive charts of album-level energy.

All builders take the album aggregate table (album_name, release_year, era,
energy, n_tracks) and return a plotly Figure; nothing is written to disk
here. Use save_charts() to export them.
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from sklearn.linear_model import LinearRegression
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import SplineTransformer

from energy_analysis.components.export.chart_export import export_charts
from energy_analysis.components.visualization.color_palette import (
    REFERENCE_LINE_COLOR, TREND_COLOR, get_era_color, get_era_colors
)
from energy_analysis.pipeline import config
from energy_analysis.pipeline.errors import ComputationError

logger = logging.getLogger(__name__)

SPLINE_DEGREE = 3
BOX_WIDTH_FRACTION = 0.9


def _require_albums(albums: pd.DataFrame, chart: str) -> None:
    if albums.empty:
        raise ComputationError(f"Cannot draw {chart} chart: album table is empty")


def _eras_present(albums: pd.DataFrame) -> List[str]:
    present = albums[config.ERA_COLUMN].unique().tolist()
    ordered = [era for era in config.ERA_ORDER if era in present]
    return ordered + sorted(era for era in present if era not in ordered)


def _hover_text(albums: pd.DataFrame) -> pd.Series:
    def build_hover_text(row):
        return (
            f"<b>{row[config.ALBUM_COLUMN]}</b><br>"
            f"Year: {row[config.YEAR_COLUMN]}<br>"
            f"Era: {row[config.ERA_COLUMN]}<br>"
            f"Mean energy: {row['energy']:.3f}<br>"
            f"Tracks: {row['n_tracks']}"
        )

    return albums.apply(build_hover_text, axis=1)


def fit_spline_trend(
    years: np.ndarray,
    energies: np.ndarray,
    n_basis: int = config.SPLINE_DF,
    n_points: int = 200,
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Least-squares fit on a cubic B-spline basis with ``n_basis`` functions.

    The basis has no interior knots when ``n_basis`` equals the degree, which
    keeps the curve free to bend once or twice without chasing single albums.

    Returns:
        (grid, fitted) arrays for plotting, or None if there are fewer than
        two distinct years to fit
    """
    years = np.asarray(years, dtype=float)
    energies = np.asarray(energies, dtype=float)

    if n_basis < SPLINE_DEGREE:
        raise ValueError(f"n_basis must be at least {SPLINE_DEGREE}, got {n_basis}")

    if np.unique(years).size < 2:
        logger.warning("Fewer than two distinct years, skipping spline trend")
        return None

    # include_bias=False drops one basis function; the intercept comes from the regression
    n_knots = n_basis - SPLINE_DEGREE + 2
    model = make_pipeline(
        SplineTransformer(n_knots=n_knots, degree=SPLINE_DEGREE, include_bias=False),
        LinearRegression(),
    )
    model.fit(years.reshape(-1, 1), energies)

    grid = np.linspace(years.min(), years.max(), n_points)
    fitted = model.predict(grid.reshape(-1, 1))
    return grid, fitted


def create_distribution_chart(albums: pd.DataFrame) -> go.Figure:
    """Box plot of album mean energy per era.

    Each box is centred on the midpoint of its era's year range and spans 90%
    of that range, so boxes of consecutive eras never overlap.
    """
    _require_albums(albums, "distribution")

    fig = go.Figure()

    for era in _eras_present(albums):
        era_df = albums[albums[config.ERA_COLUMN] == era]
        years = era_df[config.YEAR_COLUMN].astype(float)
        center_year = float(years.min() + years.max()) / 2
        year_span = float(years.max() - years.min())

        fig.add_trace(go.Box(
            x=[center_year] * len(era_df),
            y=era_df['energy'],
            name=era,
            width=BOX_WIDTH_FRACTION * year_span if year_span > 0 else BOX_WIDTH_FRACTION,
            marker_color=get_era_color(era),
            boxpoints='all',
            jitter=0.3,
            pointpos=0,
            text=_hover_text(era_df),
            hovertemplate='%{text}<extra></extra>',
        ))

    fig.update_layout(
        title='Album Energy by Era',
        xaxis_title='Release Year',
        yaxis_title='Mean Energy',
        template='plotly_white',
        height=500,
        showlegend=True
    )

    return fig


def create_trend_chart(albums: pd.DataFrame, n_basis: int = config.SPLINE_DF) -> go.Figure:
    """Scatter of album energy over release year with a B-spline trend across all albums."""
    _require_albums(albums, "trend")

    fig = go.Figure()

    for era in _eras_present(albums):
        era_df = albums[albums[config.ERA_COLUMN] == era]
        fig.add_trace(go.Scatter(
            x=era_df[config.YEAR_COLUMN].astype(float),
            y=era_df['energy'],
            mode='markers',
            name=era,
            marker=dict(
                size=11,
                color=get_era_color(era),
                line=dict(width=0.5, color='white')
            ),
            text=_hover_text(era_df),
            hovertemplate='%{text}<extra></extra>',
        ))

    trend = fit_spline_trend(
        albums[config.YEAR_COLUMN].astype(float).to_numpy(),
        albums['energy'].to_numpy(),
        n_basis=n_basis,
    )
    if trend is not None:
        grid, fitted = trend
        fig.add_trace(go.Scatter(
            x=grid,
            y=fitted,
            mode='lines',
            name=f'B-spline trend (df={n_basis})',
            line=dict(color=TREND_COLOR, width=2),
            hoverinfo='skip',
        ))

    fig.update_layout(
        title='Album Energy Over Time',
        xaxis_title='Release Year',
        yaxis_title='Mean Energy',
        template='plotly_white',
        hovermode='closest',
        height=500
    )

    return fig


def create_ranking_chart(albums: pd.DataFrame) -> go.Figure:
    """Horizontal bars of albums ranked by mean energy, with the overall album mean marked."""
    _require_albums(albums, "ranking")

    ranked = albums.sort_values('energy', ascending=True)
    overall_mean = float(albums['energy'].mean())

    fig = go.Figure()

    # One trace per era keeps the legend, categoryarray keeps the global order
    for era in _eras_present(ranked):
        era_df = ranked[ranked[config.ERA_COLUMN] == era]
        fig.add_trace(go.Bar(
            x=era_df['energy'],
            y=era_df[config.ALBUM_COLUMN],
            orientation='h',
            name=era,
            marker_color=get_era_colors(era_df[config.ERA_COLUMN].tolist()),
            # hovertext, not text: bars draw text as a visible label
            hovertext=_hover_text(era_df),
            hovertemplate='%{hovertext}<extra></extra>',
        ))

    fig.add_vline(
        x=overall_mean,
        line_dash='dash',
        line_color=REFERENCE_LINE_COLOR,
        annotation_text=f'Mean {overall_mean:.3f}',
        annotation_position='top',
    )

    fig.update_layout(
        title='Albums Ranked by Energy',
        xaxis_title='Mean Energy',
        yaxis=dict(
            title='',
            categoryorder='array',
            categoryarray=ranked[config.ALBUM_COLUMN].tolist(),
        ),
        template='plotly_white',
        height=max(400, 40 * len(ranked)),
        barmode='overlay'
    )

    return fig


def create_all_charts(albums: pd.DataFrame) -> Dict[str, go.Figure]:
    """Build the distribution, trend and ranking charts keyed by config.CHART_NAMES."""
    charts = {
        'distribution': create_distribution_chart(albums),
        'trend': create_trend_chart(albums),
        'ranking': create_ranking_chart(albums),
    }
    logger.info(f"Created {len(charts)} charts for {len(albums)} albums")
    return charts


def save_charts(figures: Dict[str, go.Figure], output_dir: str = config.DEFAULT_OUTPUT_DIR) -> List[str]:
    """Write each figure to output_dir/<name>/index.html."""
    return export_charts(figures, output_dir)
