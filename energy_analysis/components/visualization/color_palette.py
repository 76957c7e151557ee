"""Centralized Color Palette - Single source of truth for chart colors.

This module provides consistent color definitions for:
- Eras (one fixed color per era label)
- Reference lines and trend curves

Color Consistency Guarantee:
- Pre-Barrett is ALWAYS #E8D48A (light gold) across ALL charts
- Post-Barrett is ALWAYS #6BA3E8 (bright blue) across ALL charts
"""

from typing import Dict, List

# ============================================================================
# ERA COLORS
# ============================================================================

ERA_COLORS: Dict[str, str] = {
    "Pre-Barrett": "#E8D48A",   # Light gold (psychedelic, warm)
    "Post-Barrett": "#6BA3E8",  # Bright blue (cool, expansive)
}

# ============================================================================
# SPECIAL COLORS
# ============================================================================

UNKNOWN_ERA_COLOR = "#CCCCCC"  # Light gray for labels outside ERA_COLORS
TREND_COLOR = "#F08080"        # Light coral for the spline curve
REFERENCE_LINE_COLOR = "#808080"


def get_era_color(era: str) -> str:
    """Get consistent color for an era label.

    Examples:
        >>> get_era_color("Pre-Barrett")
        '#E8D48A'
        >>> get_era_color("Solo")
        '#CCCCCC'
    """
    return ERA_COLORS.get(era, UNKNOWN_ERA_COLOR)


def get_era_colors(eras: List[str]) -> List[str]:
    """Colors for a sequence of era labels, e.g. one per bar."""
    return [get_era_color(era) for era in eras]


__all__ = [
    "ERA_COLORS",
    "UNKNOWN_ERA_COLOR",
    "TREND_COLOR",
    "REFERENCE_LINE_COLOR",
    "get_era_color",
    "get_era_colors",
]
