"""
Era comparison with Welch's two-sample t-test.

Works on raw per-track energy values, not album means: album aggregates
describe the trend, while every track counts as an observation here.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats

from energy_analysis.pipeline import config
from energy_analysis.pipeline.errors import ComputationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnergyTestResult:
    """Outcome of a two-sided Welch t-test of pre vs post era energy."""

    t_statistic: float
    df: float
    p_value: float
    ci_low: float
    ci_high: float
    mean_pre: float
    mean_post: float
    n_pre: int
    n_post: int
    cohens_d: float
    alpha: float = config.SIGNIFICANCE_LEVEL
    confidence_level: float = config.CONFIDENCE_LEVEL

    @property
    def mean_difference(self) -> float:
        return self.mean_pre - self.mean_post

    @property
    def rejects_null(self) -> bool:
        """True when the equal-means hypothesis is rejected at ``alpha``."""
        return self.p_value < self.alpha

    @property
    def direction(self) -> str:
        """Post-era mean relative to pre-era mean."""
        return "lower" if self.mean_post < self.mean_pre else "higher"

    @property
    def conclusion(self) -> str:
        if self.rejects_null:
            return (
                f"Reject equal means (p = {self.p_value:.4g} < {self.alpha}): "
                f"{config.POST_ERA} energy is {self.direction} than {config.PRE_ERA}."
            )
        return (
            f"Cannot reject equal means (p = {self.p_value:.4g} >= {self.alpha}): "
            f"no evidence of an energy difference between eras."
        )


def compute_cohens_d(values_a: np.ndarray, values_b: np.ndarray) -> float:
    """Compute Cohen's d effect size with the sample-size weighted pooled standard deviation.

    Interpretation of |d|: below 0.2 negligible, below 0.5 small, below 0.8
    medium, otherwise large.
    """
    values_a = np.asarray(values_a, dtype=float)
    values_b = np.asarray(values_b, dtype=float)
    n_a, n_b = len(values_a), len(values_b)
    if n_a + n_b <= 2:
        return 0.0

    var_a = values_a.var(ddof=1) if n_a > 1 else 0.0
    var_b = values_b.var(ddof=1) if n_b > 1 else 0.0

    # Pooled standard deviation
    pooled_std = np.sqrt(((n_a - 1) * var_a + (n_b - 1) * var_b) / (n_a + n_b - 2))

    if pooled_std == 0:
        return 0.0

    return float((values_a.mean() - values_b.mean()) / pooled_std)


def welch_degrees_of_freedom(values_a: np.ndarray, values_b: np.ndarray) -> float:
    """Welch-Satterthwaite approximation of the degrees of freedom."""
    var_a = np.var(values_a, ddof=1) / len(values_a)
    var_b = np.var(values_b, ddof=1) / len(values_b)
    return float(
        (var_a + var_b) ** 2
        / (var_a**2 / (len(values_a) - 1) + var_b**2 / (len(values_b) - 1))
    )


def _clean_sample(values: Sequence[float], label: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    if len(arr) < 2:
        raise ComputationError(
            f"t-test undefined: {label} sample has {len(arr)} observation(s), need at least 2"
        )
    return arr


def welch_ttest(
    pre: Sequence[float],
    post: Sequence[float],
    alpha: float = config.SIGNIFICANCE_LEVEL,
    confidence_level: float = config.CONFIDENCE_LEVEL,
) -> EnergyTestResult:
    """Two-sided Welch t-test of mean energy, pre era vs post era.

    Args:
        pre: Track-level energy values for the pre era
        post: Track-level energy values for the post era
        alpha: Significance level for rejects_null
        confidence_level: Coverage of the interval for mean(pre) - mean(post)

    Returns:
        EnergyTestResult with statistic, df, p-value, CI and sample means

    Raises:
        ComputationError: If either sample has fewer than 2 finite values, or
            both samples have zero variance
    """
    pre_arr = _clean_sample(pre, config.PRE_ERA)
    post_arr = _clean_sample(post, config.POST_ERA)

    std_error = np.sqrt(
        np.var(pre_arr, ddof=1) / len(pre_arr) + np.var(post_arr, ddof=1) / len(post_arr)
    )
    if std_error == 0:
        raise ComputationError("t-test undefined: both samples have zero variance")

    t_stat, p_value = stats.ttest_ind(pre_arr, post_arr, equal_var=False)
    dof = welch_degrees_of_freedom(pre_arr, post_arr)

    mean_pre = float(np.mean(pre_arr))
    mean_post = float(np.mean(post_arr))
    margin = stats.t.ppf((1 + confidence_level) / 2, dof) * std_error
    difference = mean_pre - mean_post

    result = EnergyTestResult(
        t_statistic=float(t_stat),
        df=dof,
        p_value=float(p_value),
        ci_low=float(difference - margin),
        ci_high=float(difference + margin),
        mean_pre=mean_pre,
        mean_post=mean_post,
        n_pre=len(pre_arr),
        n_post=len(post_arr),
        cohens_d=compute_cohens_d(pre_arr, post_arr),
        alpha=alpha,
        confidence_level=confidence_level,
    )

    logger.info(
        f"Welch t-test: t = {result.t_statistic:.3f}, df = {result.df:.1f}, "
        f"p = {result.p_value:.4g}, CI = [{result.ci_low:.3f}, {result.ci_high:.3f}]"
    )
    return result
