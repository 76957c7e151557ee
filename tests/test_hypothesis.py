from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from scipy import stats

from energy_analysis.pipeline.aggregation import era_samples
from energy_analysis.pipeline.enrichment import add_release_year
from energy_analysis.pipeline.errors import ComputationError
from energy_analysis.pipeline.hypothesis import (
    compute_cohens_d, welch_degrees_of_freedom, welch_ttest
)
from energy_analysis.pipeline.selection import select_tracks


@pytest.fixture
def samples(sample_tracks):
    return era_samples(select_tracks(add_release_year(sample_tracks)))


def test_sample_rejects_equal_means(samples):
    result = welch_ttest(*samples)

    assert result.p_value < 0.05
    assert result.rejects_null
    assert result.direction == "lower"
    assert result.mean_pre > result.mean_post
    # Interval for pre - post excludes zero
    assert result.ci_low > 0
    assert result.ci_low < result.mean_difference < result.ci_high


def test_statistic_matches_scipy(samples):
    pre, post = samples
    expected_t, expected_p = stats.ttest_ind(pre, post, equal_var=False)

    result = welch_ttest(pre, post)

    assert result.t_statistic == pytest.approx(expected_t)
    assert result.p_value == pytest.approx(expected_p)
    assert result.n_pre == len(pre)
    assert result.n_post == len(post)


def test_welch_degrees_of_freedom_equal_samples():
    a = np.array([1.0, 2.0, 3.0, 4.0])
    b = np.array([2.0, 3.0, 4.0, 5.0])

    # Equal sizes and variances reduce to n1 + n2 - 2
    assert welch_degrees_of_freedom(a, b) == pytest.approx(6.0)


def test_confidence_interval_matches_t_quantile():
    pre = np.array([0.61, 0.72, 0.55, 0.68, 0.70])
    post = np.array([0.41, 0.35, 0.52, 0.30, 0.44, 0.38])

    result = welch_ttest(pre, post, confidence_level=0.9)

    se = np.sqrt(pre.var(ddof=1) / len(pre) + post.var(ddof=1) / len(post))
    margin = stats.t.ppf(0.95, result.df) * se
    assert result.ci_low == pytest.approx(result.mean_difference - margin)
    assert result.ci_high == pytest.approx(result.mean_difference + margin)


def test_swapping_samples_flips_sign(samples):
    pre, post = samples

    forward = welch_ttest(pre, post)
    backward = welch_ttest(post, pre)

    assert backward.t_statistic == pytest.approx(-forward.t_statistic)
    assert backward.p_value == pytest.approx(forward.p_value)
    assert backward.ci_low == pytest.approx(-forward.ci_high)
    assert backward.direction == "higher"


def test_identical_distributions_do_not_reject():
    pre = [0.4, 0.5, 0.6, 0.45, 0.55]
    post = [0.6, 0.5, 0.4, 0.55, 0.45]

    result = welch_ttest(pre, post)

    assert not result.rejects_null
    assert result.ci_low < 0 < result.ci_high
    assert "Cannot reject" in result.conclusion


def test_conclusion_mentions_direction(samples):
    result = welch_ttest(*samples)

    assert "Reject equal means" in result.conclusion
    assert "lower" in result.conclusion


@pytest.mark.parametrize("pre,post", [
    ([0.5], [0.1, 0.2, 0.3]),
    ([0.5, 0.6], [0.1]),
    ([], [0.1, 0.2]),
    ([0.5, np.nan], [0.1, 0.2]),
])
def test_too_few_observations(pre, post):
    with pytest.raises(ComputationError, match="at least 2"):
        welch_ttest(pre, post)


def test_zero_variance_raises():
    with pytest.raises(ComputationError, match="zero variance"):
        welch_ttest([0.5, 0.5, 0.5], [0.2, 0.2])


def test_cohens_d():
    a = np.array([1.0, 2.0, 3.0])
    b = np.array([2.0, 3.0, 4.0])

    assert compute_cohens_d(a, b) == pytest.approx(-1.0)
    assert compute_cohens_d(a, a) == 0.0


def test_cohens_d_weights_variances_by_sample_size():
    small = np.array([1.0, 2.0, 3.0])            # mean 2, var 1, n 3
    large = np.array([0.0, 2.0, 4.0, 6.0, 8.0])  # mean 4, var 10, n 5

    # pooled var = (2 * 1 + 4 * 10) / 6 = 7, not the unweighted (1 + 10) / 2
    assert compute_cohens_d(small, large) == pytest.approx(-2.0 / np.sqrt(7.0))
    assert compute_cohens_d(large, small) == pytest.approx(2.0 / np.sqrt(7.0))


def test_result_is_frozen(samples):
    result = welch_ttest(*samples)

    with pytest.raises(FrozenInstanceError):
        result.p_value = 1.0
