"""
Hypothesis test dispatch.

Public API:
    runs_test(series, center, ...) -> RunsSolution
"""

from __future__ import annotations

import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pydiagnostics.core.compute.timing import Timer
from pydiagnostics.core.exceptions import ValidationError
from pydiagnostics.core.result import Result
from pydiagnostics.core.series import Series
from pydiagnostics.core.validation import check_alpha
from pydiagnostics.hypothesis._common import VALID_ALTERNATIVES
from pydiagnostics.hypothesis._runs import runs_test_impl
from pydiagnostics.hypothesis.solution import RunsSolution


# Below this many untied observations the normal approximation is rough
MIN_NORMAL_APPROX = 20


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _resolve_center(y: np.ndarray, center: str | float) -> tuple[float, str]:
    if isinstance(center, str):
        if center == 'median':
            return float(np.median(y)), 'median'
        if center == 'mean':
            return float(np.mean(y)), 'mean'
        raise ValidationError(
            f"center must be 'median', 'mean' or a number, got {center!r}"
        )
    if isinstance(center, bool) or not isinstance(center, numbers.Real):
        raise ValidationError(
            f"center must be 'median', 'mean' or a number, got {center!r}"
        )
    if not np.isfinite(center):
        raise ValidationError(f"center must be finite, got {center}")
    return float(center), 'value'


def runs_test(
    series: ArrayLike | Series,
    center: str | float = 'median',
    *,
    alternative: str = 'two.sided',
    alpha: float = 0.05,
) -> RunsSolution:
    """
    Runs test for randomness about the median, the mean or a given value.

    Observations equal to the center are dropped before the runs are
    counted; their number is reported as n_ties.

    Args:
        series: Series or 1D numeric array-like
        center: 'median' (default), 'mean', or a number
        alternative: 'two.sided' (default), 'less' (too few runs) or
            'greater' (too many runs)
        alpha: Significance level for the reject flag. Default 0.05.

    Returns:
        RunsSolution with runs, expected runs, variance, Z and p-value

    Raises:
        DegenerateInputError: If no untied observations fall on one side
        ValidationError: If center or alternative is invalid
        InvalidConfigurationError: If alpha is outside (0, 1)

    Examples:
        >>> result = runs_test(series)
        >>> result.z_statistic, result.p_value
        >>> print(result.summary())
    """
    timer = Timer()
    timer.start()

    s = Series.coerce(series)
    alternative = _validate_alternative(alternative)
    alpha = check_alpha(alpha)
    center_value, center_method = _resolve_center(s.values, center)

    with timer.section('runs'):
        params = runs_test_impl(
            s.values,
            center_value,
            center_method,
            alternative=alternative,
            alpha=alpha,
        )

    warnings_list: list[str] = []
    n_used = params.n_above + params.n_below
    if n_used < MIN_NORMAL_APPROX:
        msg = (
            f"runs test on {n_used} untied observations; the normal "
            f"approximation needs about {MIN_NORMAL_APPROX}"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    timer.stop()

    result = Result(
        params=params,
        info={'center': center_method, 'alternative': alternative},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return RunsSolution(_result=result)
