"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus the order
statistic helpers fivenum() and quantile().
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydiagnostics.core.compute.timing import Timer
from pydiagnostics.core.exceptions import DegenerateInputError
from pydiagnostics.core.result import Result
from pydiagnostics.core.series import Series
from pydiagnostics.core.validation import check_min_samples
from pydiagnostics.descriptive._order_stats import tukey_fivenum, type7_quantile
from pydiagnostics.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    FiveNumberSummary,
)
from pydiagnostics.timeseries._acf import autocorrelation


def describe(series: ArrayLike | Series) -> DescriptiveSolution:
    """
    Compute the descriptive statistics of a series.

    Computes: n, mean, sample variance, sd, standard error of the mean,
    range, Tukey five-number summary, type-7 quartiles and IQR, and the
    lag-1 autocorrelation.

    Parameters
    ----------
    series : Series or array-like
        1D numeric data.

    Returns
    -------
    DescriptiveSolution

    Raises
    ------
    InsufficientDataError
        If the series has fewer than 2 observations.
    """
    timer = Timer()
    timer.start()

    s = Series.coerce(series)
    y = s.values
    n = s.n
    check_min_samples(n, 2, 'describe')

    warnings_list: list[str] = []

    with timer.section('moments'):
        mean = float(np.mean(y))
        variance = float(np.sum((y - mean) ** 2) / (n - 1))
        sd = math.sqrt(variance)
        se_mean = sd / math.sqrt(n)

    with timer.section('order_statistics'):
        x_sorted = np.sort(y)
        five = FiveNumberSummary(*(float(v) for v in tukey_fivenum(x_sorted)))
        q1, q3 = (float(v) for v in type7_quantile(x_sorted, np.array([0.25, 0.75])))

    with timer.section('lag1_autocorrelation'):
        try:
            lag1 = autocorrelation(y, 1)
        except DegenerateInputError as e:
            lag1 = float('nan')
            msg = f"lag-1 autocorrelation is NaN: {e}"
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=2)

    timer.stop()

    params = DescriptiveParams(
        n=n,
        mean=mean,
        variance=variance,
        sd=sd,
        se_mean=se_mean,
        range=five.maximum - five.minimum,
        fivenum=five,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        lag1_autocorrelation=lag1,
    )

    result = Result(
        params=params,
        info={'hinges': 'tukey', 'quantile_type': 7},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result)


def fivenum(x: ArrayLike | Series) -> FiveNumberSummary:
    """
    Tukey five-number summary. Matches R fivenum().

    For odd n the median is included in both halves when computing the
    hinges.
    """
    s = Series.coerce(x)
    values = tukey_fivenum(np.sort(s.values))
    return FiveNumberSummary(*(float(v) for v in values))


def quantile(x: ArrayLike | Series, probs: ArrayLike | None = None) -> NDArray:
    """
    Type-7 (linear interpolation) quantiles. Matches R quantile() default.

    Parameters
    ----------
    x : Series or array-like
        1D numeric data.
    probs : array-like, optional
        Probabilities in [0, 1]. Default (0, 0.25, 0.5, 0.75, 1).
    """
    s = Series.coerce(x)
    if probs is None:
        probs = np.array([0.0, 0.25, 0.5, 0.75, 1.0])
    p = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    return type7_quantile(np.sort(s.values), p)
