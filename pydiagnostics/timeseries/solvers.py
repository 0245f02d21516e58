"""
Time-series solver dispatch.

Public API:
    acf(series, max_lag) -> AcfSolution
    spectrum(series, span, ...) -> SpectrumSolution
"""

import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pydiagnostics.core.compute.timing import Timer
from pydiagnostics.core.exceptions import InvalidConfigurationError, ValidationError
from pydiagnostics.core.result import Result
from pydiagnostics.core.series import Series
from pydiagnostics.core.validation import check_int, check_min_samples
from pydiagnostics.timeseries._acf import acf_impl
from pydiagnostics.timeseries._spectrum import spectrum_impl
from pydiagnostics.timeseries.solution import AcfSolution, SpectrumSolution


def acf(
    series: ArrayLike | Series,
    max_lag: int | None = None,
) -> AcfSolution:
    """
    Sample autocorrelation function for lags 0..max_lag.

    The coefficient at lag h is the lag-h autocovariance divided by the
    population variance (divisor N at every lag), so lag 0 is exactly 1.

    Args:
        series: Series or 1D numeric array-like
        max_lag: Largest lag to compute. Default floor(10 * log10(N)),
            as R does. Values >= N are truncated to N - 1 with a warning.

    Returns:
        AcfSolution with lags, coefficients and the white-noise bound

    Raises:
        InsufficientDataError: If the series has fewer than 2 observations
        DegenerateInputError: If the series is constant
        InvalidConfigurationError: If max_lag is negative

    Examples:
        >>> result = acf(series, max_lag=20)
        >>> result.lag1
        >>> result.significant_lags()
    """
    timer = Timer()
    timer.start()

    s = Series.coerce(series)
    n = s.n
    check_min_samples(n, 2, 'acf')

    if max_lag is None:
        max_lag = min(n - 1, int(np.floor(10 * np.log10(n))))
    max_lag = check_int(max_lag, 'max_lag', minimum=0)

    warnings_list: list[str] = []
    requested = max_lag
    if max_lag >= n:
        max_lag = n - 1
        msg = f"max_lag={requested} truncated to {max_lag} (series has {n} observations)"
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    with timer.section('acf'):
        params = acf_impl(s.values, max_lag)

    timer.stop()

    result = Result(
        params=params,
        info={'requested_max_lag': requested},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return AcfSolution(_result=result)


def spectrum(
    series: ArrayLike | Series,
    span: int = 3,
    *,
    taper: float = 0.1,
    detrend: bool = True,
) -> SpectrumSolution:
    """
    Periodogram smoothed with a modified Daniell kernel.

    Frequencies are k/N for k = 1..N//2, covering (0, 0.5] in steps of 1/N.

    Args:
        series: Series or 1D numeric array-like
        span: Kernel span; half-width m = span // 2. span=1 gives the
            raw periodogram. Default 3 (weights 1/4, 1/2, 1/4).
        taper: Fraction of each end tapered by a split cosine bell, in
            [0, 0.5]. Default 0.1.
        detrend: Remove a least-squares line (True) or only the mean.

    Returns:
        SpectrumSolution with frequencies, power, df and bandwidth

    Raises:
        EmptySeriesError: If the series is empty
        InsufficientDataError: If the series has fewer than 2 observations
        InvalidConfigurationError: If span < 1, or taper is not a real
            number in [0, 0.5]
        ValidationError: If the kernel is wider than the series
    """
    timer = Timer()
    timer.start()

    s = Series.coerce(series)
    n = s.n
    check_min_samples(n, 2, 'spectrum')
    span = check_int(span, 'span', minimum=1)

    if isinstance(taper, bool) or not isinstance(taper, numbers.Real):
        raise InvalidConfigurationError(
            f"taper must be a real number, got {taper!r}",
            parameter='taper', value=taper,
        )
    if not (0.0 <= taper <= 0.5):
        raise InvalidConfigurationError(
            f"taper must be in [0, 0.5], got {taper}",
            parameter='taper', value=taper,
        )

    width = 2 * (span // 2) + 1
    if width > n:
        raise ValidationError(
            f"span={span}: kernel of width {width} is wider than the series (n={n})"
        )

    with timer.section('periodogram'):
        params = spectrum_impl(s.values, span, float(taper), bool(detrend))

    timer.stop()

    result = Result(
        params=params,
        info={'kernel': 'modified.daniell', 'span': span},
        timing=timer.result(),
        backend_name='cpu',
    )
    return SpectrumSolution(_result=result)
