"""
Smoothed periodogram (spectral density estimate).

Algorithm (follows R's spec.pgram with fast=FALSE):
    1. Remove a least-squares line (detrend=True) or only the mean.
    2. Apply a split-cosine-bell taper to `taper` of the series at each end.
    3. I_k = |FFT(x)_k|^2 / N for k = 0..N-1; I_0 is replaced by the mean
       of I_1 and I_{N-1} so the kernel does not smear the removed mean.
    4. Smooth circularly with the modified Daniell kernel of half-width
       m = span // 2 (weights 1/(2m), end weights 1/(4m)).
    5. Divide by u2 = 1 - (5/4) * taper to undo taper power loss.
    6. Report k = 1..N//2, i.e. frequencies k/N in (0, 0.5].

Reference:
    Bloomfield, P. (2000) Fourier Analysis of Time Series: An
    Introduction, 2nd ed., Wiley.
"""

import numpy as np
from numpy.typing import NDArray

from pydiagnostics.timeseries._common import SpectrumParams


def modified_daniell(span: int) -> NDArray:
    """Kernel weights for k = -m..m with m = span // 2."""
    m = span // 2
    if m == 0:
        return np.ones(1)
    w = np.full(2 * m + 1, 1.0 / (2 * m))
    w[0] = w[-1] = 1.0 / (4 * m)
    return w


def split_cosine_bell(x: NDArray, taper: float) -> NDArray:
    """Taper the first and last floor(N * taper) points with a cosine bell."""
    n = len(x)
    m = int(np.floor(n * taper))
    if m == 0:
        return x
    w = 0.5 * (1.0 - np.cos(np.pi * np.arange(1, 2 * m, 2) / (2 * m)))
    out = x.copy()
    out[:m] *= w
    out[n - m:] *= w[::-1]
    return out


def _remove_trend(x: NDArray, detrend: bool) -> NDArray:
    n = len(x)
    out = x - np.mean(x)
    if detrend:
        t = np.arange(1, n + 1) - (n + 1) / 2.0
        sumt2 = n * (n ** 2 - 1) / 12.0
        out = out - (out @ t) * t / sumt2
    return out


def spectrum_impl(
    y: NDArray,
    span: int,
    taper: float,
    detrend: bool,
) -> SpectrumParams:
    """
    Smoothed periodogram of y.

    Inputs are assumed validated: len(y) >= 2, span >= 1 with a kernel no
    wider than the series, 0 <= taper <= 0.5.
    """
    n = len(y)

    x = _remove_trend(y, detrend)
    x = split_cosine_bell(x, taper)

    pgram = np.abs(np.fft.fft(x)) ** 2 / n
    pgram[0] = 0.5 * (pgram[1] + pgram[n - 1])

    w = modified_daniell(span)
    m = len(w) // 2
    smoothed = np.zeros(n, dtype=np.float64)
    for j in range(-m, m + 1):
        smoothed += w[j + m] * np.roll(pgram, -j)

    u2 = 1.0 - (5.0 / 8.0) * taper * 2.0
    u4 = 1.0 - (93.0 / 128.0) * taper * 2.0

    k = np.arange(-m, m + 1)
    df = 2.0 / float(np.sum(w ** 2))
    df = df / (u4 / u2 ** 2)
    bandwidth = float(np.sqrt(np.sum((1.0 / 12.0 + k ** 2) * w))) / n

    n_spec = n // 2
    return SpectrumParams(
        frequencies=np.arange(1, n_spec + 1) / n,
        power=smoothed[1:n_spec + 1] / u2,
        n_obs=n,
        span=span,
        kernel_weights=w,
        taper=taper,
        detrend=detrend,
        df=df,
        bandwidth=bandwidth,
    )
