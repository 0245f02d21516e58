"""
Order-statistic summaries: Tukey hinges and type-7 quantiles.

Two quartile conventions are reported side by side and never reconciled:

Tukey's five-number summary (R's fivenum()):
    With x sorted, depth n4 = floor((n + 3) / 2) / 2 and positions
        d = (1, n4, (n + 1) / 2, n + 1 - n4, n)      (1-indexed)
    each value is 0.5 * (x[floor(d)] + x[ceil(d)]). The hinges are the
    medians of the lower and upper halves; for odd n the median belongs
    to BOTH halves. For n = 5 the lower hinge is median(x1, x2, x3) = x2,
    not median(x1, x2).

Type-7 quantile (R's quantile() default, Hyndman & Fan 1996):
    h = (n - 1) * p;  Q(p) = x[floor(h)] + (h - floor(h)) * (x[floor(h)+1] - x[floor(h)])
    (0-indexed). The interquartile range uses Q(0.75) - Q(0.25).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pydiagnostics.core.exceptions import ValidationError


def tukey_fivenum(x: NDArray) -> NDArray:
    """
    Five-number summary (min, lower hinge, median, upper hinge, max).

    Parameters
    ----------
    x : NDArray
        1D sorted array with at least one element.
    """
    n = len(x)
    n4 = math.floor((n + 3) / 2) / 2.0
    depths = np.array([1.0, n4, (n + 1) / 2.0, n + 1 - n4, float(n)])
    lo = np.floor(depths).astype(int) - 1
    hi = np.ceil(depths).astype(int) - 1
    return 0.5 * (x[lo] + x[hi])


def type7_quantile(x: NDArray, probs: NDArray) -> NDArray:
    """
    Linear-interpolation quantiles (Hyndman & Fan type 7).

    Parameters
    ----------
    x : NDArray
        1D sorted array with at least one element.
    probs : NDArray
        Probabilities in [0, 1].
    """
    probs = np.asarray(probs, dtype=np.float64)
    if np.any((probs < 0.0) | (probs > 1.0)):
        raise ValidationError(f"probs must lie in [0, 1], got {probs.tolist()}")

    n = len(x)
    if n == 1:
        return np.full(len(probs), x[0])

    # 4 * machine epsilon absorbs (n - 1) * p landing just below an integer
    fuzz = 4.0 * np.finfo(np.float64).eps
    h = (n - 1) * probs
    j = np.floor(h + fuzz).astype(int)
    g = h - j
    g[np.abs(g) < fuzz] = 0.0

    j_hi = np.minimum(j + 1, n - 1)
    return x[j] + g * (x[j_hi] - x[j])
