"""
Ordinary least squares via QR decomposition.

Solves min_b ||y - X b||^2 for a small full-rank design:

    X = QR
    b = R^-1 Q'y
    Cov(b) = s^2 (R'R)^-1 = s^2 R^-1 R^-T,   s^2 = RSS / (n - p)

Used by the linear trend fit (X = [1, t]) and the lag-1 model
(X = [1, y_{t-1}]).
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pydiagnostics.core.exceptions import DegenerateInputError


@dataclass(frozen=True)
class OLSFit:
    """Raw OLS quantities for one design."""
    coefficients: NDArray[np.floating[Any]]
    standard_errors: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    df_residual: int


def qr_rank(R: NDArray, n_rows: int) -> int:
    """Numerical rank from the diagonal of R."""
    diag_R = np.abs(np.diag(R))
    if len(diag_R) == 0 or diag_R[0] == 0:
        return 0
    tol = n_rows * np.finfo(R.dtype).eps * diag_R[0]
    return int(np.sum(diag_R > tol))


def ols_qr(X: NDArray, y: NDArray, regressor: str) -> OLSFit:
    """
    Fit y on the columns of X.

    Args:
        X: Design matrix (n x p) including the intercept column
        y: Response (n,)
        regressor: Name of the non-intercept column, for error messages

    Raises:
        DegenerateInputError: If X is rank-deficient (a constant regressor)
    """
    n, p = X.shape
    Q, R = np.linalg.qr(X, mode='reduced')

    rank = qr_rank(R, n)
    if rank < p:
        raise DegenerateInputError(
            f"{regressor} is constant: design matrix rank {rank}, expected {p}"
        )

    beta = solve_triangular(R, Q.T @ y, lower=False)
    fitted = X @ beta
    residuals = y - fitted

    rss = float(residuals @ residuals)
    tss = float(np.sum((y - np.mean(y)) ** 2))
    df = n - p

    R_inv = solve_triangular(R, np.eye(p), lower=False)
    unscaled = R_inv @ R_inv.T
    sigma_sq = rss / df
    se = np.sqrt(sigma_sq * np.diag(unscaled))

    return OLSFit(
        coefficients=beta,
        standard_errors=se,
        residuals=residuals,
        fitted_values=fitted,
        rss=rss,
        tss=tss,
        df_residual=df,
    )
