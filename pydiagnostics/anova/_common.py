"""
Common data types for the grouped variance test.

Contains the frozen parameter payload that goes inside Result[P] envelopes.
Payloads are plain data containers with no computation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LeveneParams:
    """Parameter payload for Levene / Brown-Forsythe test."""
    f_value: float
    p_value: float
    df_between: int                # k - 1
    df_within: int                 # N - k
    alpha: float
    critical_value: float          # F quantile at 1 - alpha
    reject: bool                   # f_value > critical_value
    center: str                    # 'median' or 'mean'
    group_vars: dict[int, float]   # group label -> sample variance
