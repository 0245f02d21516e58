"""
Series: the immutable univariate input shared by every diagnostic.

A Series is an ordered sequence of finite reals indexed 1..N. The
backing array is marked read-only so no solver can mutate the data a
report was computed from.

Construction:
    Series.from_array([1.2, 0.7, ...], name='randwalk')
    Series.coerce(series_or_array)   # pass-through for Series
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydiagnostics.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
)


@dataclass(frozen=True, eq=False)
class Series:
    """
    Validated, read-only univariate series.

    Do not construct directly; use Series.from_array().
    """
    _values: NDArray[np.floating[Any]]
    _name: str | None = None

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str | None = None) -> Series:
        """
        Build a Series from any 1D array-like of finite numbers.

        pandas Series are accepted; their name is kept unless one is given.

        Raises:
            EmptySeriesError: If data has no observations
            DimensionError: If data is not one-dimensional
            ValidationError: If data is non-numeric or contains NaN/Inf
        """
        if name is None and getattr(data, 'name', None) is not None:
            name = str(data.name)
        if hasattr(data, 'to_numpy'):
            data = data.to_numpy()

        values = check_array(data, 'series')
        check_1d(values, 'series')
        check_not_empty(values, 'series')
        check_finite(values, 'series')

        values.setflags(write=False)
        return cls(_values=values, _name=name)

    @classmethod
    def coerce(cls, data: ArrayLike | Series) -> Series:
        """Return data unchanged if it is already a Series, else build one."""
        if isinstance(data, Series):
            return data
        return cls.from_array(data)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observations in original order (read-only)."""
        return self._values

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._values.shape[0])

    @property
    def index(self) -> NDArray[np.floating[Any]]:
        """Observation index 1..N as float64."""
        return np.arange(1, self.n + 1, dtype=np.float64)

    @property
    def name(self) -> str | None:
        return self._name

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        label = f"{self._name!r}, " if self._name else ""
        return f"Series({label}n={self.n})"
