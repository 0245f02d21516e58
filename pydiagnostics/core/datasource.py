"""
Data source for pydiagnostics.

Reads a whitespace-delimited text resource (local file or URL) into a
Series. This is the only place the library touches I/O; every analysis
receives its Series explicitly.

Usage:
    from pydiagnostics.core.datasource import load_series

    # NIST random walk data: 25 lines of header before the values
    series = load_series("randwalk.dat", skip_header=25)
"""

from __future__ import annotations

from pathlib import Path

from pydiagnostics.core.exceptions import EmptySeriesError, ValidationError
from pydiagnostics.core.series import Series


def load_series(
    source: str | Path,
    *,
    skip_header: int = 0,
    column: int = 0,
    name: str | None = None,
) -> Series:
    """
    Read one column of a whitespace-delimited text resource as a Series.

    Args:
        source: Local path or URL (anything pandas.read_csv accepts)
        skip_header: Number of leading lines to skip before the data
        column: Zero-based column to read when lines hold several values
        name: Series name; defaults to the file name of the source

    Returns:
        Series of the column's values in file order

    Raises:
        ValidationError: If the resource cannot be read or parsed
        EmptySeriesError: If no data lines remain after the header
    """
    import pandas as pd

    if skip_header < 0:
        raise ValidationError(f"skip_header must be >= 0, got {skip_header}")
    if column < 0:
        raise ValidationError(f"column must be >= 0, got {column}")

    try:
        df = pd.read_csv(
            source,
            sep=r'\s+',
            header=None,
            skiprows=skip_header,
        )
    except pd.errors.EmptyDataError as e:
        raise EmptySeriesError(f"{source}: no data after {skip_header} header lines") from e
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise ValidationError(f"{source}: cannot read series: {e}") from e

    if column >= df.shape[1]:
        raise ValidationError(
            f"{source}: column {column} requested but only {df.shape[1]} present"
        )

    if name is None:
        name = Path(str(source)).name or None

    return Series.from_array(df.iloc[:, column].to_numpy(), name=name)
