"""
Generic result container for all pydiagnostics computations.

The Result class provides a standardized envelope that every domain result
uses, so that timing, warnings and metadata look the same whether the
payload is a five-number summary or a runs test.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (center, span, truncated lags)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a report never drifts from its series
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for diagnostic computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (statistics, test results, ...)
        info: Structured metadata (method, options actually used)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RunsParams(...),
        ...     info={'center': 'median', 'alternative': 'two.sided'},
        ...     timing={'total_seconds': 0.0002},
        ...     backend_name='cpu',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
