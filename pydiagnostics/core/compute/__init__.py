"""
Shared compute infrastructure for pydiagnostics.

Domain-independent numeric helpers live here; the statistics themselves
live in their domain subpackages.
"""

from pydiagnostics.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
