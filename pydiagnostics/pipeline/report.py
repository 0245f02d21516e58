"""
DiagnosticReport: everything one pipeline run produced.

The report is the full rendering surface for an external renderer: the
input Series, the GroupPartition used by the Levene test, and one
solution per stage.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydiagnostics.anova import GroupPartition, LeveneSolution
from pydiagnostics.core.series import Series
from pydiagnostics.descriptive import DescriptiveSolution
from pydiagnostics.hypothesis import RunsSolution
from pydiagnostics.pipeline.config import DiagnosticConfig
from pydiagnostics.regression import TrendSolution
from pydiagnostics.timeseries import AcfSolution, SpectrumSolution


@dataclass(frozen=True, eq=False)
class DiagnosticReport:
    """Read-only aggregate of one diagnostic run."""
    series: Series
    config: DiagnosticConfig
    descriptive: DescriptiveSolution
    acf: AcfSolution
    spectrum: SpectrumSolution
    trend: TrendSolution
    partition: GroupPartition
    levene: LeveneSolution
    runs: RunsSolution
    timing: dict[str, float]

    @property
    def warnings(self) -> tuple[str, ...]:
        """Non-fatal warnings from every stage, prefixed with the stage name."""
        stages = (
            ('descriptive', self.descriptive),
            ('acf', self.acf),
            ('spectrum', self.spectrum),
            ('trend', self.trend),
            ('levene', self.levene),
            ('runs', self.runs),
        )
        return tuple(
            f"{name}: {w}" for name, solution in stages for w in solution.warnings
        )

    def summary(self) -> str:
        title = f"Diagnostic Report: {self.series.name}" if self.series.name else "Diagnostic Report"
        sections = [
            title,
            "#" * 60,
            self.descriptive.summary(),
            "",
            self.trend.summary(),
            "",
            self.levene.summary(),
            "",
            self.runs.summary(),
            self.acf.summary(),
            "",
            self.spectrum.summary(),
        ]
        if self.warnings:
            sections += ["", "Warnings:"] + [f"  - {w}" for w in self.warnings]
        return "\n".join(sections)

    def __repr__(self) -> str:
        return (
            f"DiagnosticReport(n={self.series.n}, trend_t={self.trend.slope_t:.4g}, "
            f"levene_reject={self.levene.reject}, runs_reject={self.runs.reject})"
        )
