"""
Diagnostic pipeline: every analysis over one series, fail-fast.

Stages run in a fixed order on the same immutable Series. They are
independent of one another, so the order only decides which failure is
reported first. The first failing stage aborts the run with a
DiagnosticStageError naming it; no partial report is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from numpy.typing import ArrayLike

from pydiagnostics.anova import levene_test, partition_groups
from pydiagnostics.core.compute.timing import Timer
from pydiagnostics.core.exceptions import DiagnosticStageError, PyDiagnosticsError
from pydiagnostics.core.series import Series
from pydiagnostics.descriptive import describe
from pydiagnostics.hypothesis import runs_test
from pydiagnostics.pipeline.config import DiagnosticConfig
from pydiagnostics.pipeline.report import DiagnosticReport
from pydiagnostics.regression import fit_trend
from pydiagnostics.timeseries import acf, spectrum

logger = logging.getLogger(__name__)


def _stages(
    series: Series,
    config: DiagnosticConfig,
    outputs: dict[str, Any],
) -> list[tuple[str, Callable[[], Any]]]:
    # levene reuses the partition stage's output
    return [
        ('descriptive', lambda: describe(series)),
        ('acf', lambda: acf(series, config.max_lag)),
        ('spectrum', lambda: spectrum(series, config.span)),
        ('trend', lambda: fit_trend(series)),
        ('partition', lambda: partition_groups(series.n, config.n_groups)),
        ('levene', lambda: levene_test(
            series, config.n_groups, alpha=config.alpha, partition=outputs['partition'],
        )),
        ('runs', lambda: runs_test(series, alpha=config.alpha)),
    ]


def run_diagnostics(
    series: ArrayLike | Series,
    config: DiagnosticConfig | None = None,
) -> DiagnosticReport:
    """
    Run the full diagnostic battery on one series.

    Args:
        series: Series or 1D numeric array-like
        config: DiagnosticConfig; defaults are n_groups=4, alpha=0.05,
            max_lag=100, span=3

    Returns:
        DiagnosticReport holding every stage's solution

    Raises:
        DiagnosticStageError: If input validation ('input') or any stage
            fails. The original exception is chained as __cause__ and
            available as .error.

    Examples:
        >>> report = run_diagnostics(load_series("randwalk.dat", skip_header=25))
        >>> report.trend.slope_t, report.levene.reject, report.runs.z_statistic
        >>> print(report.summary())
    """
    if config is None:
        config = DiagnosticConfig()

    try:
        s = Series.coerce(series)
    except PyDiagnosticsError as e:
        logger.error("diagnostics aborted | stage=input | %s", e)
        raise DiagnosticStageError('input', e) from e

    logger.info(
        "diagnostics start | n=%d | n_groups=%d | alpha=%s | max_lag=%d | span=%d",
        s.n, config.n_groups, config.alpha, config.max_lag, config.span,
    )

    timer = Timer()
    timer.start()
    outputs: dict[str, Any] = {}

    for name, stage in _stages(s, config, outputs):
        try:
            with timer.section(name):
                outputs[name] = stage()
        except PyDiagnosticsError as e:
            logger.error("diagnostics aborted | stage=%s | %s", name, e)
            raise DiagnosticStageError(name, e) from e
        logger.debug("stage done | %s", name)

    timer.stop()
    timing = timer.result()
    logger.info("diagnostics done | n=%d | %.4fs", s.n, timing['total_seconds'])

    return DiagnosticReport(
        series=s,
        config=config,
        descriptive=outputs['descriptive'],
        acf=outputs['acf'],
        spectrum=outputs['spectrum'],
        trend=outputs['trend'],
        partition=outputs['partition'],
        levene=outputs['levene'],
        runs=outputs['runs'],
        timing=timing,
    )
