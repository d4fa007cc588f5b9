"""Tabular views of a root finder run for plotting and export."""

import logging
from pathlib import Path
from typing import Any, Dict, Union
import numpy as np
import pandas as pd
from brent.brent import BrentResult
from brent.errors import EvaluationError
from brent.evaluator import FunctionEvaluator, as_evaluator
from brent.trace import Method
from custom_types.types import Objective

logger = logging.getLogger(__name__)


def sample_function(
        evaluator: Union[FunctionEvaluator, Objective],
        a: float,
        b: float,
        n_intervals: int = 200,
        padding: float = 0.2,
        clip: float = 1000.0
) -> pd.DataFrame:
    """
    Sample f at n_intervals + 1 evenly spaced points over [a, b] widened by
    `padding` * (b - a) on each side.

    Points where f cannot be evaluated, or where |f| >= clip, are dropped.
    Returns DataFrame with columns x, y.
    """
    if n_intervals < 1:
        raise ValueError(f"n_intervals must be >= 1, got {n_intervals}")

    f = as_evaluator(evaluator)
    lo, hi = min(a, b), max(a, b)
    span = hi - lo
    xs = np.linspace(lo - span * padding, hi + span * padding, n_intervals + 1)

    points = []
    skipped = 0
    for x in xs:
        try:
            y = f.evaluate(float(x))
        except EvaluationError:
            skipped += 1
            continue
        if np.isfinite(y) and abs(y) < clip:
            points.append((float(x), float(y)))
        else:
            skipped += 1

    if skipped:
        logger.debug("sample_function dropped %d of %d points", skipped, len(xs))
    return pd.DataFrame(points, columns=['x', 'y'])


def convergence_frame(result: BrentResult) -> pd.DataFrame:
    """log10 of the residual per iteration, tagged with the method used"""
    errors = result.steps.errors
    with np.errstate(divide='ignore'):
        log_err = np.log10(errors)
    return pd.DataFrame({
        'iteration': [s.iteration for s in result.steps],
        'log10_error': log_err,
        'method': [s.method.value for s in result.steps],
    })


def summarize(result: BrentResult) -> Dict[str, Any]:
    counts = result.steps.method_counts()
    last = result.steps.last
    return {
        'root': result.root,
        'residual': result.residual,
        'iterations': result.iterations,
        'converged': result.converged,
        'bisection': counts[Method.BISECTION],
        'secant': counts[Method.SECANT],
        'inverse_quadratic': counts[Method.INVERSE_QUADRATIC],
        'final_error': last.error if last else None,
        'final_width': last.width if last else None,
        'last_method': last.method.value if last else None,
    }


class TraceExporter:
    """Export an iteration trace to disk"""

    def __init__(self, result: BrentResult):
        self.result = result

    def to_csv(self, output_path: Union[str, Path]) -> Path:
        """Write one row per iteration to CSV"""
        df = self.result.steps.to_frame()

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
        logger.info("Exported %d iterations to %s", len(df), path)
        return path
