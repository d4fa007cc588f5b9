from dataclasses import dataclass, field
import logging
import math
from typing import Optional, Tuple, Union
from custom_types.types import Objective
from brent.errors import EvaluationError, InvalidBracketError
from brent.evaluator import FunctionEvaluator, as_evaluator, check_finite
from brent.settings import BrentSettings
from brent.trace import IterationStep, IterationTrace, Method
from brent import logging_config  # noqa: F401  installs the NullHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrentResult:
    root: float
    iterations: int
    converged: bool
    steps: IterationTrace = field(repr=False)
    residual: float = math.nan  # f(root), the best residual seen

    @property
    def method_counts(self):
        return self.steps.method_counts()


class BrentSolver:
    """
    Hybrid bracketing root finder (bisection, secant, inverse quadratic
    interpolation) with a full per-iteration trace.

    The solver holds only its settings; every call to solve() owns its
    working state and trace, so one instance can be shared between threads
    as long as the objective is safe to call concurrently.
    """

    def __init__(self, settings: BrentSettings = BrentSettings()):
        self.s = settings

    def solve(self, evaluator: Union[FunctionEvaluator, Objective],
              a: float, b: float) -> BrentResult:
        """
        Locate a root of f inside the bracket [a, b] (either order).

        Raises InvalidBracketError when f(a) and f(b) are not of strictly
        opposite sign (an endpoint within tol of zero included) and
        EvaluationError when f cannot be evaluated at a required point.
        Running out of iterations is reported through converged=False.
        """
        f = as_evaluator(evaluator)
        tol, maxiter = self.s.tol, self.s.maxiter

        a, b = float(a), float(b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise ValueError(f"Bracket endpoints must be finite, got a={a}, b={b}")

        fa = self._evaluate(f, a)
        fb = self._evaluate(f, b)

        # an endpoint that is already a root is left to the caller
        if not _opposite_signs(fa, fb) or abs(fa) < tol or abs(fb) < tol:
            logger.warning("Invalid bracket: f(%g)=%g, f(%g)=%g", a, fa, b, fb)
            raise InvalidBracketError(a, b, fa, fb)

        # b is always the best estimate
        if abs(fa) < abs(fb):
            a, b = b, a
            fa, fb = fb, fa

        c, fc = a, fa
        d: Optional[float] = None
        mflag = True
        steps = IterationTrace()

        for i in range(maxiter):
            s, method = self._candidate(a, b, c, fa, fb, fc)

            if self._needs_bisection(s, a, b, c, d, mflag, tol):
                s = (a + b) / 2
                method = Method.BISECTION
                mflag = True
            else:
                mflag = False

            fs = self._evaluate(f, s)
            steps.append(IterationStep(
                iteration=i + 1,
                a=a, b=b, c=c,
                fa=fa, fb=fb, fc=fc,
                method=method,
                new_point=s,
                error=abs(fs)
            ))
            logger.debug("iter %d %s: s=%.16g |f(s)|=%.3e width=%.3e",
                         i + 1, method.value, s, abs(fs), abs(b - a))

            d = c
            c, fc = b, fb

            if _opposite_signs(fa, fs):
                b, fb = s, fs
            else:
                a, fa = s, fs

            if abs(fa) < abs(fb):
                a, b = b, a
                fa, fb = fb, fa

            if abs(fb) < tol or abs(b - a) < tol:
                logger.debug("Converged to %.16g in %d iterations", b, i + 1)
                return BrentResult(root=b, iterations=i + 1, converged=True,
                                   steps=steps, residual=fb)

        logger.info("No convergence after %d iterations: b=%.16g, |f(b)|=%.3e, width=%.3e",
                    maxiter, b, abs(fb), abs(b - a))
        return BrentResult(root=b, iterations=maxiter, converged=False,
                           steps=steps, residual=fb)

    @staticmethod
    def _evaluate(f: FunctionEvaluator, x: float) -> float:
        # evaluators other than CallableEvaluator are checked here as well
        try:
            return check_finite(x, f.evaluate(x))
        except EvaluationError:
            logger.warning("Evaluation failed at x=%.16g", x)
            raise

    @staticmethod
    def _candidate(a: float, b: float, c: float,
                   fa: float, fb: float, fc: float) -> Tuple[float, Method]:
        """Inverse quadratic interpolation if the residuals are distinct, else secant"""
        try:
            if fa != fc and fb != fc and fa != fb:
                s = (a * fb * fc / ((fa - fb) * (fa - fc))
                     + b * fa * fc / ((fb - fa) * (fb - fc))
                     + c * fa * fb / ((fc - fa) * (fc - fb)))
                return s, Method.INVERSE_QUADRATIC
            return b - fb * (b - a) / (fb - fa), Method.SECANT
        except ZeroDivisionError:
            # nan never passes the corridor check
            return math.nan, Method.SECANT

    @staticmethod
    def _needs_bisection(s: float, a: float, b: float, c: float,
                         d: Optional[float], mflag: bool, tol: float) -> bool:
        """True when any of the five safeguard conditions rejects s"""
        lo = (3 * a + b) / 4
        if not (min(lo, b) < s < max(lo, b)):
            return True
        if mflag:
            return abs(s - b) >= abs(b - c) / 2 or abs(b - c) < tol
        return abs(s - b) >= abs(c - d) / 2 or abs(c - d) < tol


def _opposite_signs(x: float, y: float) -> bool:
    return (x < 0 < y) or (y < 0 < x)


# Convenience function
def solve(
        evaluator: Union[FunctionEvaluator, Objective],
        a: float,
        b: float,
        tolerance: float = 1e-10,
        max_iterations: int = 100
) -> BrentResult:
    solver = BrentSolver(BrentSettings(tol=tolerance, maxiter=max_iterations))
    return solver.solve(evaluator, a, b)
