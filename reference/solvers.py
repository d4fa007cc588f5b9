from __future__ import annotations
from typing import Union
from scipy import optimize
from brent.evaluator import FunctionEvaluator, as_evaluator
from brent.settings import BrentSettings
from custom_types.types import Objective


class ReferenceSolver:
    """scipy.optimize backed solver used to cross-check the instrumented one"""

    def __init__(self, s: BrentSettings = BrentSettings()):
        self.s = s

    def brentq(self, f: Union[FunctionEvaluator, Objective], a: float, b: float) -> float:
        """Safe bracketed root"""
        ev = as_evaluator(f)
        return optimize.brentq(ev.evaluate, a, b, xtol=self.s.tol, maxiter=self.s.maxiter)

    def brentq_full(self, f: Union[FunctionEvaluator, Objective],
                    a: float, b: float) -> optimize.RootResults:
        """Bracketed root with scipy's convergence report"""
        ev = as_evaluator(f)
        _, r = optimize.brentq(ev.evaluate, a, b, xtol=self.s.tol, maxiter=self.s.maxiter,
                               full_output=True, disp=False)
        return r
