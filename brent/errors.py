"""Exception classes for the bracketing root finder."""

from typing import Optional


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class InvalidBracketError(RootFindingError, ValueError):
    """
    Raised when f(a) and f(b) do not have strictly opposite signs, which
    includes an endpoint whose residual is already within tolerance of zero.
    """

    def __init__(self, a: float, b: float, fa: float, fb: float):
        self.a = a
        self.b = b
        self.fa = fa
        self.fb = fb
        super().__init__(
            f"Function values at bounds must have opposite signs: "
            f"f({a})={fa}, f({b})={fb}"
        )


class EvaluationError(RootFindingError, ArithmeticError):
    """Raised when the objective cannot produce a finite value at x."""

    def __init__(self, x: float, reason: str = "", value: Optional[float] = None):
        self.x = x
        self.value = value
        msg = f"Function could not be evaluated at x={x}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
