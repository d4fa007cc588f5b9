"""Adapters between caller supplied functions and the root finder."""

from typing import Protocol, Union, runtime_checkable
import math
import numpy as np
from custom_types.types import Objective
from brent.errors import EvaluationError


def check_finite(x: float, y) -> float:
    """Convert an evaluator result to float, rejecting non-real and non-finite values"""
    try:
        y = float(y)
    except (TypeError, ValueError) as exc:
        raise EvaluationError(x, reason=f"result {y!r} is not a real number") from exc

    if not math.isfinite(y):
        raise EvaluationError(x, reason="non-finite result", value=y)
    return y


@runtime_checkable
class FunctionEvaluator(Protocol):
    def evaluate(self, x: float) -> float:
        ...


class CallableEvaluator:
    """
    Wrap a plain real -> real callable as a FunctionEvaluator.

    Arithmetic failures inside the callable (division by zero, overflow,
    math domain errors, numpy divide/overflow/invalid errors) and non-finite
    results are reported as EvaluationError.
    """

    def __init__(self, func: Objective):
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")
        self.func = func

    def evaluate(self, x: float) -> float:
        try:
            # underflow to zero or a subnormal is still a valid finite value
            with np.errstate(divide="raise", over="raise", invalid="raise", under="ignore"):
                y = self.func(x)
        except EvaluationError:
            raise
        except (ArithmeticError, ValueError) as exc:
            raise EvaluationError(x, reason=str(exc) or type(exc).__name__) from exc

        return check_finite(x, y)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


def as_evaluator(obj: Union[FunctionEvaluator, Objective]) -> FunctionEvaluator:
    """Return obj if it already evaluates, otherwise wrap the callable."""
    if isinstance(obj, FunctionEvaluator):
        return obj
    if callable(obj):
        return CallableEvaluator(obj)
    raise TypeError(
        f"Expected a FunctionEvaluator or a callable, got {type(obj).__name__}"
    )
