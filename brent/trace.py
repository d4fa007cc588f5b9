"""Per-iteration instrumentation records produced by the root finder."""

from collections.abc import Sequence
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Iterator, List, Optional
import pandas as pd
from custom_types.types import FloatArray, as_array


class Method(Enum):
    """Technique that produced the new point of an iteration"""
    BISECTION = "Bisection"
    SECANT = "Secant"
    INVERSE_QUADRATIC = "InverseQuadratic"


@dataclass(frozen=True)
class IterationStep:
    """
    One iteration of the hybrid method.

    Bracket points and residuals are the values at the start of the
    iteration; new_point is the point it evaluated and error is |f(new_point)|.
    """
    iteration: int
    a: float
    b: float
    c: float
    fa: float
    fb: float
    fc: float
    method: Method
    new_point: float
    error: float

    @property
    def width(self) -> float:
        return abs(self.b - self.a)


TRACE_COLUMNS = ['iteration', 'a', 'b', 'c', 'fa', 'fb', 'fc',
                 'method', 'new_point', 'error', 'width']


class IterationTrace(Sequence):
    """Ordered, append-only record of the steps taken by one solve call"""

    def __init__(self):
        self._steps: List[IterationStep] = []

    def append(self, step: IterationStep) -> None:
        self._steps.append(step)

    def __getitem__(self, index):
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[IterationStep]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"IterationTrace(steps={len(self._steps)})"

    @property
    def last(self) -> Optional[IterationStep]:
        return self._steps[-1] if self._steps else None

    @property
    def methods(self) -> List[Method]:
        return [s.method for s in self._steps]

    @property
    def errors(self) -> FloatArray:
        return as_array([s.error for s in self._steps])

    @property
    def new_points(self) -> FloatArray:
        return as_array([s.new_point for s in self._steps])

    @property
    def widths(self) -> FloatArray:
        return as_array([s.width for s in self._steps])

    def count_method(self, method: Method) -> int:
        return sum(1 for s in self._steps if s.method is method)

    def method_counts(self) -> Dict[Method, int]:
        """Number of steps per method, zero-filled for unused methods"""
        return {m: self.count_method(m) for m in Method}

    def to_frame(self) -> pd.DataFrame:
        """One row per step, method as its display value"""
        rows = []
        for s in self._steps:
            row = asdict(s)
            row['method'] = s.method.value
            row['width'] = s.width
            rows.append(row)
        return pd.DataFrame(rows, columns=TRACE_COLUMNS)
