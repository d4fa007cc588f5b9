"""Predefined objective functions with brackets known to contain a root."""

from dataclasses import dataclass
from typing import Dict, List, Tuple
import numpy as np
from custom_types.types import Objective


@dataclass(frozen=True)
class CatalogFunction:
    label: str
    func: Objective
    bracket: Tuple[float, float]

    def __call__(self, x: float) -> float:
        return self.func(x)


PREDEFINED: Dict[str, CatalogFunction] = {
    f.label: f for f in [
        CatalogFunction("x^3 - 2x - 5", lambda x: x * x * x - 2 * x - 5, (1.0, 3.0)),
        CatalogFunction("x^2 - 4", lambda x: x * x - 4, (0.0, 3.0)),
        CatalogFunction("cos(x) - x", lambda x: np.cos(x) - x, (0.0, 1.0)),
        CatalogFunction("e^x - 2", lambda x: np.exp(x) - 2, (0.0, 1.0)),
        CatalogFunction("x^3 - x - 1", lambda x: x * x * x - x - 1, (1.0, 2.0)),
    ]
}


def labels() -> List[str]:
    return list(PREDEFINED)


def get_function(label: str) -> CatalogFunction:
    try:
        return PREDEFINED[label]
    except KeyError:
        raise KeyError(
            f"Unknown function {label!r}. Available: {', '.join(PREDEFINED)}"
        ) from None


# Convenience function
def solve_catalog(label: str, tolerance: float = 1e-10, max_iterations: int = 100):
    """Run the instrumented solver on a catalog function over its default bracket"""
    from brent.brent import solve

    entry = get_function(label)
    a, b = entry.bracket
    return solve(entry.func, a, b, tolerance=tolerance, max_iterations=max_iterations)
