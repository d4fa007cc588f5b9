from dataclasses import dataclass
import warnings
import numpy as np


@dataclass(frozen=True)
class BrentSettings:
    tol: float = 1e-10  # residual and bracket width tolerance
    maxiter: int = 100  # hard cap, non-convergence is reported not raised

    def __post_init__(self):
        """Validate tolerance and iteration cap"""
        if isinstance(self.tol, bool) or not np.isfinite(self.tol) or self.tol <= 0.0:
            raise ValueError(f"tol must be a positive finite number, got {self.tol!r}")

        if isinstance(self.maxiter, bool) or not isinstance(self.maxiter, (int, np.integer)):
            raise ValueError(f"maxiter must be an integer, got {self.maxiter!r}")
        if self.maxiter < 1:
            raise ValueError(f"maxiter must be >= 1, got {self.maxiter}")

        if self.tol < np.finfo(np.float64).eps:
            warnings.warn(
                f"Tolerance {self.tol:.3e} is below machine epsilon. "
                f"The bracket width criterion may only be met by an exact root.",
                UserWarning,
                stacklevel=3
            )
