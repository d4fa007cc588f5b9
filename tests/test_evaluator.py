import math
import pytest
import numpy as np
from brent.errors import EvaluationError, RootFindingError
from brent.evaluator import CallableEvaluator, FunctionEvaluator, as_evaluator, check_finite


class TestCallableEvaluator:
    """Failures inside the objective become EvaluationError"""

    def test_plain_value(self):
        ev = CallableEvaluator(lambda x: x * x - 4)
        assert ev.evaluate(3.0) == 5.0
        assert ev(1.0) == -3.0

    def test_numpy_scalar_converted(self):
        y = CallableEvaluator(np.cos).evaluate(0.0)
        assert type(y) is float
        assert y == 1.0

    def test_zero_division(self):
        with pytest.raises(EvaluationError) as exc_info:
            CallableEvaluator(lambda x: 1.0 / x).evaluate(0.0)
        assert exc_info.value.x == 0.0
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_math_domain_error(self):
        with pytest.raises(EvaluationError):
            CallableEvaluator(math.sqrt).evaluate(-1.0)

    def test_numpy_invalid_raises(self):
        """numpy warnings are promoted to errors while evaluating"""
        with pytest.raises(EvaluationError) as exc_info:
            CallableEvaluator(np.log).evaluate(-1.0)
        assert isinstance(exc_info.value.__cause__, FloatingPointError)

    def test_numpy_underflow_is_finite(self):
        """An underflowed result is a valid value, not a failure"""
        ev = CallableEvaluator(lambda x: np.exp(x) - 2)
        assert ev.evaluate(-800.0) == -2.0

        tiny = CallableEvaluator(lambda x: np.float64(x) * 1e-300).evaluate(1e-10)
        assert 0.0 < tiny < 1e-300

    def test_numpy_overflow(self):
        with pytest.raises(EvaluationError):
            CallableEvaluator(np.exp).evaluate(1000.0)

    def test_non_finite_result(self):
        with pytest.raises(EvaluationError) as exc_info:
            CallableEvaluator(lambda x: float('nan')).evaluate(2.0)
        assert math.isnan(exc_info.value.value)

    def test_shared_finiteness_check(self):
        assert check_finite(1.0, np.float64(2.5)) == 2.5
        with pytest.raises(EvaluationError):
            check_finite(1.0, float('inf'))
        with pytest.raises(EvaluationError):
            check_finite(1.0, "abc")

    def test_complex_result(self):
        with pytest.raises(EvaluationError):
            CallableEvaluator(lambda x: complex(x, 1.0)).evaluate(2.0)

    def test_other_errors_propagate(self):
        """Programming errors in the objective are not masked"""
        def broken(x):
            raise KeyError("missing")

        with pytest.raises(KeyError):
            CallableEvaluator(broken).evaluate(1.0)

    def test_error_hierarchy(self):
        err = EvaluationError(1.0, reason="undefined")
        assert isinstance(err, RootFindingError)
        assert isinstance(err, ArithmeticError)
        assert "x=1.0" in str(err)


class TestAsEvaluator:

    def test_wraps_callable(self):
        ev = as_evaluator(lambda x: x)
        assert isinstance(ev, CallableEvaluator)
        assert isinstance(ev, FunctionEvaluator)

    def test_passes_evaluator_through(self):
        class Linear:
            def evaluate(self, x):
                return 2 * x

        obj = Linear()
        assert as_evaluator(obj) is obj

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            as_evaluator("x^2 - 4")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
