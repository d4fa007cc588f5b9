import math
import pytest
import numpy as np
import pandas as pd
from analysis.report import TraceExporter, convergence_frame, sample_function, summarize
from brent.brent import solve
from brent.trace import Method, TRACE_COLUMNS


def cubic(x):
    return x ** 3 - 2 * x - 5


class TestSampleFunction:

    def test_padded_range(self):
        df = sample_function(cubic, 1.0, 3.0)

        assert list(df.columns) == ['x', 'y']
        assert len(df) == 201
        assert df['x'].iloc[0] == pytest.approx(0.6)
        assert df['x'].iloc[-1] == pytest.approx(3.4)

    def test_skips_undefined_points(self):
        df = sample_function(lambda x: 1.0 / x, -1.0, 1.0, n_intervals=2, padding=0.0)

        assert df['x'].tolist() == [-1.0, 1.0]
        assert df['y'].tolist() == [-1.0, 1.0]

    def test_skips_large_values(self):
        df = sample_function(lambda x: 10.0 ** x, 0.0, 5.0, padding=0.0)

        assert (df['y'].abs() < 1000.0).all()
        assert df['x'].max() < 3.0

    def test_keeps_underflowed_values(self):
        """exp underflowing to zero still gives a finite sample"""
        df = sample_function(lambda x: np.exp(x) - 2, -800.0, 1.0, n_intervals=10, padding=0.0)

        assert len(df) == 11
        assert df['y'].iloc[0] == -2.0

    def test_invalid_points(self):
        with pytest.raises(ValueError):
            sample_function(cubic, 1.0, 3.0, n_intervals=0)


class TestRunViews:

    def test_convergence_frame(self):
        res = solve(cubic, 1.0, 3.0)
        df = convergence_frame(res)

        assert list(df.columns) == ['iteration', 'log10_error', 'method']
        assert len(df) == res.iterations
        np.testing.assert_allclose(df['log10_error'].values, np.log10(res.steps.errors))

    def test_convergence_frame_exact_hit(self):
        res = solve(lambda x: x - 1.5, 1.0, 2.0)
        df = convergence_frame(res)

        assert df['log10_error'].iloc[-1] == -math.inf

    def test_summarize(self):
        res = solve(cubic, 1.0, 3.0)
        summary = summarize(res)
        print(summary)

        assert summary['converged'] is True
        assert summary['iterations'] == res.iterations
        assert summary['bisection'] + summary['secant'] + summary['inverse_quadratic'] == res.iterations
        assert summary['inverse_quadratic'] == res.method_counts[Method.INVERSE_QUADRATIC]
        assert summary['final_error'] == res.steps.last.error
        assert summary['last_method'] in {m.value for m in Method}

    def test_export_csv(self, tmp_path):
        res = solve(cubic, 1.0, 3.0)
        out = TraceExporter(res).to_csv(tmp_path / "runs" / "cubic.csv")

        assert out.exists()
        df = pd.read_csv(out)
        assert list(df.columns) == TRACE_COLUMNS
        assert len(df) == res.iterations


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
