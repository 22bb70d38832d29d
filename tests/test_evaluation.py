"""
Tests for sign evaluation and the transform/f composition.
"""

import math

import numpy as np
import pytest
from mpmath import mpf

from roots_by_distribution.evaluation import Sample, sign, make_evaluator


class TestSign:
    """Test sign on the numeric types f may return."""

    @pytest.mark.parametrize("value, expected", [
        (3.5, 1), (-0.1, -1), (0.0, 0), (-0.0, 0),
        (7, 1), (-7, -1), (0, 0),
        (math.inf, 1), (-math.inf, -1),
        (1e-300, 1), (-1e-300, -1),
    ])
    def test_python_numbers(self, value, expected):
        assert sign(value) == expected

    def test_numpy_scalars(self):
        assert sign(np.float64(2.0)) == 1
        assert sign(np.float32(-2.0)) == -1
        assert sign(np.float64(0.0)) == 0

    def test_mpmath_numbers(self):
        assert sign(mpf("1e-40")) == 1
        assert sign(mpf("-1e-40")) == -1
        assert sign(mpf(0)) == 0

    def test_returns_int(self):
        assert type(sign(np.float64(5.0))) is int

    def test_nan_raises(self):
        with pytest.raises(ValueError, match="NaN"):
            sign(float("nan"))


class TestMakeEvaluator:
    """Test z -> Sample(transform(z), sign(f(transform(z))))."""

    def test_composition(self):
        evaluate = make_evaluator(lambda x: x - 1.0, lambda z: 2 * z)
        assert evaluate(0.0) == Sample(0.0, -1)
        assert evaluate(0.5) == Sample(1.0, 0)
        assert evaluate(1.0) == Sample(2.0, 1)

    def test_sample_fields(self):
        s = make_evaluator(lambda x: -x, float)(0.25)
        assert s.x == 0.25
        assert s.s == -1

    def test_f_error_propagates(self):
        evaluate = make_evaluator(lambda x: 1.0 / x, float)
        with pytest.raises(ZeroDivisionError):
            evaluate(0.0)

    def test_transform_error_propagates(self):
        def transform(z):
            raise KeyError("bad transform")

        evaluate = make_evaluator(lambda x: x, transform)
        with pytest.raises(KeyError):
            evaluate(0.5)

    def test_each_call_evaluates(self):
        """No caching: every call reaches f."""
        calls = []

        def f(x):
            calls.append(x)
            return x

        evaluate = make_evaluator(f, float)
        evaluate(0.5)
        evaluate(0.5)
        assert calls == [0.5, 0.5]
