import numpy as np
import pytest

from facecnn.optim import AdamW


def test_first_step_moves_by_learning_rate_against_gradient():
    theta = np.array([1.0, -2.0, 0.5], dtype=np.float32)
    opt = AdamW({"w": theta}, lr=0.01, weight_decay=0.0)
    opt.step({"w": np.array([0.3, -4.0, 2.0], dtype=np.float32)})
    np.testing.assert_allclose(theta, [0.99, -1.99, 0.49], rtol=1e-5)


def test_zero_gradient_only_applies_weight_decay():
    theta = np.array([2.0, -4.0], dtype=np.float64)
    start = theta.copy()
    opt = AdamW({"w": theta}, lr=0.1, weight_decay=0.5)
    opt.step({"w": np.zeros(2)})
    np.testing.assert_allclose(theta, start * (1 - 0.1 * 0.5))


def test_minimises_quadratic():
    theta = np.array([0.0, 10.0], dtype=np.float64)
    opt = AdamW({"w": theta}, lr=0.1, weight_decay=0.0)
    for _ in range(1000):
        opt.step({"w": 2 * (theta - 3.0)})
    np.testing.assert_allclose(theta, 3.0, atol=1e-2)
    assert opt.step_count == 1000


def test_parameters_without_gradient_untouched():
    a = np.ones(2, dtype=np.float32)
    b = np.ones(2, dtype=np.float32)
    opt = AdamW({"a": a, "b": b}, lr=0.1)
    opt.step({"a": np.ones(2, dtype=np.float32)})
    np.testing.assert_array_equal(b, np.ones(2, dtype=np.float32))
    assert np.all(a < 1.0)


def test_unknown_gradient_rejected():
    opt = AdamW({"a": np.zeros(1)})
    with pytest.raises(KeyError):
        opt.step({"b": np.zeros(1)})
    assert opt.step_count == 0


def test_gradient_shape_mismatch_rejected():
    opt = AdamW({"a": np.zeros(3)})
    with pytest.raises(ValueError):
        opt.step({"a": np.zeros(2)})


def test_dtype_preserved():
    theta = np.ones(4, dtype=np.float32)
    opt = AdamW({"w": theta})
    opt.step({"w": np.full(4, 0.5)})
    assert theta.dtype == np.float32
    assert np.all(theta < 1.0)