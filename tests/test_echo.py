import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from dsplab.filters.echo import (
    EchoModel,
    echo_coefficients,
    add_echo,
    remove_echo,
    reconstruction_error,
)


def test_coefficients_layout():
    assert_array_equal(echo_coefficients(1, 0.3), [1.0, 0.3])
    b = echo_coefficients(4, -0.7)
    assert_array_equal(b, [1.0, 0.0, 0.0, 0.0, -0.7])
    assert b.size == 4 + 1


def test_worked_example():
    y = np.array([1.0, 0.0, 0.0, 0.0, 0.0])
    x = add_echo(y, delay=2, alpha=0.5)
    assert_allclose(x, [1.0, 0.0, 0.5, 0.0, 0.0])
    assert_allclose(remove_echo(x, delay=2, alpha=0.5), y)


def test_forward_matches_difference_equation():
    rng = np.random.default_rng(1)
    y = rng.standard_normal(200)
    D, alpha = 17, 0.8
    x = add_echo(y, D, alpha)
    expected = y.copy()
    expected[D:] += alpha * y[:-D]
    assert_allclose(x, expected)
    assert x.size == y.size


def test_no_echo_before_delay():
    rng = np.random.default_rng(2)
    y = rng.standard_normal(50)
    x = add_echo(y, delay=10, alpha=0.9)
    assert_array_equal(x[:10], y[:10])


def test_alpha_zero_is_identity():
    y = np.linspace(-1, 1, 32)
    model = EchoModel(delay=5, alpha=0.0)
    assert_allclose(model.add_echo(y), y)
    assert_allclose(model.remove_echo(y), y)


@pytest.mark.parametrize("delay,alpha", [(1, 0.5), (7, -0.9), (100, 0.99), (3, 0.0)])
def test_round_trip_reconstructs(delay, alpha):
    rng = np.random.default_rng(delay)
    y = rng.standard_normal(1000)
    model = EchoModel(delay=delay, alpha=alpha)
    y_hat = model.remove_echo(model(y))
    assert reconstruction_error(y, y_hat) < 1e-9


def test_unstable_alpha_rejected_by_default():
    with pytest.raises(ValueError):
        EchoModel(delay=3, alpha=1.0)
    with pytest.raises(ValueError):
        EchoModel(delay=3, alpha=-1.5)


def test_unstable_alpha_allowed_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="dsplab.filters.echo"):
        model = EchoModel(delay=2, alpha=1.5, allow_unstable=True)
    assert not model.is_invertible
    assert "unstable" in caplog.text
    # the forward model is still an ordinary FIR filter
    assert_allclose(model.add_echo(np.array([1.0, 0.0, 0.0])), [1.0, 0.0, 1.5])


@pytest.mark.parametrize("delay", [0, -3, 2.5, True])
def test_invalid_delay(delay):
    with pytest.raises(ValueError):
        EchoModel(delay=delay, alpha=0.5)


def test_non_finite_alpha():
    with pytest.raises(ValueError):
        EchoModel(delay=2, alpha=float("nan"))


def test_delay_must_be_shorter_than_signal():
    model = EchoModel(delay=5, alpha=0.5)
    with pytest.raises(ValueError):
        model.add_echo(np.ones(5))
    with pytest.raises(ValueError):
        model.remove_echo(np.ones(3))


def test_reconstruction_error_shape_check():
    assert reconstruction_error([1.0, 2.0], [1.0, 2.5]) == 0.5
    with pytest.raises(ValueError):
        reconstruction_error([1.0], [1.0, 2.0])


def test_unstable_inverse_is_still_computed():
    model = EchoModel(delay=2, alpha=1.5, allow_unstable=True)
    x = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 0.0])
    y = model.remove_echo(x)
    assert y.shape == x.shape
    assert np.all(np.isfinite(y))
    # y[n] = x[n] - 1.5 y[n-2]: impulse grows as (-1.5)^k every 2 samples
    assert_allclose(y, [1.0, 0.0, -1.5, 0.0, 2.25, 0.0])


def test_unstable_inverse_overflow_is_reported(caplog):
    model = EchoModel(delay=1, alpha=10.0, allow_unstable=True)
    x = np.zeros(400)
    x[0] = 1.0
    with np.errstate(all="ignore"), caplog.at_level(logging.WARNING, logger="dsplab.filters.echo"):
        y = model.remove_echo(x)
    assert y.shape == x.shape
    assert not np.all(np.isfinite(y))
    assert "non-finite" in caplog.text


@pytest.mark.parametrize("delay", [True, None, "3", float("inf"), 0])
def test_coefficients_reject_same_delays_as_model(delay):
    with pytest.raises(ValueError):
        echo_coefficients(delay, 0.5)
    with pytest.raises(ValueError):
        EchoModel(delay=delay, alpha=0.5)


@pytest.mark.parametrize("alpha", [None, "half", float("inf")])
def test_invalid_alpha_raises_value_error(alpha):
    with pytest.raises(ValueError):
        echo_coefficients(3, alpha)
    with pytest.raises(ValueError):
        EchoModel(delay=3, alpha=alpha)


def test_integral_float_and_numpy_delay_accepted():
    assert EchoModel(delay=np.int64(4), alpha=0.5).delay == 4
    assert echo_coefficients(3.0, 0.5).size == 4
