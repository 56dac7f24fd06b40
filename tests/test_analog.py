import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from dsplab.signals.analog import time_grid, analog_exponential, analog_sinusoid, sample_analog


def test_time_grid_inclusive():
    t = time_grid(-0.005, 0.005, 0.00005)
    assert t.size == 201
    assert_allclose(t[0], -0.005)
    assert_allclose(t[-1], 0.005)


def test_time_grid_rejects_bad_step():
    with pytest.raises(ValueError):
        time_grid(0.0, 1.0, 0.0)
    with pytest.raises(ValueError):
        time_grid(1.0, 0.0, 0.1)


def test_analog_exponential_even_and_peak():
    t = np.array([-1e-3, 0.0, 1e-3])
    xa = analog_exponential(t, 1000)
    assert_allclose(xa, [np.exp(-1), 1.0, np.exp(-1)])


def test_analog_sinusoid():
    xa = analog_sinusoid(np.array([0.0, 0.25]), amplitude=2.0, freq_hz=1.0)
    assert_allclose(xa, [2.0, 0.0], atol=1e-12)


def test_sample_analog_indices_and_instants():
    x, n, ts = sample_analog(lambda t: analog_exponential(t, 1000), 5000, -0.005, 0.005)
    assert_array_equal(n, np.arange(-25, 26))
    assert_allclose(ts, n / 5000.0)
    assert_allclose(x, np.exp(-1000 * np.abs(n / 5000.0)))


def test_sample_analog_rejects_bad_rate():
    with pytest.raises(ValueError):
        sample_analog(np.cos, 0, 0.0, 1.0)
