"""
sequences.py
Course sections on discrete-time sequences.
Each section computes its sequences, draws the plots, and returns the arrays in a dict.
"""

from __future__ import annotations

import logging

import numpy as np
import matplotlib.pyplot as plt

from dsplab.signals.sequences import (
    impulse_sequence,
    step_sequence,
    real_exponential_sequence,
    complex_exponential_sequence,
    sinusoidal_sequence,
    random_sequence,
    periodic_sequence,
    index_range,
    sig_add,
    sig_mult,
    sig_shift,
    sig_fold,
    even_odd,
)
from dsplab.signals.analog import time_grid, analog_exponential, sample_analog
from dsplab.plotting import (
    plot_discrete,
    plot_continuous,
    plot_sampled,
    plot_complex_sequence,
)

logger = logging.getLogger(__name__)


def elementary_sequences_section(n1: int = -5, n2: int = 20, seed: int = 0) -> dict:
    """impulse, step, real exponential, sinusoid and random sequences over n1..n2."""
    delta, n = impulse_sequence(0, n1, n2)
    u, _ = step_sequence(0, n1, n2)
    expo, _ = real_exponential_sequence(0.9, n1, n2)
    sinus, _ = sinusoidal_sequence(3.0, 0.1 * np.pi, np.pi / 3, n1, n2)
    rnd, _ = random_sequence(n1, n2, kind="uniform", seed=seed)

    fig, axes = plt.subplots(5, 1, figsize=(8, 12), sharex=True)
    plot_discrete(delta, n, title="delta(n)", ax=axes[0])
    plot_discrete(u, n, title="u(n)", ax=axes[1])
    plot_discrete(expo, n, title="(0.9)^n", ax=axes[2])
    plot_discrete(sinus, n, title="3cos(0.1*pi*n + pi/3)", ax=axes[3])
    plot_discrete(rnd, n, title="uniform random", ax=axes[4])
    fig.tight_layout()

    return {
        "n": n,
        "impulse": delta,
        "step": u,
        "exponential": expo,
        "sinusoid": sinus,
        "random": rnd,
    }


def composite_sequences_section(seed: int = 0) -> dict:
    """
    a) x(n) = 2 delta(n+2) - delta(n-4),                      -5 <= n <= 5
    b) x(n) = n[u(n)-u(n-10)] + 10 e^{-0.3(n-10)}[u(n-10)-u(n-20)],  0 <= n <= 20
    c) x(n) = cos(0.04 pi n) + 0.2 w(n),  w ~ N(0,1),         0 <= n <= 50
    d) x~(n) = {..., 5,4,3,2,1, 5,4,3,2,1, ...},               -10 <= n <= 9
    """
    # a)
    n_a = index_range(-5, 5)
    xa = 2 * impulse_sequence(-2, -5, 5)[0] - impulse_sequence(4, -5, 5)[0]

    # b)
    n_b = index_range(0, 20)
    u0 = step_sequence(0, 0, 20)[0]
    u10 = step_sequence(10, 0, 20)[0]
    u20 = step_sequence(20, 0, 20)[0]
    xb = n_b * (u0 - u10) + 10 * np.exp(-0.3 * (n_b - 10)) * (u10 - u20)

    # c)
    n_c = index_range(0, 50)
    w, _ = random_sequence(0, 50, kind="gaussian", seed=seed)
    xc = np.cos(0.04 * np.pi * n_c) + 0.2 * w

    # d)
    xd, n_d = periodic_sequence([5, 4, 3, 2, 1], num_periods=4, n_start=-10)

    fig, axes = plt.subplots(2, 2, figsize=(10, 7))
    plot_discrete(xa, n_a, title="2d(n+2) - d(n-4)", ax=axes[0, 0])
    plot_discrete(xb, n_b, title="ramp then decaying exponential", ax=axes[0, 1])
    plot_discrete(xc, n_c, title="cos(0.04*pi*n) + 0.2w(n)", ax=axes[1, 0])
    plot_discrete(xd, n_d, title="periodic {5,4,3,2,1}", ax=axes[1, 1])
    fig.tight_layout()

    return {
        "a": (xa, n_a),
        "b": (xb, n_b),
        "c": (xc, n_c),
        "d": (xd, n_d),
    }


def sequence_operations_section() -> dict:
    """
    x(n) = {1,2,3,4,5,6,7,6,5,4,3,2,1},  n = -2..10  (7 at n = 4)
      x1(n) = 2x(n-5) - 3x(n+4)
      x2(n) = x(3-n) + x(n)x(n-2)
    """
    n = index_range(-2, 10)
    x = np.array([1, 2, 3, 4, 5, 6, 7, 6, 5, 4, 3, 2, 1], dtype=float)

    # x1
    x11, n11 = sig_shift(x, n, 5)
    x12, n12 = sig_shift(x, n, -4)
    x1, n1 = sig_add(2 * x11, n11, -3 * x12, n12)

    # x2: x(3-n) = fold then shift by 3
    x21, n21 = sig_fold(x, n)
    x21, n21 = sig_shift(x21, n21, 3)
    x22, n22 = sig_shift(x, n, 2)
    x22, n22 = sig_mult(x, n, x22, n22)
    x2, n2 = sig_add(x21, n21, x22, n22)

    fig, axes = plt.subplots(2, 1, figsize=(8, 7))
    plot_discrete(x1, n1, title="x1(n) = 2x(n-5) - 3x(n+4)", ax=axes[0], ylabel="x1(n)")
    plot_discrete(x2, n2, title="x2(n) = x(3-n) + x(n)x(n-2)", ax=axes[1], ylabel="x2(n)")
    fig.tight_layout()

    return {"x": (x, n), "x1": (x1, n1), "x2": (x2, n2)}


def complex_sequence_section(sigma: float = -0.1, omega0: float = 0.3) -> dict:
    """x(n) = exp((sigma + j*omega0) n),  -10 <= n <= 10"""
    x, n = complex_exponential_sequence(sigma, omega0, -10, 10)
    plot_complex_sequence(x, n, title=f"exp(({sigma}+j{omega0})n)")
    return {"x": x, "n": n}


def even_odd_section() -> dict:
    """Even/odd decomposition of x(n) = u(n) - u(n-10),  0 <= n <= 10."""
    x = step_sequence(0, 0, 10)[0] - step_sequence(10, 0, 10)[0]
    n = index_range(0, 10)
    xe, xo, m = even_odd(x, n)

    fig, axes = plt.subplots(3, 1, figsize=(8, 9))
    plot_discrete(x, n, title="x(n) = u(n) - u(n-10)", ax=axes[0])
    plot_discrete(xe, m, title="even part", ax=axes[1], ylabel="xe(n)")
    plot_discrete(xo, m, title="odd part", ax=axes[2], ylabel="xo(n)")
    fig.tight_layout()

    return {"x": (x, n), "xe": xe, "xo": xo, "m": m}


def continuous_signals_section(fs: float = 5000.0, a: float = 1000.0) -> dict:
    """
    xa(t) = exp(-a|t|) on -5 ms <= t <= 5 ms, and its samples at rate fs.
    """
    t = time_grid(-0.005, 0.005, 0.00005)
    xa = analog_exponential(t, a)
    x, n, ts = sample_analog(lambda tt: analog_exponential(tt, a), fs, -0.005, 0.005)
    logger.debug("Sampled %d points at fs=%g", x.size, fs)

    plot_continuous(xa, t * 1e3, title=f"Analog signal exp(-{a:g}|t|)", xlabel="t (ms)")
    plot_sampled(xa, t, x, n, ts, title=f"Sampled at fs = {fs:g} Hz")

    return {"t": t, "xa": xa, "x": x, "n": n, "ts": ts}


SECTIONS = {
    "Elementary sequences": elementary_sequences_section,
    "Composite sequences": composite_sequences_section,
    "Sequence operations": sequence_operations_section,
    "Complex exponential": complex_sequence_section,
    "Even/odd decomposition": even_odd_section,
    "Continuous vs sampled": continuous_signals_section,
}
