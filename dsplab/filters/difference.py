"""
difference.py
Linear constant-coefficient difference equations:

    sum_{k=0}^{N} a[k] y[n-k] = sum_{m=0}^{M} b[m] x[n-m]

evaluated causally with zero initial conditions (scipy.signal.lfilter).
"""
from __future__ import annotations

import numpy as np
from scipy.signal import lfilter

from dsplab.signals.sequences import impulse_sequence, step_sequence


def _as_coeffs(c, name: str) -> np.ndarray:
    c = np.atleast_1d(np.asarray(c, dtype=float).squeeze())
    if c.ndim != 1 or c.size < 1:
        raise ValueError(f"{name} must be a non-empty 1D coefficient vector.")
    return c


def filter_sequence(b, a, x) -> np.ndarray:
    """
    Output y of the difference equation (b, a) driven by x, zero initial state.
    Output length equals input length.
    """
    b = _as_coeffs(b, "b")
    a = _as_coeffs(a, "a")
    if a[0] == 0:
        raise ValueError("a[0] must be non-zero.")
    x = np.asarray(x).reshape(-1)
    return lfilter(b, a, x)


def _response_window(n1: int, n2: int) -> tuple[int, int]:
    """Simulation span covering both n = 0 and the requested window n1..n2."""
    n1 = int(n1)
    n2 = int(n2)
    if n1 > n2:
        raise ValueError(f"Empty index range: n1={n1} > n2={n2}.")
    return min(n1, 0), max(n2, 0)


def impulse_response(b, a, n1: int, n2: int) -> tuple[np.ndarray, np.ndarray]:
    """
    h(n) for n1 <= n <= n2 (zero for n < 0, causal system).
    """
    lo, hi = _response_window(n1, n2)
    delta, n = impulse_sequence(0, lo, hi)
    h = filter_sequence(b, a, delta)
    keep = (n >= n1) & (n <= n2)
    return h[keep], n[keep]


def step_response(b, a, n1: int, n2: int) -> tuple[np.ndarray, np.ndarray]:
    """s(n) for n1 <= n <= n2 (zero for n < 0)."""
    lo, hi = _response_window(n1, n2)
    u, n = step_sequence(0, lo, hi)
    s = filter_sequence(b, a, u)
    keep = (n >= n1) & (n <= n2)
    return s[keep], n[keep]


def poles(a) -> np.ndarray:
    """
    Poles of 1/A(z) with A(z) = a[0] + a[1] z^-1 + ... + a[N] z^-N.
    Roots of a[0] z^N + ... + a[N] (trailing zero coefficients drop out as poles at 0).
    """
    a = np.trim_zeros(_as_coeffs(a, "a"), "b")
    if a.size == 0 or a[0] == 0:
        raise ValueError("a[0] must be non-zero.")
    if a.size == 1:
        return np.zeros(0, dtype=np.complex128)
    return np.roots(a).astype(np.complex128)


def is_stable(a, tol: float = 1e-12) -> bool:
    """BIBO stable iff every pole lies strictly inside the unit circle."""
    p = poles(a)
    if p.size == 0:
        return True
    return bool(np.max(np.abs(p)) < 1.0 - tol)
