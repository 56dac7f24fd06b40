"""
sequences.py
Elementary discrete-time sequences and index-aware sequence operations.

Every sequence is a pair (x, n):
  x : sample values (real or complex)
  n : contiguous integer index range, same length as x

Generators return (x, n) over n1 <= n <= n2 (inclusive, as in the course notes).
"""
from __future__ import annotations

import numpy as np


def index_range(n1: int, n2: int) -> np.ndarray:
    """Contiguous integer index range n1..n2 (inclusive)."""
    n1 = int(n1)
    n2 = int(n2)
    if n1 > n2:
        raise ValueError(f"Empty index range: n1={n1} > n2={n2}.")
    return np.arange(n1, n2 + 1, dtype=int)


def impulse_sequence(n0: int, n1: int, n2: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Unit sample delta(n - n0) over n1 <= n <= n2.
    n0 must lie inside the range.
    """
    n = index_range(n1, n2)
    if not (n1 <= n0 <= n2):
        raise ValueError(f"Impulse position n0={n0} outside [{n1}, {n2}].")
    x = (n - n0 == 0).astype(float)
    return x, n


def step_sequence(n0: int, n1: int, n2: int) -> tuple[np.ndarray, np.ndarray]:
    """Unit step u(n - n0) over n1 <= n <= n2."""
    n = index_range(n1, n2)
    x = (n - n0 >= 0).astype(float)
    return x, n


def ramp_sequence(n0: int, n1: int, n2: int) -> tuple[np.ndarray, np.ndarray]:
    """Ramp (n - n0) u(n - n0) over n1 <= n <= n2."""
    n = index_range(n1, n2)
    x = np.where(n >= n0, n - n0, 0).astype(float)
    return x, n


def real_exponential_sequence(a: float, n1: int, n2: int) -> tuple[np.ndarray, np.ndarray]:
    """a**n over n1 <= n <= n2 (a real)."""
    n = index_range(n1, n2)
    a = float(a)
    if a == 0 and n1 < 0:
        raise ValueError("a=0 is undefined for negative indices.")
    x = np.power(a, n.astype(float))
    return x, n


def complex_exponential_sequence(
    sigma: float, omega0: float, n1: int, n2: int
) -> tuple[np.ndarray, np.ndarray]:
    """exp((sigma + j*omega0) n) over n1 <= n <= n2."""
    n = index_range(n1, n2)
    x = np.exp((float(sigma) + 1j * float(omega0)) * n)
    return x.astype(np.complex128), n


def sinusoidal_sequence(
    amplitude: float, omega0: float, phase: float, n1: int, n2: int
) -> tuple[np.ndarray, np.ndarray]:
    """A cos(omega0 n + phase) over n1 <= n <= n2 (omega0 in rad/sample)."""
    n = index_range(n1, n2)
    x = float(amplitude) * np.cos(float(omega0) * n + float(phase))
    return x, n


def random_sequence(
    n1: int,
    n2: int,
    kind: str = "uniform",
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Random sequence over n1 <= n <= n2.
      kind="uniform"  -> samples uniform on [0, 1)
      kind="gaussian" -> samples ~ N(0, 1)
    Pass rng to share a generator, or seed for a reproducible fresh one.
    """
    n = index_range(n1, n2)
    if rng is None:
        rng = np.random.default_rng(seed)

    kind = kind.lower()
    if kind == "uniform":
        x = rng.random(n.size)
    elif kind in ("gaussian", "normal"):
        x = rng.standard_normal(n.size)
    else:
        raise ValueError("kind must be 'uniform' or 'gaussian'.")
    return x.astype(float), n


def periodic_sequence(
    period_values, num_periods: int, n_start: int = 0
) -> tuple[np.ndarray, np.ndarray]:
    """
    Periodic sequence built by repeating one period num_periods times.
    Example: period_values=[5,4,3,2,1], num_periods=4, n_start=-10 -> n = -10..9.
    """
    period_values = np.asarray(period_values).reshape(-1)
    if period_values.size == 0:
        raise ValueError("period_values must be non-empty.")
    if num_periods < 1:
        raise ValueError(f"num_periods must be >= 1, got {num_periods}.")
    x = np.tile(period_values, int(num_periods))
    n = index_range(n_start, n_start + x.size - 1)
    return x, n


# ----------------------------
# Sequence operations
# ----------------------------

def _as_sequence(x, n):
    """(x, n) as flat arrays; x must have one sample per index."""
    x = np.asarray(x).reshape(-1)
    n = np.asarray(n, dtype=int).reshape(-1)
    if x.size != n.size:
        raise ValueError(f"x has {x.size} samples but n has {n.size} indices.")
    return x, n


def _align(x1, n1, x2, n2):
    """Zero-fill both sequences onto the union of their index ranges."""
    x1, n1 = _as_sequence(x1, n1)
    x2, n2 = _as_sequence(x2, n2)

    n = index_range(min(n1.min(), n2.min()), max(n1.max(), n2.max()))
    dtype = np.result_type(x1, x2, float)
    y1 = np.zeros(n.size, dtype=dtype)
    y2 = np.zeros(n.size, dtype=dtype)
    # n1/n2 are contiguous, so they map to a single slice of n
    y1[n1[0] - n[0] : n1[-1] - n[0] + 1] = x1
    y2[n2[0] - n[0] : n2[-1] - n[0] + 1] = x2
    return y1, y2, n


def sig_add(x1, n1, x2, n2) -> tuple[np.ndarray, np.ndarray]:
    """y(n) = x1(n) + x2(n) over the union of both ranges."""
    y1, y2, n = _align(x1, n1, x2, n2)
    return y1 + y2, n


def sig_mult(x1, n1, x2, n2) -> tuple[np.ndarray, np.ndarray]:
    """y(n) = x1(n) * x2(n), sample by sample, over the union of both ranges."""
    y1, y2, n = _align(x1, n1, x2, n2)
    return y1 * y2, n


def sig_shift(x, n, k: int) -> tuple[np.ndarray, np.ndarray]:
    """y(n) = x(n - k): values unchanged, index range moved by k."""
    x, n = _as_sequence(x, n)
    return x.copy(), n + int(k)


def sig_fold(x, n) -> tuple[np.ndarray, np.ndarray]:
    """y(n) = x(-n)."""
    x, n = _as_sequence(x, n)
    return x[::-1].copy(), -n[::-1]


def even_odd(x, n) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Decompose x(n) into even and odd parts over a range symmetric about 0:
      xe(n) = (x(n) + x*(-n)) / 2
      xo(n) = (x(n) - x*(-n)) / 2
    For real x these are the usual even/odd parts; for complex x the
    conjugate-symmetric/antisymmetric parts.

    Returns: xe, xo, m  (m = -M..M with M = max|n|)
    """
    x, n = _as_sequence(x, n)

    M = int(np.max(np.abs(n)))
    m = index_range(-M, M)
    xm = np.zeros(m.size, dtype=np.result_type(x, float))
    xm[n[0] + M : n[-1] + M + 1] = x

    x_folded = np.conj(xm[::-1])
    xe = 0.5 * (xm + x_folded)
    xo = 0.5 * (xm - x_folded)
    return xe, xo, m


def conv_indexed(x, nx, h, nh) -> tuple[np.ndarray, np.ndarray]:
    """
    Linear convolution y = x * h with index tracking.
    Output support: nx[0] + nh[0] .. nx[-1] + nh[-1].
    """
    x, nx = _as_sequence(x, nx)
    h, nh = _as_sequence(h, nh)
    if x.size == 0 or h.size == 0:
        raise ValueError("Cannot convolve an empty sequence.")

    y = np.convolve(x, h, mode="full")
    ny = index_range(nx[0] + nh[0], nx[-1] + nh[-1])
    return y, ny


def energy(x) -> float:
    """E = sum |x(n)|^2"""
    x = np.asarray(x).reshape(-1)
    return float(np.sum(np.abs(x) ** 2))


def average_power(x) -> float:
    """P = (1/N) sum |x(n)|^2 over the given samples (e.g. one period)."""
    x = np.asarray(x).reshape(-1)
    if x.size == 0:
        return float("nan")
    return float(np.mean(np.abs(x) ** 2))
