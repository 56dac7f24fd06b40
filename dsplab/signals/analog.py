"""
analog.py
Continuous-time ("analog") signals evaluated on a dense time grid, and sampling.
"""
from __future__ import annotations

from typing import Callable

import numpy as np


def time_grid(t_start: float, t_stop: float, dt: float) -> np.ndarray:
    """
    Dense time axis t_start..t_stop (inclusive, up to rounding) with step dt.
    """
    if dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}.")
    if t_stop < t_start:
        raise ValueError(f"t_stop ({t_stop}) must be >= t_start ({t_start}).")
    num = int(np.floor((t_stop - t_start) / dt + 1e-9)) + 1
    return t_start + dt * np.arange(num)


def analog_exponential(t: np.ndarray, a: float) -> np.ndarray:
    """xa(t) = exp(-a |t|)"""
    t = np.asarray(t, dtype=float)
    return np.exp(-float(a) * np.abs(t))


def analog_sinusoid(
    t: np.ndarray, amplitude: float = 1.0, freq_hz: float = 1.0, phase: float = 0.0
) -> np.ndarray:
    """xa(t) = A cos(2*pi*f*t + phase)"""
    t = np.asarray(t, dtype=float)
    return float(amplitude) * np.cos(2.0 * np.pi * float(freq_hz) * t + float(phase))


def sample_analog(
    func: Callable[[np.ndarray], np.ndarray],
    fs: float,
    t_start: float,
    t_stop: float,
):
    """
    Sample xa(t) at rate fs over [t_start, t_stop]:
      x[n] = xa(n*Ts),  Ts = 1/fs,  n = ceil(t_start*fs) .. floor(t_stop*fs)

    Returns:
      x:  sample values
      n:  integer sample indices
      ts: sample instants n*Ts (seconds)
    """
    if fs <= 0:
        raise ValueError(f"fs must be positive, got {fs}.")
    Ts = 1.0 / float(fs)
    n1 = int(np.ceil(t_start * fs - 1e-9))
    n2 = int(np.floor(t_stop * fs + 1e-9))
    if n1 > n2:
        raise ValueError("No sample instants fall inside the requested interval.")
    n = np.arange(n1, n2 + 1, dtype=int)
    ts = n * Ts
    x = np.asarray(func(ts))
    if x.shape != ts.shape:
        raise ValueError(f"func returned shape {x.shape}, expected {ts.shape}.")
    return x, n, ts
