"""
echo.py
Single-echo model (delay-and-attenuate) and its inverse.

Echo generation (FIR):
    x[n] = y[n] + alpha * y[n - D]          y[n - D] = 0 for n < D
    b = [1, 0, ..., 0, alpha]               (D - 1 zeros, length D + 1)

Echo removal (IIR, same recurrence solved for y):
    y[n] = x[n] - alpha * y[n - D]          y[n] = 0 for n < 0
    i.e. filter with numerator 1 and denominator b.

The inverse has D poles on the circle |z| = |alpha|^(1/D), so it is stable
only for |alpha| < 1. As |alpha| -> 1 the poles approach the unit circle and
the echo tail decays slowly (decay per D samples is |alpha|).
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np
from scipy.signal import lfilter

logger = logging.getLogger(__name__)


def _check_delay(delay) -> int:
    """delay must be a positive integer (bool is rejected)."""
    if (
        isinstance(delay, (bool, np.bool_))
        or not isinstance(delay, (int, float, np.integer, np.floating))
        or not np.isfinite(delay)
        or int(delay) != delay
        or delay < 1
    ):
        raise ValueError(f"delay must be a positive integer, got {delay!r}.")
    return int(delay)


def _check_alpha(alpha) -> float:
    try:
        value = float(alpha)
    except (TypeError, ValueError):
        raise ValueError(f"alpha must be a real number, got {alpha!r}.") from None
    if not np.isfinite(value):
        raise ValueError(f"alpha must be finite, got {alpha!r}.")
    return value


def echo_coefficients(delay: int, alpha: float) -> np.ndarray:
    """b = [1, 0 x (D-1), alpha]"""
    delay = _check_delay(delay)
    b = np.zeros(delay + 1, dtype=float)
    b[0] = 1.0
    b[-1] = _check_alpha(alpha)
    return b


@dataclass
class EchoModel:
    """
    Memory echo path: x[n] = y[n] + alpha * y[n - delay]

    allow_unstable=True accepts |alpha| >= 1 (a warning is logged); the inverse
    recursion then grows without bound and no reconstruction is promised.
    """

    delay: int
    alpha: float
    allow_unstable: bool = False

    def __post_init__(self):
        delay = _check_delay(self.delay)
        alpha = _check_alpha(self.alpha)
        if abs(alpha) >= 1.0:
            if not self.allow_unstable:
                raise ValueError(
                    f"|alpha| must be < 1 for a stable inverse, got alpha={alpha}."
                )
            logger.warning(
                "alpha=%g: echo removal is unstable (|alpha| >= 1), output may diverge.",
                alpha,
            )
        object.__setattr__(self, "delay", delay)
        object.__setattr__(self, "alpha", alpha)

    @property
    def coefficients(self) -> np.ndarray:
        return echo_coefficients(self.delay, self.alpha)

    @property
    def is_invertible(self) -> bool:
        return abs(self.alpha) < 1.0

    def _check_length(self, sig: np.ndarray) -> None:
        if sig.size <= self.delay:
            raise ValueError(
                f"Signal length {sig.size} must exceed the delay ({self.delay} samples)."
            )

    def add_echo(self, y: np.ndarray) -> np.ndarray:
        """
        Apply the echo path. Output length equals input length
        (the echo tail beyond the last input sample is dropped).
        """
        y = np.asarray(y).reshape(-1)
        self._check_length(y)
        logger.debug("Adding echo: D=%d, alpha=%g, L=%d", self.delay, self.alpha, y.size)
        return lfilter(self.coefficients, [1.0], y)

    def remove_echo(self, x: np.ndarray) -> np.ndarray:
        """Invert the echo path by the causal recursion y[n] = x[n] - alpha*y[n-D]."""
        x = np.asarray(x).reshape(-1)
        self._check_length(x)
        logger.debug("Removing echo: D=%d, alpha=%g, L=%d", self.delay, self.alpha, x.size)
        y = lfilter([1.0], self.coefficients, x)
        if not np.all(np.isfinite(y)):
            logger.warning("Echo removal produced non-finite samples (alpha=%g).", self.alpha)
        return y

    def __call__(self, y: np.ndarray) -> np.ndarray:
        return self.add_echo(y)


def add_echo(y: np.ndarray, delay: int, alpha: float) -> np.ndarray:
    """Convenience functional wrapper."""
    return EchoModel(delay=delay, alpha=alpha).add_echo(y)


def remove_echo(x: np.ndarray, delay: int, alpha: float) -> np.ndarray:
    """Convenience functional wrapper."""
    return EchoModel(delay=delay, alpha=alpha).remove_echo(x)


def reconstruction_error(y: np.ndarray, y_hat: np.ndarray) -> float:
    """max_n |y[n] - y_hat[n]|"""
    y = np.asarray(y).reshape(-1)
    y_hat = np.asarray(y_hat).reshape(-1)
    if y.shape != y_hat.shape:
        raise ValueError(f"Shape mismatch: y {y.shape} vs y_hat {y_hat.shape}")
    if y.size == 0:
        return 0.0
    return float(np.max(np.abs(y - y_hat)))
