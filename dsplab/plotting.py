"""
plotting.py
Plot helpers for discrete- and continuous-time signals.
Each helper opens a new figure and returns it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from scipy.signal import welch

from dsplab import params

logger = logging.getLogger(__name__)


def plot_discrete(
    x: np.ndarray,
    n: np.ndarray,
    title: str = "x(n)",
    *,
    xlabel: str = "n",
    ylabel: str = "x(n)",
    ax=None,
):
    """Stem plot of a real sequence against its index."""
    x = np.asarray(x).reshape(-1)
    n = np.asarray(n).reshape(-1)
    if x.size != n.size:
        raise ValueError(f"x has {x.size} samples but n has {n.size} indices.")
    if np.iscomplexobj(x):
        raise ValueError("plot_discrete expects a real sequence; use plot_complex_sequence.")

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    ax.stem(n, x, basefmt="k-")
    ax.grid(True)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    return fig


def plot_continuous(
    x: np.ndarray,
    t: np.ndarray,
    title: str = "x(t)",
    *,
    xlabel: str = "t (s)",
    ylabel: str = "x(t)",
    ax=None,
):
    """Line plot of an analog signal evaluated on a dense grid."""
    x = np.asarray(x).reshape(-1)
    t = np.asarray(t).reshape(-1)
    if x.size != t.size:
        raise ValueError(f"x has {x.size} samples but t has {t.size} points.")

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    ax.plot(t, x)
    ax.grid(True)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    return fig


def plot_sampled(xa, t, x, n, ts, title: str = "Sampled signal"):
    """Analog curve xa(t) with samples x(n) drawn at their instants ts."""
    fig, (ax_a, ax_d) = plt.subplots(2, 1, figsize=(8, 6))
    plot_continuous(xa, t, title=title, ax=ax_a, ylabel="xa(t)")
    ax_a.stem(ts, x, linefmt="C1-", markerfmt="C1o", basefmt=" ")
    plot_discrete(x, n, title="x(n)", ax=ax_d)
    fig.tight_layout()
    return fig


def plot_complex_sequence(x: np.ndarray, n: np.ndarray, title: str = "Complex sequence"):
    """2x2 panels: real part, imaginary part, magnitude, phase (degrees)."""
    x = np.asarray(x, dtype=np.complex128).reshape(-1)
    n = np.asarray(n).reshape(-1)

    fig, axes = plt.subplots(2, 2, figsize=(10, 7))
    plot_discrete(np.real(x), n, title="Real part", ax=axes[0, 0], ylabel="Re{x(n)}")
    plot_discrete(np.imag(x), n, title="Imaginary part", ax=axes[0, 1], ylabel="Im{x(n)}")
    plot_discrete(np.abs(x), n, title="Magnitude", ax=axes[1, 0], ylabel="|x(n)|")
    plot_discrete(np.angle(x, deg=True), n, title="Phase", ax=axes[1, 1], ylabel="degrees")
    fig.suptitle(title)
    fig.tight_layout()
    return fig


def plot_echo_comparison(
    y: np.ndarray,
    x: np.ndarray,
    y_hat: np.ndarray,
    fs: float = params.AUDIO_FS,
    title: str = "Echo generation and removal",
):
    """Original, echoed and recovered signals against time (s)."""
    fig, axes = plt.subplots(3, 1, figsize=(10, 8), sharex=True)
    for ax, sig, label in zip(axes, (y, x, y_hat), ("original y(n)", "with echo x(n)", "recovered")):
        sig = np.asarray(sig).reshape(-1)
        t = np.arange(sig.size) / float(fs)
        ax.plot(t, sig, linewidth=0.5)
        ax.grid(True)
        ax.set_ylabel(label)
    axes[-1].set_xlabel("Time (s)")
    axes[0].set_title(title)
    fig.tight_layout()
    return fig


def plot_psd(x: np.ndarray, fs: float, title: str = "PSD (Welch)"):
    x = np.asarray(x, dtype=float).reshape(-1)
    f, Pxx = welch(x, fs=fs, nperseg=min(1024, len(x)))
    fig, ax = plt.subplots()
    ax.plot(f, 10 * np.log10(Pxx + 1e-20))
    ax.grid(True)
    ax.set_xlabel("Frequency (Hz)")
    ax.set_ylabel("PSD (dB/Hz)")
    ax.set_title(title)
    return fig


def save_all_figures(results_dir: str | Path, tag: str, dpi: int = params.FIG_DPI) -> list[Path]:
    """Save every open figure as <results_dir>/<tag>_fig<N>.png."""
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)
    saved = []
    for fig_num in plt.get_fignums():
        fig = plt.figure(fig_num)
        out = results_dir / f"{tag}_fig{fig_num}.png"
        fig.savefig(out, dpi=dpi, bbox_inches="tight")
        saved.append(out)
    logger.info("Saved %d figure(s) to %s", len(saved), results_dir)
    return saved
