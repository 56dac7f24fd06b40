"""
echo.py
Echo section:
  sample clip y(n) -> add echo x(n) = y(n) + alpha*y(n-D) -> remove echo -> compare
Optionally plays each stage and writes WAV files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

import numpy as np

from dsplab import params
from dsplab.audio import load_sample_buffer, normalize_peak, play, write_wav
from dsplab.filters.echo import EchoModel, reconstruction_error
from dsplab.filters.difference import impulse_response
from dsplab.plotting import plot_discrete, plot_echo_comparison, plot_psd

logger = logging.getLogger(__name__)


@dataclass
class EchoConfig:
    clip_path: Path = field(default_factory=lambda: params.SAMPLE_CLIP_PATH)
    fs: int = params.AUDIO_FS
    delay: int = params.DEFAULT_DELAY
    alpha: float = params.DEFAULT_ALPHA

    # playback / export
    play_audio: bool = False
    wav_dir: Path | None = None  # None => no WAV export
    normalize: bool = True  # normalize to unit peak before playback/export

    # plotting
    impulse_len: int = 0  # 0 => 3*delay samples of the inverse impulse response


def run_echo_section(cfg: EchoConfig, y: np.ndarray | None = None) -> dict:
    """
    Returns a dict with:
      y         original clip
      x         clip with echo
      y_hat     recovered clip
      max_error max |y - y_hat|
      model     EchoModel used
    """
    if y is None:
        y = load_sample_buffer(cfg.clip_path)
    y = np.asarray(y, dtype=float).reshape(-1)

    model = EchoModel(delay=cfg.delay, alpha=cfg.alpha)
    logger.info(
        "Echo: D=%d samples (%.3f s), alpha=%g, clip length %d",
        model.delay,
        params.delay_seconds(model.delay, cfg.fs),
        model.alpha,
        y.size,
    )

    x = model.add_echo(y)
    y_hat = model.remove_echo(x)
    max_error = reconstruction_error(y, y_hat)
    logger.info("Echo removal max |y - y_hat| = %.3e", max_error)

    plot_echo_comparison(y, x, y_hat, fs=cfg.fs, title=f"Echo D={model.delay}, alpha={model.alpha:g}")
    plot_psd(x, fs=cfg.fs, title="PSD of echoed clip")

    # Inverse filter impulse response: alpha^k spikes at multiples of D
    n_imp = cfg.impulse_len if cfg.impulse_len > 0 else 3 * model.delay
    h_inv, n_h = impulse_response([1.0], model.coefficients, 0, n_imp)
    nz = np.flatnonzero(h_inv)
    plot_discrete(h_inv[nz], n_h[nz], title="Echo-removal impulse response (non-zero taps)")

    stages = {"original": y, "echo": x, "recovered": y_hat}
    if cfg.normalize:
        stages = {k: normalize_peak(v) for k, v in stages.items()}

    if cfg.wav_dir is not None:
        tag = f"D{model.delay}_a{model.alpha:g}"
        for name, sig in stages.items():
            write_wav(Path(cfg.wav_dir) / f"{name}_{tag}.wav", sig, fs=cfg.fs)

    if cfg.play_audio:
        for name, sig in stages.items():
            print(f"Playing: {name}")
            play(sig, fs=cfg.fs, blocking=True)

    return {
        "y": y,
        "x": x,
        "y_hat": y_hat,
        "max_error": max_error,
        "model": model,
    }
