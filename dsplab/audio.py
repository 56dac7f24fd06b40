"""
audio.py
Sample buffer I/O (plain text, one sample per line), WAV export and playback.
"""
from __future__ import annotations

import logging
from pathlib import Path
import wave

import numpy as np

from dsplab import params

logger = logging.getLogger(__name__)


def load_sample_buffer(path: str | Path = params.SAMPLE_CLIP_PATH) -> np.ndarray:
    """
    Read a text sample buffer into a 1D float array.
    Blank lines are skipped; non-numeric content raises ValueError.
    """
    path = Path(path)
    logger.info("Loading sample buffer: %s", path)
    y = np.loadtxt(path, dtype=float, ndmin=1).reshape(-1)
    if y.size == 0:
        raise ValueError(f"Sample buffer '{path}' is empty.")
    logger.debug("Loaded %d samples", y.size)
    return y


def save_sample_buffer(path: str | Path, x: np.ndarray, fmt: str = "%.6f") -> Path:
    """Write samples one per line."""
    x = np.asarray(x, dtype=float).reshape(-1)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savetxt(path, x, fmt=fmt)
    logger.info("Saved %d samples to %s", x.size, path)
    return path


def normalize_peak(x: np.ndarray, peak: float = 1.0) -> np.ndarray:
    """Scale so that max|x| == peak (all-zero input is returned unchanged)."""
    x = np.asarray(x, dtype=float)
    m = np.max(np.abs(x)) if x.size else 0.0
    if m == 0:
        return x.copy()
    return x * (float(peak) / m)


def to_pcm16(x: np.ndarray) -> bytes:
    """Float samples in [-1, 1] -> little-endian 16-bit PCM bytes (clipped)."""
    x = np.clip(np.asarray(x, dtype=float).reshape(-1), -1.0, 1.0)
    return (np.round(x * 32767.0)).astype("<i2").tobytes()


def write_wav(path: str | Path, x: np.ndarray, fs: int = params.AUDIO_FS) -> Path:
    """Write a mono 16-bit PCM WAV file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(int(fs))
        w.writeframes(to_pcm16(x))
    logger.info("Wrote WAV: %s (fs=%d)", path, int(fs))
    return path


def play(x: np.ndarray, fs: int = params.AUDIO_FS, blocking: bool = True) -> None:
    """Play a mono buffer on the default output device."""
    import sounddevice as sd  # needs PortAudio at import time

    x = np.asarray(x, dtype=np.float32).reshape(-1)
    logger.info("Playing %.2f s of audio at %d Hz", x.size / float(fs), int(fs))
    sd.play(x, samplerate=int(fs))
    if blocking:
        sd.wait()
