"""
params.py
Constants shared by the course examples.
Focus: the sample audio clip used by the echo example, plus default echo parameters.
"""
from __future__ import annotations

from pathlib import Path

# ----------------------------
# Sample clip (plain text, one sample per line)
# ----------------------------
AUDIO_FS: int = 8192
CLIP_SECONDS: int = 9
CLIP_SAMPLES: int = AUDIO_FS * CLIP_SECONDS
assert CLIP_SAMPLES == 73728, "Expected a 9 s clip at 8192 samples/s"

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SAMPLE_CLIP_PATH = PROJECT_ROOT / "data" / "sample_clip.txt"

# ----------------------------
# Echo model defaults
# ----------------------------
# x[n] = y[n] + alpha * y[n - D]
DEFAULT_DELAY: int = 4000  # ~0.49 s at 8192 samples/s
DEFAULT_ALPHA: float = 0.5

# ----------------------------
# Plotting / output
# ----------------------------
RESULTS_DIR = Path("results")
FIG_DPI: int = 200


def delay_seconds(delay: int, fs: float = AUDIO_FS) -> float:
    """Echo delay in seconds for a delay given in samples."""
    return float(delay) / float(fs)


def delay_samples(seconds: float, fs: float = AUDIO_FS) -> int:
    """
    Nearest integer sample delay for a delay in seconds.
    Example: 0.5 s at 8192 Hz -> 4096 samples.
    """
    return int(round(float(seconds) * float(fs)))
