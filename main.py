"""
main.py
Interactive runner for the DSP course examples:
- Elementary sequences (impulse, step, exponential, sinusoid, random)
- Composite and periodic sequences
- Sequence operations (shift, fold, add, multiply)
- Complex exponential sequence (real/imag/magnitude/phase)
- Even/odd decomposition
- Continuous-time signal vs its samples
- Echo generation and removal on the sample clip
  x(n) = y(n) + alpha*y(n-D)   and   y(n) = x(n) - alpha*y(n-D)
- Save all plots as PNG under results/
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from dsplab import params
from dsplab.audio import load_sample_buffer
from dsplab.logging_config import setup_logging
from dsplab.plotting import save_all_figures
from dsplab.sections.sequences import SECTIONS
from dsplab.sections.echo import EchoConfig, run_echo_section

logger = logging.getLogger("dsplab.main")

ECHO_SECTION = "Echo generation and removal"


def _ask_choice(prompt: str, options: list[str]) -> str:
    print(prompt)
    for i, opt in enumerate(options, start=1):
        print(f"  {i}) {opt}")
    while True:
        try:
            x = int(input("Enter number: ").strip())
            if 1 <= x <= len(options):
                return options[x - 1]
        except ValueError:
            pass
        print("Invalid choice, try again.")


def _ask_int(prompt: str, default: int) -> int:
    while True:
        s = input(f"{prompt} [default {default}]: ").strip()
        if s == "":
            return default
        try:
            return int(s)
        except ValueError:
            print("Please enter an integer.")


def _ask_float(prompt: str, default: float) -> float:
    while True:
        s = input(f"{prompt} [default {default}]: ").strip()
        if s == "":
            return default
        try:
            return float(s)
        except ValueError:
            print("Please enter a number.")


def _ask_yesno(prompt: str, default: bool = False) -> bool:
    d = "y" if default else "n"
    s = input(f"{prompt} (y/n) [default {d}]: ").strip().lower()
    if s == "":
        return default
    return s.startswith("y")


def _ask_echo_config() -> tuple[EchoConfig, np.ndarray]:
    """Prompt for the echo settings; returns the config and the loaded clip."""
    while True:
        clip = input(f"Sample clip path [default {params.SAMPLE_CLIP_PATH}]: ").strip()
        clip_path = Path(clip) if clip else params.SAMPLE_CLIP_PATH
        try:
            y = load_sample_buffer(clip_path)
        except (OSError, ValueError) as e:
            print(f"Could not load '{clip_path}': {e}")
            continue
        if y.size >= 2:
            break
        print("The clip needs at least 2 samples to carry an echo.")

    while True:
        fs = _ask_int("Sampling rate (Hz)", params.AUDIO_FS)
        if fs > 0:
            break
        print("Sampling rate must be positive.")

    # the echo must start inside the clip: 0 < D < len(y)
    default_delay = min(params.DEFAULT_DELAY, y.size - 1)
    while True:
        delay = _ask_int(f"Echo delay D (samples, 1..{y.size - 1})", default_delay)
        if 1 <= delay < y.size:
            break
        print(f"Delay must satisfy 1 <= D < {y.size} (clip length).")

    while True:
        alpha = _ask_float("Attenuation alpha (|alpha| < 1)", params.DEFAULT_ALPHA)
        if abs(alpha) < 1.0:
            break
        print("alpha must satisfy |alpha| < 1 for the echo to be removable.")

    play_audio = _ask_yesno("Play original / echo / recovered?", default=False)
    save_wav = _ask_yesno("Save WAV files?", default=False)

    cfg = EchoConfig(
        clip_path=clip_path,
        fs=fs,
        delay=delay,
        alpha=alpha,
        play_audio=play_audio,
        wav_dir=params.RESULTS_DIR if save_wav else None,
    )
    return cfg, y


def run_section(name: str) -> tuple[str, dict]:
    """Run one section by its menu name; returns (figure tag, section results)."""
    if name == ECHO_SECTION:
        cfg, y = _ask_echo_config()
        out = run_echo_section(cfg, y=y)
        print("\n--- Echo results ---")
        print(f"Clip: {cfg.clip_path} ({out['y'].size} samples @ {cfg.fs} Hz)")
        print(f"Delay: {out['model'].delay} samples ({params.delay_seconds(out['model'].delay, cfg.fs):.3f} s)")
        print(f"Alpha: {out['model'].alpha:g}")
        print(f"Max |y - y_hat|: {out['max_error']:.3e}")
        tag = f"echo_D{out['model'].delay}_a{out['model'].alpha:g}"
        return tag, out

    if name not in SECTIONS:
        raise ValueError(f"Unknown section '{name}'.")
    out = SECTIONS[name]()
    tag = name.lower().replace(" ", "_").replace("/", "-")
    return tag, out


def main():
    setup_logging(level=logging.INFO)

    options = list(SECTIONS) + [ECHO_SECTION]
    name = _ask_choice("Select a section:", options)
    logger.info("Running section: %s", name)

    tag, _ = run_section(name)

    save_all_figures(params.RESULTS_DIR, tag)
    plt.show()


if __name__ == "__main__":
    main()
