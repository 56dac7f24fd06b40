import sys
import wave
from types import SimpleNamespace

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dsplab import params
from dsplab.audio import (
    load_sample_buffer,
    save_sample_buffer,
    normalize_peak,
    to_pcm16,
    write_wav,
    play,
)


def test_bundled_clip_is_nine_seconds():
    y = load_sample_buffer(params.SAMPLE_CLIP_PATH)
    assert y.ndim == 1
    assert y.size == params.CLIP_SAMPLES
    assert np.max(np.abs(y)) <= 1.0


def test_save_then_load(tmp_path):
    x = np.array([0.25, -0.5, 0.125])
    path = save_sample_buffer(tmp_path / "clip.txt", x)
    assert path.read_text().splitlines() == ["0.250000", "-0.500000", "0.125000"]
    assert_allclose(load_sample_buffer(path), x)


def test_single_sample_file_loads_as_1d(tmp_path):
    p = tmp_path / "one.txt"
    p.write_text("0.5\n")
    y = load_sample_buffer(p)
    assert y.shape == (1,)


@pytest.mark.filterwarnings("ignore:loadtxt")
def test_empty_buffer_rejected(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_text("")
    with pytest.raises(ValueError):
        load_sample_buffer(p)


def test_non_numeric_buffer_rejected(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("0.1\nhello\n")
    with pytest.raises(ValueError):
        load_sample_buffer(p)


def test_normalize_peak():
    assert_allclose(normalize_peak(np.array([0.5, -2.0])), [0.25, -1.0])
    z = np.zeros(4)
    assert_allclose(normalize_peak(z), z)


def test_pcm16_clips():
    raw = to_pcm16(np.array([2.0, -2.0, 0.0]))
    vals = np.frombuffer(raw, dtype="<i2")
    assert vals.tolist() == [32767, -32767, 0]


def test_write_wav_header(tmp_path):
    x = np.sin(np.linspace(0, 2 * np.pi, 800))
    out = write_wav(tmp_path / "sub" / "tone.wav", x, fs=8192)
    with wave.open(str(out), "rb") as w:
        assert w.getnchannels() == 1
        assert w.getsampwidth() == 2
        assert w.getframerate() == 8192
        assert w.getnframes() == 800


def test_play_uses_sounddevice(monkeypatch):
    calls = []
    fake_sd = SimpleNamespace(
        play=lambda data, samplerate: calls.append(("play", data.dtype, samplerate)),
        wait=lambda: calls.append(("wait",)),
    )
    monkeypatch.setitem(sys.modules, "sounddevice", fake_sd)

    play(np.zeros(16), fs=8192, blocking=True)
    assert calls == [("play", np.float32, 8192), ("wait",)]

    calls.clear()
    play(np.zeros(16), fs=8000, blocking=False)
    assert calls == [("play", np.float32, 8000)]
