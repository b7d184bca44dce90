from __future__ import annotations

import sys

import numpy as np
import pytest

from morsetone.audio.playback import (
    find_output_device,
    list_audio_devices,
    play_samples,
    play_wav,
)
from morsetone.audio.wav_codec import encode_wav
from morsetone.errors import PlaybackError, WavFormatError


def test_list_devices_filters_legacy_and_inputs(fake_sd):
    assert list_audio_devices() == ["Speakers", "Headphones"]


def test_find_output_device(fake_sd):
    assert find_output_device("") is None
    assert find_output_device("Headphones") == 4
    with pytest.raises(PlaybackError):
        find_output_device("Built-in Microphone")
    with pytest.raises(PlaybackError):
        find_output_device("Nope")


def test_play_samples_blocks(fake_sd):
    samples = np.arange(10, dtype=np.int16)
    play_samples(samples, 44100, device="Speakers")
    data, rate, device = fake_sd.played[0]
    np.testing.assert_array_equal(data, samples)
    assert rate == 44100
    assert device == 2
    assert fake_sd.waited == 1


def test_play_samples_non_blocking(fake_sd):
    play_samples(np.zeros(4, dtype=np.int16), blocking=False)
    assert len(fake_sd.played) == 1
    assert fake_sd.waited == 0


def test_play_wav_decodes_first(fake_sd):
    samples = np.array([3, -3, 7], dtype=np.int16)
    play_wav(encode_wav(samples, 22050))
    data, rate, device = fake_sd.played[0]
    np.testing.assert_array_equal(data, samples)
    assert rate == 22050
    assert device is None


def test_play_wav_malformed(fake_sd):
    with pytest.raises(WavFormatError):
        play_wav(b"RIFF")
    assert fake_sd.played == []


def test_portaudio_error_becomes_playback_error(fake_sd):
    fake_sd.fail = fake_sd.PortAudioError("device unavailable")
    with pytest.raises(PlaybackError, match="device unavailable"):
        play_samples(np.zeros(4, dtype=np.int16))


def test_missing_sounddevice(monkeypatch):
    # A None entry makes the import raise ImportError
    monkeypatch.setitem(sys.modules, "sounddevice", None)
    with pytest.raises(PlaybackError):
        list_audio_devices()


@pytest.mark.parametrize("exc", [ValueError("bad samplerate"), TypeError("bad data")])
def test_argument_errors_become_playback_error(fake_sd, exc):
    fake_sd.fail = exc
    with pytest.raises(PlaybackError):
        play_samples(np.zeros(4, dtype=np.int16))
