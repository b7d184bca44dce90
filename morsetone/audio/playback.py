"""Play synthesized Morse audio through sounddevice.

sounddevice is imported lazily so that synthesis and file output keep
working on machines without PortAudio.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from morsetone.audio.wav_codec import decode_wav
from morsetone.errors import PlaybackError

logger = logging.getLogger(__name__)

# Virtual devices that exist only in the Windows MME API
_LEGACY = {"Microsoft Sound Mapper", "Primary Sound Driver"}


def _sounddevice():
    try:
        import sounddevice as sd
    except (ImportError, OSError) as e:
        raise PlaybackError(f"Audio output unavailable: {e}") from e
    return sd


def list_audio_devices() -> List[str]:
    """Return the names of available audio output devices.

    Filters out legacy Windows virtual devices and duplicates.
    """
    sd = _sounddevice()
    output_devices = []
    seen = set()
    for d in sd.query_devices():
        if d['max_output_channels'] > 0:
            name = d['name']
            if name not in seen and not any(leg in name for leg in _LEGACY):
                output_devices.append(name)
                seen.add(name)
    return output_devices


def find_output_device(device_name: str = "") -> Optional[int]:
    """Return the index of the output device called *device_name*.

    An empty name selects the system default (``None``).
    """
    if not device_name:
        return None
    sd = _sounddevice()
    for i, d in enumerate(sd.query_devices()):
        if d['name'] == device_name and d['max_output_channels'] > 0:
            return i
    raise PlaybackError(f"No audio output device named {device_name!r}")


def play_samples(
    samples: np.ndarray,
    sample_rate: int = 44100,
    device: str = "",
    blocking: bool = True,
) -> None:
    """Play int16 *samples*, waiting for completion when *blocking*."""
    sd = _sounddevice()
    device_idx = find_output_device(device)
    logger.info(
        "Playing %d samples (%.2f s) on %s",
        len(samples), len(samples) / sample_rate, device or "default device",
    )
    try:
        sd.play(samples, sample_rate, device=device_idx)
        if blocking:
            sd.wait()
    except (sd.PortAudioError, ValueError, TypeError) as e:
        raise PlaybackError(f"Playback failed: {e}") from e


def play_wav(data: bytes, device: str = "", blocking: bool = True) -> None:
    """Decode a WAVE byte string and play it."""
    samples, sample_rate = decode_wav(data)
    play_samples(samples, sample_rate, device=device, blocking=blocking)
