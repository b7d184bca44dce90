"""Canonical RIFF/WAVE encoding for 16-bit mono PCM."""

from __future__ import annotations

import io
import logging
import os
import struct
import wave
from typing import Tuple, Union

import numpy as np

from morsetone.errors import WavFormatError

logger = logging.getLogger(__name__)

CHANNELS = 1
BITS_PER_SAMPLE = 16
BYTES_PER_SAMPLE = BITS_PER_SAMPLE // 8
HEADER_SIZE = 44
_PCM_FORMAT = 1

# RIFF, size, WAVE | fmt , 16, format, channels, rate, byte rate, align, bits | data, size
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


def build_wav_header(data_size: int, sample_rate: int = 44100) -> bytes:
    """Return the 44-byte header for *data_size* bytes of PCM data."""
    block_align = CHANNELS * BYTES_PER_SAMPLE
    return _HEADER.pack(
        b"RIFF", 36 + data_size, b"WAVE",
        b"fmt ", 16, _PCM_FORMAT, CHANNELS, sample_rate,
        sample_rate * block_align, block_align, BITS_PER_SAMPLE,
        b"data", data_size,
    )


def encode_wav(samples: np.ndarray, sample_rate: int = 44100) -> bytes:
    """Wrap int16 *samples* in a WAVE container."""
    data = np.asarray(samples, dtype="<i2").tobytes()
    return build_wav_header(len(data), sample_rate) + data


def write_wav(
    path: Union[str, os.PathLike],
    samples: np.ndarray,
    sample_rate: int = 44100,
) -> str:
    """Write *samples* to *path* as 16-bit PCM mono WAV."""
    payload = encode_wav(samples, sample_rate)
    with open(path, "wb") as f:
        f.write(payload)
    logger.info("Wrote %d bytes to %s", len(payload), path)
    return os.path.abspath(path)


def decode_wav(data: bytes) -> Tuple[np.ndarray, int]:
    """Decode a 16-bit mono PCM WAVE byte string.

    Returns:
        ``(samples, sample_rate)`` with samples as an int16 array.

    Raises:
        WavFormatError: if the container is malformed or not 16-bit mono.
    """
    try:
        with wave.open(io.BytesIO(data), "rb") as wf:
            channels = wf.getnchannels()
            width = wf.getsampwidth()
            rate = wf.getframerate()
            frames = wf.readframes(wf.getnframes())
    except (wave.Error, EOFError, struct.error) as e:
        raise WavFormatError(f"Malformed WAV container: {e}") from e

    if channels != CHANNELS or width != BYTES_PER_SAMPLE:
        raise WavFormatError(
            f"Expected 16-bit mono PCM, got {channels} channel(s) "
            f"at {width * 8} bits"
        )
    return np.frombuffer(frames, dtype="<i2").astype(np.int16), rate
