"""Pure-numpy waveform generation for Morse elements."""

from __future__ import annotations

import numpy as np

from morsetone.errors import InvalidFrequencyError

PEAK_AMPLITUDE = 32767


def validate_frequency(frequency: float, sample_rate: int = 44100) -> None:
    """Raise InvalidFrequencyError unless 0 < frequency <= sample_rate / 2."""
    if frequency <= 0:
        raise InvalidFrequencyError(
            f"Tone frequency must be positive, got {frequency} Hz"
        )
    if frequency > sample_rate / 2:
        raise InvalidFrequencyError(
            f"Tone frequency {frequency} Hz exceeds the Nyquist limit "
            f"({sample_rate / 2:g} Hz at {sample_rate} Hz)"
        )


def generate_sine_tone(
    frequency: float,
    n_samples: int,
    sample_rate: int = 44100,
) -> np.ndarray:
    """Generate a full-scale sine tone as an int16 numpy array.

    Sample ``i`` is ``round(sin(2*pi*frequency*i / sample_rate) * 32767)``.
    The phase always starts at zero, so consecutive tones are not
    phase-continuous.

    Args:
        frequency: Tone frequency in Hz.
        n_samples: Number of samples to produce.
        sample_rate: Audio sample rate.

    Returns:
        1-D int16 array of length *n_samples*.
    """
    i = np.arange(max(n_samples, 0), dtype=np.float64)
    wave = np.sin(2 * np.pi * frequency * i / sample_rate) * PEAK_AMPLITUDE
    return np.rint(wave).astype(np.int16)


def generate_silence(n_samples: int) -> np.ndarray:
    """Generate silence as an int16 numpy array."""
    return np.zeros(max(n_samples, 0), dtype=np.int16)
