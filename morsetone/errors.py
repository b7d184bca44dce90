"""Exception types raised by morsetone.

Configuration anomalies (non-positive WPM) and unsupported characters are
not errors and never reach this module.
"""

from __future__ import annotations


class MorseError(Exception):
    """Base class for every error raised by morsetone."""


class InvalidFrequencyError(MorseError, ValueError):
    """Tone frequency is not positive or lies above the Nyquist limit."""


class ConfigError(MorseError):
    """A settings file could not be read or parsed."""


class WavFormatError(MorseError):
    """A WAV container could not be decoded as 16-bit mono PCM."""


class PlaybackError(MorseError, RuntimeError):
    """The audio output device is unavailable or failed during playback."""


__all__ = ["MorseError", "ConfigError", "InvalidFrequencyError", "WavFormatError", "PlaybackError"]
