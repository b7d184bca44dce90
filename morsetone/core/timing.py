"""Morse element timing derived from words-per-minute.

Uses the PARIS convention: a reference word spans 50 time units and is
sent in ``60 / wpm`` seconds.  The base unit is computed with truncating
integer division, so at high speeds durations are quantized down (and
above 1200 WPM every element collapses to zero length).
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WPM = 20
SAMPLE_RATE = 44100

_MS_PER_MINUTE = 60_000
_UNITS_PER_WORD = 50


@dataclass(frozen=True)
class SampleTiming:
    """Element and gap lengths in samples."""

    dot: int
    dash: int
    element_gap: int
    char_gap: int
    word_gap: int


@dataclass(frozen=True)
class MorseTiming:
    """Element and gap durations in whole milliseconds."""

    dot: int
    dash: int
    element_gap: int
    char_gap: int
    word_gap: int

    def to_samples(self, sample_rate: int = SAMPLE_RATE) -> SampleTiming:
        """Convert every duration with the same truncating rule."""
        return SampleTiming(
            dot=ms_to_samples(self.dot, sample_rate),
            dash=ms_to_samples(self.dash, sample_rate),
            element_gap=ms_to_samples(self.element_gap, sample_rate),
            char_gap=ms_to_samples(self.char_gap, sample_rate),
            word_gap=ms_to_samples(self.word_gap, sample_rate),
        )


def effective_wpm(wpm: int) -> int:
    """Return *wpm*, or DEFAULT_WPM if it is not positive."""
    return wpm if wpm > 0 else DEFAULT_WPM


def unit_ms(wpm: int) -> int:
    """Duration of one time unit in milliseconds (truncated)."""
    return _MS_PER_MINUTE // (effective_wpm(wpm) * _UNITS_PER_WORD)


def calculate_timing(wpm: int) -> MorseTiming:
    """Derive all five durations for *wpm*.

    Non-positive speeds are clamped to DEFAULT_WPM rather than rejected.
    """
    unit = unit_ms(wpm)
    return MorseTiming(
        dot=unit,
        dash=unit * 3,
        element_gap=unit,
        char_gap=unit * 3,
        word_gap=unit * 7,
    )


def ms_to_samples(duration_ms: int, sample_rate: int = SAMPLE_RATE) -> int:
    """Convert a millisecond duration to a sample count, truncating."""
    return int(duration_ms) * int(sample_rate) // 1000
