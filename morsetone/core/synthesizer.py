"""Text to Morse PCM synthesis.

A :class:`MorseSynthesizer` pre-builds the tone and silence buffers for one
(speed, frequency) pair and then renders any number of texts.  The text is
walked exactly once per request by :meth:`MorseSynthesizer.segments`; both
synthesis and length measurement consume that same walk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

import numpy as np

from morsetone.audio.tone_generator import (
    generate_silence,
    generate_sine_tone,
    validate_frequency,
)
from morsetone.core.enums import Mark
from morsetone.core.symbols import MORSE_TABLE, WORD_SEPARATOR, fold_case
from morsetone.core.timing import (
    DEFAULT_WPM,
    SAMPLE_RATE,
    calculate_timing,
    effective_wpm,
)

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY = 600


@dataclass(frozen=True)
class SynthesisResult:
    """A finished, read-only int16 sample buffer."""

    samples: np.ndarray
    sample_rate: int = SAMPLE_RATE

    @property
    def sample_count(self) -> int:
        return int(self.samples.size)

    @property
    def duration_s(self) -> float:
        return self.sample_count / self.sample_rate


class MorseSynthesizer:
    """Renders text as Morse tones for a fixed speed and frequency.

    Instances never mutate their buffers after construction, so one
    synthesizer may serve several callers.

    Raises:
        InvalidFrequencyError: if *frequency* is not a usable tone.
    """

    def __init__(
        self,
        wpm: int = DEFAULT_WPM,
        frequency: float = DEFAULT_FREQUENCY,
        sample_rate: int = SAMPLE_RATE,
    ):
        validate_frequency(frequency, sample_rate)
        self.wpm = effective_wpm(wpm)
        self.frequency = frequency
        self.sample_rate = sample_rate
        self.timing = calculate_timing(self.wpm)
        self.sample_timing = self.timing.to_samples(sample_rate)

        st = self.sample_timing
        self._dot = _frozen(generate_sine_tone(frequency, st.dot, sample_rate))
        self._dash = _frozen(generate_sine_tone(frequency, st.dash, sample_rate))
        self._element_gap = _frozen(generate_silence(st.element_gap))
        self._char_gap = _frozen(generate_silence(st.char_gap))
        self._word_gap = _frozen(generate_silence(st.word_gap))
        self._chars: Dict[str, np.ndarray] = {
            char: _frozen(self._assemble(marks))
            for char, marks in MORSE_TABLE.items()
        }

        logger.debug(
            "Synthesizer ready: %d WPM, %s Hz, dot=%d dash=%d gaps=%d/%d/%d samples",
            self.wpm, frequency, st.dot, st.dash,
            st.element_gap, st.char_gap, st.word_gap,
        )

    def _assemble(self, marks: Tuple[Mark, ...]) -> np.ndarray:
        parts = []
        for idx, mark in enumerate(marks):
            parts.append(self._dot if mark is Mark.DOT else self._dash)
            if idx < len(marks) - 1:
                parts.append(self._element_gap)
        return np.concatenate(parts)

    def segments(self, text: str) -> Iterator[np.ndarray]:
        """Yield the buffers for *text* in playback order.

        A space yields one word gap.  A supported character yields its
        tones, followed by a character gap unless it is the last character
        or the next character is a space.  The next character is not
        checked for support, so a supported character followed by an
        unsupported one still gets its gap.  Unsupported characters yield
        nothing.
        """
        folded = fold_case(text)
        last = len(folded) - 1
        for i, char in enumerate(folded):
            if char == WORD_SEPARATOR:
                yield self._word_gap
                continue
            samples = self._chars.get(char)
            if samples is None:
                continue
            yield samples
            if i < last and folded[i + 1] != WORD_SEPARATOR:
                yield self._char_gap

    def measure(self, text: str) -> int:
        """Return the number of samples :meth:`synthesize` would produce."""
        return sum(segment.size for segment in self.segments(text))

    def synthesize(self, text: str) -> SynthesisResult:
        """Render *text* into a new read-only int16 buffer."""
        parts = list(self.segments(text))
        if parts:
            samples = np.concatenate(parts)
        else:
            samples = np.zeros(0, dtype=np.int16)
        samples.setflags(write=False)
        logger.debug(
            "Synthesized %d chars -> %d samples (%.3f s)",
            len(text), samples.size, samples.size / self.sample_rate,
        )
        return SynthesisResult(samples=samples, sample_rate=self.sample_rate)


def generate_morse_audio(
    text: str,
    wpm: int = DEFAULT_WPM,
    frequency: float = DEFAULT_FREQUENCY,
) -> Tuple[np.ndarray, int]:
    """Synthesize *text* and return ``(samples, sample_count)``."""
    result = MorseSynthesizer(wpm, frequency).synthesize(text)
    return result.samples, result.sample_count


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr
