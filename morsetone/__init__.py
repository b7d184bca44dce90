"""Text to Morse code PCM audio."""

from morsetone.audio.wav_codec import decode_wav, encode_wav, write_wav
from morsetone.core.symbols import MORSE_TABLE, text_to_morse
from morsetone.core.synthesizer import (
    MorseSynthesizer,
    SynthesisResult,
    generate_morse_audio,
)
from morsetone.core.timing import MorseTiming, calculate_timing, ms_to_samples
from morsetone.errors import (
    ConfigError,
    InvalidFrequencyError,
    MorseError,
    PlaybackError,
    WavFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "MORSE_TABLE",
    "MorseSynthesizer",
    "MorseTiming",
    "SynthesisResult",
    "calculate_timing",
    "decode_wav",
    "encode_wav",
    "generate_morse_audio",
    "ms_to_samples",
    "text_to_morse",
    "write_wav",
    "MorseError",
    "ConfigError",
    "InvalidFrequencyError",
    "PlaybackError",
    "WavFormatError",
]
