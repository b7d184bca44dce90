"""Morse code tone generator — command-line entry point.

Usage:
    morsetone --text "CQ CQ" --wpm 25 --freq 700
    morsetone --text SOS --output sos.wav --no-play
    morsetone --config path             # Custom config file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from morsetone.audio.playback import list_audio_devices, play_wav
from morsetone.audio.wav_codec import encode_wav, write_wav
from morsetone.config.settings import MorseConfig
from morsetone.core.symbols import text_to_morse
from morsetone.core.synthesizer import MorseSynthesizer
from morsetone.errors import MorseError
from morsetone.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morsetone",
        description="Play or save text as Morse code audio",
    )
    parser.add_argument("--text", type=str, default=None,
                        help="Text to convert to Morse code (default: SOS)")
    parser.add_argument("--wpm", type=int, default=None,
                        help="Speed in words per minute (default: 20)")
    parser.add_argument("--freq", type=int, default=None,
                        help="Tone frequency in Hz (default: 600)")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a config JSON file")
    parser.add_argument("--output", type=str, default=None,
                        help="Write the audio to this WAV file")
    parser.add_argument("--no-play", action="store_true",
                        help="Do not play the audio")
    parser.add_argument("--device", type=str, default=None,
                        help="Audio output device name")
    parser.add_argument("--list-devices", action="store_true",
                        help="List audio output devices and exit")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> MorseConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = MorseConfig.load(Path(args.config)) if args.config else MorseConfig()
    if args.text is not None:
        config.text = args.text
    if args.wpm is not None:
        config.timing.wpm = args.wpm
    if args.freq is not None:
        config.audio.frequency = args.freq
    if args.device is not None:
        config.audio.device = args.device
    if args.output is not None:
        config.output_path = args.output
    return config


def run(config: MorseConfig, play: bool = True) -> None:
    synth = MorseSynthesizer(
        config.timing.wpm, config.audio.frequency, config.audio.sample_rate
    )
    result = synth.synthesize(config.text)
    logger.info("Morse: %s", text_to_morse(config.text) or "(nothing to send)")

    if config.output_path:
        write_wav(config.output_path, result.samples, result.sample_rate)

    if play:
        print(
            f"Playing '{config.text}' in Morse code at {synth.wpm} WPM, "
            f"{config.audio.frequency} Hz ({result.duration_s:.2f} s)"
        )
        play_wav(encode_wav(result.samples, result.sample_rate),
                 device=config.audio.device)


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.list_devices:
            for name in list_audio_devices():
                print(name)
            return 0
        config = build_config(args)
        run(config, play=not args.no_play)
    except MorseError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
