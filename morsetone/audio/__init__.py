"""Tone generation, WAV container encoding and playback."""
