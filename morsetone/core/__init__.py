"""Timing model, symbol table and waveform synthesis."""
