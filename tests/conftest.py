from __future__ import annotations

import logging
import sys
import types

import pytest


class FakePortAudioError(Exception):
    pass


@pytest.fixture
def fake_sd(monkeypatch):
    """Install a stand-in ``sounddevice`` module that records calls."""
    sd = types.ModuleType("sounddevice")
    sd.PortAudioError = FakePortAudioError
    sd.played = []
    sd.waited = 0
    sd.devices = [
        {"name": "Microsoft Sound Mapper - Output", "max_output_channels": 2},
        {"name": "Built-in Microphone", "max_output_channels": 0},
        {"name": "Speakers", "max_output_channels": 2},
        {"name": "Speakers", "max_output_channels": 2},
        {"name": "Headphones", "max_output_channels": 2},
    ]
    sd.fail = None

    def query_devices():
        return list(sd.devices)

    def play(data, samplerate, device=None):
        if sd.fail is not None:
            raise sd.fail
        sd.played.append((data, samplerate, device))

    def wait():
        sd.waited += 1

    sd.query_devices = query_devices
    sd.play = play
    sd.wait = wait
    monkeypatch.setitem(sys.modules, "sounddevice", sd)
    return sd


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
