from __future__ import annotations

import json
import logging

import pytest

from morsetone.config.settings import AudioSettings, MorseConfig, TimingSettings
from morsetone.errors import ConfigError


def test_defaults():
    config = MorseConfig()
    assert config.text == "SOS"
    assert config.timing.wpm == 20
    assert config.audio.frequency == 600
    assert config.audio.sample_rate == 44100
    assert config.audio.device == ""
    assert config.output_path == ""


def test_save_and_load(tmp_path):
    config = MorseConfig(
        text="CQ",
        timing=TimingSettings(wpm=25),
        audio=AudioSettings(frequency=700, device="Speakers"),
        output_path="cq.wav",
    )
    path = tmp_path / "sub" / "config.json"
    config.save(path)
    assert MorseConfig.load(path) == config


def test_missing_keys_use_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"timing": {"wpm": 30}}), encoding="utf-8")
    config = MorseConfig.load(path)
    assert config.timing.wpm == 30
    assert config.text == "SOS"
    assert config.audio == AudioSettings()


def test_unknown_keys_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        config = MorseConfig.from_dict({"audio": {"frequency": 800, "volume": 0.5}})
    assert config.audio.frequency == 800
    assert "volume" in caplog.text


def test_to_dict():
    assert MorseConfig().to_dict() == {
        "text": "SOS",
        "timing": {"wpm": 20},
        "audio": {"frequency": 600, "sample_rate": 44100, "device": ""},
        "output_path": "",
    }


def test_malformed_file_raises_config_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        MorseConfig.load(path)


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        MorseConfig.load(tmp_path / "absent.json")


def test_non_object_section_rejected():
    with pytest.raises(ConfigError):
        MorseConfig.from_dict({"timing": 20})


@pytest.mark.parametrize("data", [
    {"timing": {"wpm": "25"}},
    {"timing": {"wpm": True}},
    {"audio": {"frequency": 600.5}},
    {"audio": {"device": 3}},
    {"text": 42},
    {"output_path": None},
])
def test_wrong_value_type_rejected(data):
    with pytest.raises(ConfigError):
        MorseConfig.from_dict(data)


def test_wrong_value_type_in_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"timing": {"wpm": "25"}}), encoding="utf-8")
    with pytest.raises(ConfigError, match="wpm"):
        MorseConfig.load(path)
