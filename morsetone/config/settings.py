"""Dataclass settings with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from morsetone.core.synthesizer import DEFAULT_FREQUENCY
from morsetone.core.timing import DEFAULT_WPM, SAMPLE_RATE
from morsetone.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class TimingSettings:
    """Keying speed."""
    wpm: int = DEFAULT_WPM


@dataclass
class AudioSettings:
    """Tone and output device."""
    frequency: int = DEFAULT_FREQUENCY
    sample_rate: int = SAMPLE_RATE
    device: str = ""  # empty = system default


@dataclass
class MorseConfig:
    """Everything needed for one text-to-audio run."""

    text: str = "SOS"
    timing: TimingSettings = field(default_factory=TimingSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    output_path: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MorseConfig":
        """Build a config from *data*, defaulting missing keys."""
        return cls(
            text=_value("MorseConfig", "text", data.get("text", "SOS"), ""),
            timing=_section(TimingSettings, data.get("timing", {})),
            audio=_section(AudioSettings, data.get("audio", {})),
            output_path=_value(
                "MorseConfig", "output_path", data.get("output_path", ""), ""
            ),
        )

    @classmethod
    def load(cls, path: Path) -> "MorseConfig":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a JSON object")
        logger.info("Config loaded from %s", path)
        return cls.from_dict(data)

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug("Config saved to %s", path)


def _section(cls, data: dict):
    if not isinstance(data, dict):
        raise ConfigError(f"{cls.__name__} section must be a JSON object")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        logger.warning(
            "Ignoring unknown %s keys: %s", cls.__name__, ", ".join(sorted(unknown))
        )
    defaults = cls()
    return cls(**{
        k: _value(cls.__name__, k, v, getattr(defaults, k))
        for k, v in data.items() if k in known
    })


def _value(owner: str, name: str, value, default):
    """Return *value* if it has the same JSON type as *default*."""
    expected = type(default)
    # bool is an int subclass, but JSON true/false is never a valid number
    if isinstance(value, bool) and expected is not bool:
        ok = False
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise ConfigError(
            f"{owner}.{name} must be {expected.__name__}, "
            f"got {type(value).__name__} {value!r}"
        )
    return value
