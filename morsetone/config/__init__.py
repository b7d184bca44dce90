from morsetone.config.settings import AudioSettings, MorseConfig, TimingSettings

__all__ = ["AudioSettings", "MorseConfig", "TimingSettings"]
