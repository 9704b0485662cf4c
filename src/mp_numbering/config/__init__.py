"""Configuration – settings dataclasses, loaders and validation errors."""
from mp_numbering.config.settings import NumberingSettings, Settings, SettingsFactory
from mp_numbering.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "NumberingSettings",
    "Settings",
    "SettingsFactory",
]
