"""Config settings – env-based configuration."""
from mp_numbering.config.settings.base import Settings
from mp_numbering.config.settings.factory import SettingsFactory
from mp_numbering.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_numbering.config.settings.numbering import NumberingSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "NumberingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
