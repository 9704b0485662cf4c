"""Composition root: settings -> logging -> registry -> service."""
from __future__ import annotations

from typing import Sequence

from mp_numbering.config.settings import EnvSettingsLoader, NumberingSettings, SettingsFactory, SettingsLoader
from mp_numbering.numbering.countries import load_catalogue
from mp_numbering.numbering.registry import CountryRegistry
from mp_numbering.numbering.service import NumberingService
from mp_numbering.observability.logging import JsonLoggerFactory


def create_service(
    settings: NumberingSettings | None = None,
    *,
    loaders: Sequence[SettingsLoader] | None = None,
    registry: CountryRegistry | None = None,
    configure_logging: bool = False,
) -> NumberingService:
    """Build a ready-to-use :class:`NumberingService`.

    Settings come from ``loaders`` (environment by default) unless given.
    The built-in catalogue is loaded into ``registry`` (a fresh one when
    omitted) if ``settings.load_catalogue`` is set.
    """
    if settings is None:
        settings = SettingsFactory.create(
            NumberingSettings, loaders=[EnvSettingsLoader()] if loaders is None else loaders
        )
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level)
    registry = registry if registry is not None else CountryRegistry()
    if settings.load_catalogue:
        load_catalogue(registry)
    return NumberingService(registry, settings)


__all__ = ["create_service"]
