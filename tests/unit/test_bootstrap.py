"""Unit tests for the composition root."""

from __future__ import annotations

import pytest

from mp_numbering.bootstrap import create_service
from mp_numbering.config.settings import NumberingSettings
from mp_numbering.numbering.registry import CountryRegistry
from mp_numbering.numbering.service import NumberingService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("NUMBERING_DEFAULT_FORMAT", "NUMBERING_LOAD_CATALOGUE", "NUMBERING_SEPARATOR"):
        monkeypatch.delenv(key, raising=False)


class TestCreateService:
    def test_defaults_load_catalogue(self) -> None:
        service = create_service()
        assert isinstance(service, NumberingService)
        assert "33" in service.registry
        assert service.format("+33612345678") == "+33 6 12 34 56 78"

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUMBERING_DEFAULT_FORMAT", "national")
        service = create_service()
        assert service.settings.default_format == "national"
        assert service.format("+33612345678") == "06 12 34 56 78"

    def test_explicit_settings_skip_loaders(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUMBERING_DEFAULT_FORMAT", "national")
        service = create_service(NumberingSettings(default_format="local"))
        assert service.format("+33612345678") == "12 34 56 78"

    def test_catalogue_can_be_disabled(self) -> None:
        registry = CountryRegistry()
        service = create_service(NumberingSettings(load_catalogue=False), registry=registry)
        assert service.registry is registry
        assert len(registry) == 0

    def test_custom_loaders(self) -> None:
        service = create_service(loaders=[])
        assert service.settings == NumberingSettings()
