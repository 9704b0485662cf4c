"""Config settings – NumberingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_numbering.config.settings.base import Settings
from mp_numbering.config.validation import InvalidSettingValueError

FORMAT_STYLES: tuple[str, ...] = ("international", "national", "local")


@dataclasses.dataclass
class NumberingSettings(Settings):
    """Formatting defaults and start-up behaviour (``NUMBERING_*`` env vars)."""

    _prefix: ClassVar[str] = "NUMBERING"

    default_format: str = "international"
    separator: str = " "
    local_separator: str = " "
    plus_prefix: bool = True
    load_catalogue: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.default_format not in FORMAT_STYLES:
            raise InvalidSettingValueError(
                "default_format", self.default_format, f"expected one of {', '.join(FORMAT_STYLES)}"
            )
        for name in ("separator", "local_separator"):
            value = getattr(self, name)
            if any(ch.isdigit() for ch in value):
                raise InvalidSettingValueError(name, value, "separators cannot contain digits")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["FORMAT_STYLES", "NumberingSettings"]
