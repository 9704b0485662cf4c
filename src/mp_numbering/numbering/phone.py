"""PhoneNumber value object – an E.164 number split at its country code."""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from mp_numbering.kernel.errors import MalformedNumberError
from mp_numbering.numbering.decompose import Decomposition

_E164_PATTERN: Final = re.compile(r"^\+[1-9]\d{1,14}$")


@dataclasses.dataclass(frozen=True, slots=True)
class PhoneNumber:
    """A number as country code, national digits and its decomposition.

    ``national_number`` never carries a trunk code; it is exactly the NDC
    followed by the subscriber groups.
    """

    country_code: str
    decomposition: Decomposition

    def __post_init__(self) -> None:
        if not _E164_PATTERN.match(self.e164):
            raise MalformedNumberError(self.e164, country_code=self.country_code)

    def __str__(self) -> str:
        return self.e164

    @property
    def national_number(self) -> str:
        return self.decomposition.national_digits

    @property
    def ndc(self) -> str:
        return self.decomposition.ndc

    @property
    def e164(self) -> str:
        return f"+{self.country_code}{self.national_number}"


__all__ = ["PhoneNumber"]
