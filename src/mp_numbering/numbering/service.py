"""NumberingService – decomposition, formatting and normalization over a registry.

The service owns its :class:`CountryRegistry`; build one per configuration
(see :func:`mp_numbering.bootstrap.create_service`).

Example::

    service = NumberingService(load_catalogue())
    service.format("+33 6 12 34 56 78", "national")   # '06 12 34 56 78'
    service.normalize("+33 (0)6 12 34 56 78")          # '33612345678'
    service.split("33612345678").unwrap()              # ('33', Decomposition(...))
"""

from __future__ import annotations

import re

from mp_numbering.config.settings import NumberingSettings
from mp_numbering.kernel.errors import DecomposeError, MalformedNumberError, UnknownCountryError
from mp_numbering.kernel.types import Err, Ok, Result
from mp_numbering.numbering.decompose import Decomposition, decompose
from mp_numbering.numbering.formatting import Style, render
from mp_numbering.numbering.phone import PhoneNumber
from mp_numbering.numbering.registry import CountryRegistry
from mp_numbering.numbering.rules import CountryRule
from mp_numbering.observability.logging import get_logger

log = get_logger(__name__)

MAX_COUNTRY_CODE_LENGTH = 3

_BRACKETED = re.compile(r"\(\s*(\d+)\s*\)")


def digits_of(number: str) -> str:
    """Keep ASCII digits only: ``"+33 (6) 12-34"`` -> ``"3361234"``."""
    return "".join(ch for ch in number if ch.isascii() and ch.isdigit())


def _without_bracketed_trunk(number: str, rule: CountryRule) -> str:
    """Drop a parenthesised trunk code: ``"+33 (0)6 12"`` -> ``"+33 6 12"``.

    Other bracketed digits (an area code such as ``"(212)"``) are kept.
    """
    found = _BRACKETED.search(number)
    if found is None or rule.trunk is None or not rule.trunk.spells(found.group(1)):
        return number
    return number[: found.start()] + number[found.end() :]


class NumberingService:
    """Formatting front-end for one registry of country rules."""

    def __init__(self, registry: CountryRegistry, settings: NumberingSettings | None = None) -> None:
        self._registry = registry
        self._settings = settings or NumberingSettings()

    @property
    def registry(self) -> CountryRegistry:
        return self._registry

    @property
    def settings(self) -> NumberingSettings:
        return self._settings

    # Result-returning operations ---------------------------------------

    def split_country(self, digits: str) -> Result[tuple[str, str], DecomposeError]:
        """Separate the country code from an international digit string.

        Country codes are prefix-free, so the first 1-, 2- or 3-digit prefix
        with a rule (or a reservation) decides.
        """
        if not digits or not digits.isascii() or not digits.isdigit():
            return Err(MalformedNumberError(digits))
        for size in range(1, min(MAX_COUNTRY_CODE_LENGTH, len(digits) - 1) + 1):
            prefix = digits[:size]
            if prefix in self._registry:
                return Ok((prefix, digits[size:]))
            if self._registry.is_reserved(prefix):
                return Err(UnknownCountryError(prefix, digits=digits, reserved=True))
        return Err(UnknownCountryError(digits[:MAX_COUNTRY_CODE_LENGTH], digits=digits))

    def decompose(
        self, country_code: str, national: str, *, strip_trunk: bool = True
    ) -> Result[Decomposition, DecomposeError]:
        """Decompose a national digit string under the rule for ``country_code``.

        ``strip_trunk=False`` treats ``national`` as already free of a trunk
        code, which holds for digits that followed a country code.
        """
        rule = self._registry.lookup(country_code)
        if rule.is_none():
            return Err(
                UnknownCountryError(
                    country_code, digits=national, reserved=self._registry.is_reserved(country_code)
                )
            )
        return decompose(rule.unwrap(), national, strip_trunk=strip_trunk)

    def split(self, number: str, *, country_code: str | None = None) -> Result[tuple[str, Decomposition], DecomposeError]:
        """Decompose ``number``; punctuation and spaces are ignored.

        Without ``country_code`` the number is international (country code
        first) and its national digits are taken as they are, except that a
        parenthesised trunk code (``"+33 (0)6..."``) is dropped. With it, the
        number is national and may carry a trunk code.
        """
        if country_code is not None:
            result = self.decompose(country_code, digits_of(number)).map(lambda parts: (country_code, parts))
        else:
            result = self.split_country(digits_of(number)).flat_map(
                lambda found: self._decompose_international(number, found[0])
            )
        if result.is_err():
            log.debug("number.decompose_failed", error=result.error)
        return result

    def _decompose_international(
        self, number: str, country_code: str
    ) -> Result[tuple[str, Decomposition], DecomposeError]:
        rule = self._registry.get(country_code)
        national = digits_of(_without_bracketed_trunk(number, rule))[len(country_code) :]
        return decompose(rule, national, strip_trunk=False).map(lambda parts: (country_code, parts))

    # Raising conveniences -------------------------------------------------

    def format(
        self,
        number: str,
        style: Style | None = None,
        *,
        country_code: str | None = None,
    ) -> str:
        """Render ``number``; raises the ``DecomposeError`` if it cannot be split."""
        cc, parts = self.split(number, country_code=country_code).unwrap()
        return render(
            self._registry.get(cc),
            parts,
            style or self._settings.default_format,  # type: ignore[arg-type]
            separator=self._settings.separator,
            local_separator=self._settings.local_separator,
            plus=self._settings.plus_prefix,
        )

    def normalize(self, number: str, *, country_code: str | None = None) -> str:
        """Country code followed by the national digits, without trunk code."""
        return self.parse(number, country_code=country_code).e164.removeprefix("+")

    def parse(self, number: str, *, country_code: str | None = None) -> PhoneNumber:
        cc, parts = self.split(number, country_code=country_code).unwrap()
        return PhoneNumber(cc, parts)

    def is_decomposable(self, number: str, *, country_code: str | None = None) -> bool:
        return self.split(number, country_code=country_code).is_ok()


__all__ = ["MAX_COUNTRY_CODE_LENGTH", "NumberingService", "digits_of"]
