"""CountryRegistry – country code to :class:`CountryRule` mapping.

Owned by whoever formats numbers (usually a ``NumberingService``); there is
no module-level instance. Registration happens once at start-up; lookups are
lock-free reads of an immutable snapshot.

Example::

    registry = CountryRegistry()
    registry.register("33", france_rule)
    registry.reserve("289")

    registry.lookup("33")    # Some(CountryRule(...))
    registry.lookup("34")    # Nothing()
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Iterator, Mapping

from mp_numbering.kernel.errors import (
    DuplicateCountryError,
    MalformedRuleDefinitionError,
    ReservedCountryError,
    UnknownCountryError,
)
from mp_numbering.kernel.types import Nothing, Option, Some
from mp_numbering.numbering.rules import CountryRule
from mp_numbering.observability.logging import get_logger

log = get_logger(__name__)


class CountryRegistry:
    """Country rules keyed by country code; codes are unique."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rules: Mapping[str, CountryRule] = MappingProxyType({})
        self._reserved: frozenset[str] = frozenset()

    def register(self, country_code: str, rule: CountryRule) -> None:
        """Add ``rule`` under ``country_code``.

        Raises ``DuplicateCountryError`` if the code already has a rule and
        ``ReservedCountryError`` if it is reserved; the registry is left
        unchanged in both cases.
        """
        if rule.code != country_code:
            raise MalformedRuleDefinitionError(
                f"Rule for {rule.code!r} cannot be registered under {country_code!r}", rule="country"
            )
        with self._lock:
            if country_code in self._reserved:
                log.warning("country.reserved_rejected", country_code=country_code)
                raise ReservedCountryError(country_code)
            if country_code in self._rules:
                log.warning("country.duplicate_rejected", country_code=country_code)
                raise DuplicateCountryError(country_code)
            self._rules = MappingProxyType({**self._rules, country_code: rule})
        log.debug("country.registered", country_code=country_code, alternatives=len(rule.alternation))

    def reserve(self, country_code: str) -> None:
        """Mark ``country_code`` as reserved: it can never carry a rule."""
        with self._lock:
            if country_code in self._rules or country_code in self._reserved:
                raise DuplicateCountryError(country_code)
            self._reserved = self._reserved | {country_code}
        log.debug("country.reserved", country_code=country_code)

    def lookup(self, country_code: str) -> Option[CountryRule]:
        rule = self._rules.get(country_code)
        return Nothing() if rule is None else Some(rule)

    def get(self, country_code: str) -> CountryRule:
        """Return the rule for ``country_code`` or raise ``UnknownCountryError``."""
        try:
            return self._rules[country_code]
        except KeyError:
            raise UnknownCountryError(country_code, reserved=self.is_reserved(country_code)) from None

    def is_reserved(self, country_code: str) -> bool:
        return country_code in self._reserved

    def codes(self) -> list[str]:
        """Registered country codes, sorted."""
        return sorted(self._rules)

    def __contains__(self, country_code: object) -> bool:
        return country_code in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes())


__all__ = ["CountryRegistry"]
