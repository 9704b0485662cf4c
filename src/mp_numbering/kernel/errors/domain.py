"""Domain errors – rule definitions and the country registry."""

from __future__ import annotations

from typing import Any

from mp_numbering.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a numbering rule or registry invariant is violated."""

    default_code = "domain_error"


class MalformedRuleDefinitionError(DomainError):
    """A rule primitive was constructed from a structurally invalid definition.

    Raised at definition time only; a rule that constructed successfully never
    raises this during decomposition.
    """

    default_code = "malformed_rule_definition"

    def __init__(self, message: str, *, rule: str | None = None, **kwargs: Any) -> None:
        detail = kwargs.pop("detail", None) or {}
        if rule is not None:
            detail.setdefault("rule", rule)
        super().__init__(message, detail=detail, **kwargs)
        self.rule = rule


class RegistryError(DomainError):
    """Base for country registry conflicts."""

    default_code = "registry_error"

    def __init__(self, message: str, *, country_code: str, **kwargs: Any) -> None:
        super().__init__(message, detail={"country_code": country_code}, **kwargs)
        self.country_code = country_code


class DuplicateCountryError(RegistryError):
    """The country code already has a rule (or a reservation)."""

    default_code = "duplicate_country"

    def __init__(self, country_code: str) -> None:
        super().__init__(
            f"Country code '{country_code}' is already defined",
            country_code=country_code,
        )


class ReservedCountryError(RegistryError):
    """The country code is reserved and cannot carry a rule."""

    default_code = "reserved_country"

    def __init__(self, country_code: str) -> None:
        super().__init__(
            f"Country code '{country_code}' is reserved",
            country_code=country_code,
        )


__all__ = [
    "DomainError",
    "DuplicateCountryError",
    "MalformedRuleDefinitionError",
    "RegistryError",
    "ReservedCountryError",
]
