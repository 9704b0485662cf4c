"""Kernel – framework-agnostic building blocks (errors, result/option types)."""

from mp_numbering.kernel.errors import (
    BaseError,
    DecomposeError,
    DomainError,
    DuplicateCountryError,
    InvalidNDCError,
    MalformedNumberError,
    MalformedRuleDefinitionError,
    NoMatchingRuleError,
    NoSplitRuleError,
    RegistryError,
    ReservedCountryError,
    UnknownCountryError,
)

__all__ = [
    "BaseError",
    "DecomposeError",
    "DomainError",
    "DuplicateCountryError",
    "InvalidNDCError",
    "MalformedNumberError",
    "MalformedRuleDefinitionError",
    "NoMatchingRuleError",
    "NoSplitRuleError",
    "RegistryError",
    "ReservedCountryError",
    "UnknownCountryError",
]
