"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── DomainError                       (domain.py)
        ├── MalformedRuleDefinitionError
        ├── RegistryError
        │   ├── DuplicateCountryError
        │   └── ReservedCountryError
        └── DecomposeError                (decomposition.py)
            ├── MalformedNumberError
            ├── UnknownCountryError
            ├── NoMatchingRuleError
            ├── NoSplitRuleError
            └── InvalidNDCError
"""

from mp_numbering.kernel.errors.base import BaseError
from mp_numbering.kernel.errors.decomposition import (
    DecomposeError,
    InvalidNDCError,
    MalformedNumberError,
    NoMatchingRuleError,
    NoSplitRuleError,
    UnknownCountryError,
)
from mp_numbering.kernel.errors.domain import (
    DomainError,
    DuplicateCountryError,
    MalformedRuleDefinitionError,
    RegistryError,
    ReservedCountryError,
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
