"""Decomposition errors – returned inside ``Err`` values, never raised by the core."""

from __future__ import annotations

from typing import Any

from mp_numbering.kernel.errors.domain import DomainError


class DecomposeError(DomainError):
    """A digit string could not be decomposed under a country rule."""

    default_code = "decompose_error"

    def __init__(
        self,
        message: str,
        *,
        digits: str = "",
        country_code: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = kwargs.pop("detail", None) or {}
        detail.setdefault("digits", digits)
        if country_code is not None:
            detail.setdefault("country_code", country_code)
        super().__init__(message, detail=detail, **kwargs)
        self.digits = digits
        self.country_code = country_code


class MalformedNumberError(DecomposeError):
    """The input is empty or contains something other than ASCII digits."""

    default_code = "malformed_number"

    def __init__(self, digits: str, **kwargs: Any) -> None:
        super().__init__(f"Not a digit string: {digits!r}", digits=digits, **kwargs)


class UnknownCountryError(DecomposeError):
    """No rule is registered for the country code (or the code is reserved)."""

    default_code = "unknown_country"

    def __init__(self, country_code: str, *, digits: str = "", reserved: bool = False) -> None:
        reason = "is reserved" if reserved else "has no numbering rule"
        super().__init__(
            f"Country code '{country_code}' {reason}",
            digits=digits,
            country_code=country_code,
            detail={"reserved": reserved},
        )
        self.reserved = reserved


class NoMatchingRuleError(DecomposeError):
    """No alternative's NDC matcher accepted the digits."""

    default_code = "no_matching_rule"

    def __init__(self, digits: str, **kwargs: Any) -> None:
        super().__init__(f"No NDC rule matches {digits!r}", digits=digits, **kwargs)


class NoSplitRuleError(DecomposeError):
    """A matcher committed but its splitter had no rule for the remainder."""

    default_code = "no_split_rule"

    def __init__(self, digits: str, *, ndc: str, remainder: str, **kwargs: Any) -> None:
        super().__init__(
            f"No split rule for {remainder!r} after NDC {ndc!r}",
            digits=digits,
            detail={"ndc": ndc, "remainder": remainder},
            **kwargs,
        )
        self.ndc = ndc
        self.remainder = remainder


class InvalidNDCError(DecomposeError):
    """The extracted NDC is listed as invalid by a validator."""

    default_code = "invalid_ndc"

    def __init__(self, digits: str, *, ndc: str, pattern: str, **kwargs: Any) -> None:
        super().__init__(
            f"NDC {ndc!r} is invalid (matches {pattern!r})",
            digits=digits,
            detail={"ndc": ndc, "pattern": pattern},
            **kwargs,
        )
        self.ndc = ndc
        self.pattern = pattern


__all__ = [
    "DecomposeError",
    "InvalidNDCError",
    "MalformedNumberError",
    "NoMatchingRuleError",
    "NoSplitRuleError",
    "UnknownCountryError",
]
