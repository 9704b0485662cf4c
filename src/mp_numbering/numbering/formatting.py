"""Rendering a :class:`Decomposition` as text.

Styles:

* ``international`` – ``+33 6 12 34 56 78``: country code, NDC, groups; no trunk.
* ``national``      – ``06 12 34 56 78``: trunk code (or a ``0`` for zero-flagged
  NDCs in countries without one), NDC, groups.
* ``local``         – ``12 34 56 78``: the groups only.
"""

from __future__ import annotations

from typing import Literal

from mp_numbering.numbering.decompose import Decomposition
from mp_numbering.numbering.rules import CountryRule

Style = Literal["international", "national", "local"]
STYLES: tuple[str, ...] = ("international", "national", "local")


def format_local(decomposition: Decomposition, *, local_separator: str = " ") -> str:
    return local_separator.join(decomposition.groups)


def format_international(
    country_code: str,
    decomposition: Decomposition,
    *,
    separator: str = " ",
    local_separator: str | None = None,
    plus: bool = True,
) -> str:
    local = format_local(
        decomposition, local_separator=separator if local_separator is None else local_separator
    )
    head = f"+{country_code}" if plus else country_code
    return separator.join(part for part in (head, decomposition.ndc, local) if part)


def national_prefix(rule: CountryRule, decomposition: Decomposition, *, separator: str = " ") -> str:
    """Trunk rendering, or ``0`` for a zero-flagged NDC when there is no trunk rule."""
    if rule.trunk is not None:
        observed = None if rule.trunk.normalize else decomposition.trunk
        return rule.trunk.render(separator, observed)
    return "0" if decomposition.zero and decomposition.ndc else ""


def format_national(
    rule: CountryRule,
    decomposition: Decomposition,
    *,
    separator: str = " ",
    local_separator: str | None = None,
) -> str:
    local = format_local(
        decomposition, local_separator=separator if local_separator is None else local_separator
    )
    head = national_prefix(rule, decomposition, separator=separator) + decomposition.ndc
    if head.endswith(separator) and separator:
        return head + local
    return separator.join(part for part in (head, local) if part)


def render(
    rule: CountryRule,
    decomposition: Decomposition,
    style: Style = "international",
    *,
    separator: str = " ",
    local_separator: str | None = None,
    plus: bool = True,
) -> str:
    """Render in ``style``; unknown styles raise ``ValueError``."""
    if style == "international":
        return format_international(
            rule.code, decomposition, separator=separator, local_separator=local_separator, plus=plus
        )
    if style == "national":
        return format_national(rule, decomposition, separator=separator, local_separator=local_separator)
    if style == "local":
        return format_local(decomposition, local_separator=separator if local_separator is None else local_separator)
    raise ValueError(f"Unknown format style {style!r}; expected one of {', '.join(STYLES)}")


__all__ = [
    "STYLES",
    "Style",
    "format_international",
    "format_local",
    "format_national",
    "national_prefix",
    "render",
]
