"""Trunk codes – the domestic-only prefix in front of the NDC.

``code`` is either a literal (``"0"``, ``"06"``) or a template ending in
``%s``, which stands for the separator in national rendering (``"8%s"``
renders as ``"8 "``). ``variants`` lists other spellings accepted when
stripping.
"""

from __future__ import annotations

import dataclasses

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.patterns import is_digit_string

TEMPLATE_MARK = "%s"


@dataclasses.dataclass(frozen=True)
class TrunkRule:
    """Strips and renders a country's trunk code.

    Attributes:
        code: Canonical trunk code, optionally templated with ``%s``.
        normalize: Report the canonical code instead of the observed spelling.
        variants: Additional literal spellings accepted on input.
        format: Include the trunk code in national renderings.
    """

    code: str
    normalize: bool = True
    variants: tuple[str, ...] = ()
    format: bool = True
    _literals: tuple[str, ...] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or TEMPLATE_MARK in self.code.removesuffix(TEMPLATE_MARK):
            raise MalformedRuleDefinitionError(
                f"Invalid trunk code {self.code!r}; '%s' may only end the code", rule="trunk"
            )
        canonical = self.code.replace(TEMPLATE_MARK, "")
        variants = (self.variants,) if isinstance(self.variants, str) else tuple(self.variants)
        for literal in (canonical, *variants):
            if not is_digit_string(literal):
                raise MalformedRuleDefinitionError(
                    f"Trunk code {literal!r} must be a non-empty digit string", rule="trunk"
                )
        object.__setattr__(self, "variants", variants)
        literals = dict.fromkeys((canonical, *variants))
        object.__setattr__(self, "_literals", tuple(sorted(literals, key=len, reverse=True)))

    @property
    def canonical(self) -> str:
        """The trunk code without its template mark."""
        return self.code.replace(TEMPLATE_MARK, "")

    def spells(self, text: str) -> bool:
        """Whether ``text`` is the canonical code or one of its variants."""
        return text in self._literals

    def strip(self, digits: str) -> tuple[str | None, str]:
        """Remove a leading trunk code, longest spelling first.

        Returns ``(observed, rest)``; ``observed`` is ``None`` when no trunk
        code was present. A trunk code is never stripped if nothing would
        remain after it.
        """
        for literal in self._literals:
            if len(digits) > len(literal) and digits.startswith(literal):
                return literal, digits[len(literal) :]
        return None, digits

    def text_for(self, observed: str | None) -> str | None:
        """Trunk text reported for an observed spelling."""
        if observed is None:
            return None
        return self.canonical if self.normalize else observed

    def render(self, separator: str = " ", observed: str | None = None) -> str:
        """Trunk code as it appears in a national rendering.

        ``observed`` is the trunk text of a decomposition; when given it is
        rendered in place of the canonical spelling.
        """
        if not self.format:
            return ""
        text = observed if observed is not None else self.canonical
        return text + separator if self.code.endswith(TEMPLATE_MARK) else text


__all__ = ["TEMPLATE_MARK", "TrunkRule"]
