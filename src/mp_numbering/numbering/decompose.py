"""Decomposition of a national digit string under a :class:`CountryRule`."""

from __future__ import annotations

import dataclasses

from mp_numbering.kernel.errors import DecomposeError, InvalidNDCError, MalformedNumberError
from mp_numbering.kernel.types import Err, Ok, Result
from mp_numbering.numbering.patterns import is_digit_string
from mp_numbering.numbering.rules import CountryRule


@dataclasses.dataclass(frozen=True, slots=True)
class Decomposition:
    """Structural parts of a national number.

    Attributes:
        trunk: Trunk text (canonical or as observed, per the trunk rule), or
            ``None`` when the input carried no trunk code.
        ndc: National destination code; empty for countries without NDCs.
        groups: Local subscriber groups in order.
        zero: Zero-prefix formatting flag of the committed matcher.
    """

    trunk: str | None
    ndc: str
    groups: tuple[str, ...]
    zero: bool = False

    @property
    def national_digits(self) -> str:
        """NDC and subscriber digits without any trunk code."""
        return self.ndc + "".join(self.groups)

    def parts(self) -> list[str]:
        """Non-empty NDC followed by the groups, as rendered internationally."""
        return [self.ndc, *self.groups] if self.ndc else list(self.groups)


def decompose(
    rule: CountryRule, digits: str, *, strip_trunk: bool = True
) -> Result[Decomposition, DecomposeError]:
    """Split ``digits`` into trunk, NDC and groups.

    1. strip the trunk code, if the rule has one and it is present (skipped
       with ``strip_trunk=False``, for digits already known to be national);
    2. run the alternation (first matcher that succeeds commits);
    3. check the NDC against the validators in order, first rejection wins;
    4. return the decomposition.

    Failures come back as ``Err`` values; nothing is raised for bad input.
    """
    if not isinstance(digits, str) or not is_digit_string(digits):
        return Err(MalformedNumberError(str(digits), country_code=rule.code))

    if strip_trunk and rule.trunk is not None:
        observed, national = rule.trunk.strip(digits)
    else:
        observed, national = None, digits

    outcome = rule.alternation.apply(national, country_code=rule.code)
    if outcome.is_err():
        return outcome
    branch = outcome.value

    rejected_by = rule.rejection(branch.match.ndc)
    if rejected_by is not None:
        return Err(
            InvalidNDCError(national, ndc=branch.match.ndc, pattern=rejected_by, country_code=rule.code)
        )

    trunk_text = rule.trunk.text_for(observed) if rule.trunk is not None else None
    return Ok(Decomposition(trunk_text, branch.match.ndc, branch.groups, branch.match.zero))


__all__ = ["Decomposition", "decompose"]
