"""Rule combinators – ``Sequence``, ``Alternation`` and the composed ``CountryRule``.

Composition mirrors how rules are written for a country::

    rule = alternation(
        sequence(RegexMatcher(r"^(0\\d{2})\\d+$"), FixedSplitter.of(2, 2, 2, 2)),
        sequence(RegexMatcher(r"^(\\d{3})\\d+$"), FixedSplitter.of(3, 2, 2)),
    )

or, with the operators, ``matcher >> splitter | matcher >> splitter``
(``>>`` binds tighter than ``|``).
"""

from __future__ import annotations

import dataclasses
from typing import Iterable

from mp_numbering.kernel.errors import (
    DecomposeError,
    MalformedRuleDefinitionError,
    NoMatchingRuleError,
    NoSplitRuleError,
)
from mp_numbering.kernel.types import Err, Ok, Result
from mp_numbering.numbering.matchers import NationalMatcher, NdcMatch
from mp_numbering.numbering.splitters import LocalSplitter
from mp_numbering.numbering.trunk import TrunkRule
from mp_numbering.numbering.validators import NdcValidator


@dataclasses.dataclass(frozen=True, slots=True)
class Branch:
    """Outcome of the committed alternative: its match and the groups."""

    match: NdcMatch
    groups: tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class Sequence:
    """One formatting alternative: an NDC matcher followed by a local splitter."""

    matcher: NationalMatcher
    splitter: LocalSplitter

    def __post_init__(self) -> None:
        if not isinstance(self.matcher, NationalMatcher):
            raise MalformedRuleDefinitionError(
                f"{self.matcher!r} is not an NDC matcher", rule="sequence"
            )
        if not isinstance(self.splitter, LocalSplitter):
            raise MalformedRuleDefinitionError(
                f"{self.splitter!r} is not a local splitter", rule="sequence"
            )

    def __or__(self, other: "Sequence | Alternation") -> "Alternation":
        return Alternation((self,)) | other


@dataclasses.dataclass(frozen=True)
class Alternation:
    """Ordered alternatives; the first matcher that succeeds commits."""

    sequences: tuple[Sequence, ...]

    def __post_init__(self) -> None:
        sequences = tuple(self.sequences)
        if not sequences:
            raise MalformedRuleDefinitionError("An alternation needs at least one sequence", rule="alternation")
        for seq in sequences:
            if not isinstance(seq, Sequence):
                raise MalformedRuleDefinitionError(f"{seq!r} is not a sequence", rule="alternation")
        object.__setattr__(self, "sequences", sequences)

    def __or__(self, other: "Sequence | Alternation") -> "Alternation":
        if isinstance(other, Sequence):
            return Alternation((*self.sequences, other))
        if isinstance(other, Alternation):
            return Alternation((*self.sequences, *other.sequences))
        return NotImplemented

    def __iter__(self):
        return iter(self.sequences)

    def __len__(self) -> int:
        return len(self.sequences)

    def apply(self, digits: str, *, country_code: str | None = None) -> Result[Branch, DecomposeError]:
        """Run the alternatives in order with first-match commit semantics.

        Once a matcher accepts, its splitter decides the outcome. A splitter
        without a rule for the remainder yields ``NoSplitRuleError``; later
        alternatives are not consulted.
        """
        for seq in self.sequences:
            found = seq.matcher.match(digits)
            if found is None:
                continue
            groups = seq.splitter.split(found.remainder)
            if groups is None:
                return Err(
                    NoSplitRuleError(
                        digits, ndc=found.ndc, remainder=found.remainder, country_code=country_code
                    )
                )
            return Ok(Branch(found, groups))
        return Err(NoMatchingRuleError(digits, country_code=country_code))


@dataclasses.dataclass(frozen=True)
class CountryRule:
    """Everything needed to decompose numbers of one country."""

    code: str
    alternation: Alternation
    trunk: TrunkRule | None = None
    validators: tuple[NdcValidator, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.isascii() or not self.code.isdigit():
            raise MalformedRuleDefinitionError(f"Country code {self.code!r} is not a digit string", rule="country")
        if isinstance(self.alternation, Sequence):
            object.__setattr__(self, "alternation", Alternation((self.alternation,)))
        elif not isinstance(self.alternation, Alternation):
            raise MalformedRuleDefinitionError(
                f"Country {self.code} needs a sequence or an alternation", rule="country"
            )
        if self.trunk is not None and not isinstance(self.trunk, TrunkRule):
            raise MalformedRuleDefinitionError(f"{self.trunk!r} is not a trunk rule", rule="country")
        validators = tuple(self.validators)
        for validator in validators:
            if not isinstance(validator, NdcValidator):
                raise MalformedRuleDefinitionError(f"{validator!r} is not an NDC validator", rule="country")
        object.__setattr__(self, "validators", validators)

    def rejection(self, ndc: str) -> str | None:
        """First validator entry rejecting ``ndc``, in declaration order."""
        for validator in self.validators:
            entry = validator.rejection(ndc)
            if entry is not None:
                return entry
        return None


def sequence(matcher: NationalMatcher, splitter: LocalSplitter) -> Sequence:
    return Sequence(matcher, splitter)


def alternation(*sequences: Sequence | Alternation | Iterable[Sequence]) -> Alternation:
    """Flatten sequences and nested alternations into one ordered alternation."""
    flat: list[Sequence] = []
    for item in sequences:
        if isinstance(item, Sequence):
            flat.append(item)
        elif isinstance(item, Alternation):
            flat.extend(item.sequences)
        else:
            flat.extend(item)
    return Alternation(tuple(flat))


__all__ = [
    "Alternation",
    "Branch",
    "CountryRule",
    "Sequence",
    "alternation",
    "sequence",
]
