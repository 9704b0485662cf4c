"""Rule-authoring helpers – how country rule sets are written.

Each helper builds one immutable primitive; structural mistakes raise
:class:`MalformedRuleDefinitionError` right here, at definition time.

Example::

    registry = CountryRegistry()
    (
        define(registry)
        .country("33", trunk("0"), fixed(1) >> split(2, 2, 2, 2))
        .country(
            "47",
            none() >> matched_split(
                {r"^[1].*$": [3], r"^[489].*$": [3, 2, 3]},
                fallback=[2, 2, 2, 2],
            ),
        )
        .country(
            "1",
            trunk("1%s", format=False),
            fixed(3, zero=False) >> split(3, 4),
            invalid_ndcs(re.compile(r"^[01]\\d\\d$"), re.compile(r"^\\d11$")),
        )
        .reserved("289")
    )
"""

from __future__ import annotations

from typing import Iterable, Mapping

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.matchers import (
    FixedMatcher,
    NoneMatcher,
    RegexMatcher,
    VariableMatcher,
    candidates_from,
)
from mp_numbering.numbering.patterns import PatternLike
from mp_numbering.numbering.registry import CountryRegistry
from mp_numbering.numbering.rules import (
    Alternation,
    CountryRule,
    Sequence,
    alternation,
    sequence,
)
from mp_numbering.numbering.splitters import FixedSplitter, RegexSplitter, SizeSpec
from mp_numbering.numbering.trunk import TrunkRule
from mp_numbering.numbering.validators import NdcValidator

RulePart = TrunkRule | Sequence | Alternation | NdcValidator


# National (NDC) matchers ----------------------------------------------


def fixed(length: int, *, zero: bool = True) -> FixedMatcher:
    """Fixed-length NDC; ``zero=False`` drops the ``0`` in national renderings."""
    return FixedMatcher(length, zero=zero)


def none() -> NoneMatcher:
    """No NDC. Always matches."""
    return NoneMatcher()


def one_of(*ndcs: str | Iterable[str], max_length: int | None = None, zero: bool = True) -> VariableMatcher:
    """NDC is one of an explicit list, e.g. ``one_of("103", "105")``."""
    candidates: list[str] = []
    for ndc in ndcs:
        candidates.extend(candidates_from(ndc))
    return VariableMatcher(tuple(candidates), max_length=max_length, zero=zero)


def match(pattern: PatternLike, *, on_fail_take: int | None = None, zero: bool = True) -> RegexMatcher:
    """NDC is the capture group, e.g. ``match(r"^(0\\d{2})\\d+$")``."""
    return RegexMatcher(pattern, on_fail_take=on_fail_take, zero=zero)


# Local splitters --------------------------------------------------------


def split(*sizes: SizeSpec) -> FixedSplitter:
    """Groups of the given sizes; ``(3, 4)`` or ``range(3, 5)`` is a 3-to-4 group."""
    return FixedSplitter.of(*sizes)


def matched_split(
    mapping: Mapping[PatternLike, Iterable[SizeSpec]] | Iterable[tuple[PatternLike, Iterable[SizeSpec]]] = (),
    *,
    fallback: Iterable[SizeSpec] | None = None,
) -> RegexSplitter:
    """Sizes chosen by the first pattern matching the local number."""
    return RegexSplitter.of(mapping, fallback)


# Trunk and validators ----------------------------------------------------


def trunk(
    code: str,
    *,
    normalize: bool = True,
    variants: Iterable[str] = (),
    format: bool = True,  # noqa: A002
) -> TrunkRule:
    """Trunk code, e.g. ``trunk("0")``, ``trunk("06", normalize=False)``, ``trunk("1%s")``."""
    return TrunkRule(code, normalize=normalize, variants=tuple(variants), format=format)


def invalid_ndcs(*ndcs: PatternLike | Iterable[PatternLike]) -> NdcValidator:
    """NDCs that are never valid; strings compare exactly, regexes are searched."""
    return NdcValidator.of(*ndcs)


def todo() -> Sequence:
    """Placeholder for countries without a worked-out plan: one 10-digit group."""
    return none() >> split(10)


# Country rules -------------------------------------------------------------


def country_rule(country_code: str, *parts: RulePart) -> CountryRule:
    """Compose a :class:`CountryRule` from parts in any order.

    At most one trunk rule; at least one sequence or alternation (they are
    concatenated in the order given); any number of validators.
    """
    trunk_rule: TrunkRule | None = None
    sequences: list[Sequence | Alternation] = []
    validators: list[NdcValidator] = []
    for part in parts:
        if isinstance(part, TrunkRule):
            if trunk_rule is not None:
                raise MalformedRuleDefinitionError(
                    f"Country {country_code} declares more than one trunk code", rule="country"
                )
            trunk_rule = part
        elif isinstance(part, (Sequence, Alternation)):
            sequences.append(part)
        elif isinstance(part, NdcValidator):
            validators.append(part)
        else:
            raise MalformedRuleDefinitionError(
                f"Country {country_code}: unsupported rule part {part!r}", rule="country"
            )
    if not sequences:
        raise MalformedRuleDefinitionError(
            f"Country {country_code} needs at least one matcher >> splitter sequence", rule="country"
        )
    return CountryRule(country_code, alternation(*sequences), trunk_rule, tuple(validators))


class NumberingDefinition:
    """Chainable writer of country rules into one registry."""

    def __init__(self, registry: CountryRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> CountryRegistry:
        return self._registry

    def country(self, country_code: str, *parts: RulePart) -> "NumberingDefinition":
        self._registry.register(country_code, country_rule(country_code, *parts))
        return self

    def reserved(self, country_code: str) -> "NumberingDefinition":
        self._registry.reserve(country_code)
        return self


def define(registry: CountryRegistry | None = None) -> NumberingDefinition:
    """Start writing rules into ``registry`` (a fresh one when omitted)."""
    return NumberingDefinition(registry if registry is not None else CountryRegistry())


__all__ = [
    "NumberingDefinition",
    "RulePart",
    "alternation",
    "country_rule",
    "define",
    "fixed",
    "invalid_ndcs",
    "match",
    "matched_split",
    "none",
    "one_of",
    "sequence",
    "split",
    "todo",
    "trunk",
]
