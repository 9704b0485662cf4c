"""NDC matchers – extract a national destination code from the front of a number.

The set of matchers is closed:

* :class:`FixedMatcher`    – NDC of a fixed length.
* :class:`NoneMatcher`     – no NDC at all; always matches.
* :class:`VariableMatcher` – NDC is one of an explicit list of candidates.
* :class:`RegexMatcher`    – NDC is the single capture group of a pattern.

A matcher returns an :class:`NdcMatch` or ``None``; it never raises for
input it does not accept. Structural problems are reported by the
constructors as :class:`MalformedRuleDefinitionError`.

Example::

    france = FixedMatcher(1) >> FixedSplitter.of(2, 2, 2, 2)
"""

from __future__ import annotations

import abc
import dataclasses
import re
from typing import TYPE_CHECKING, Iterable

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.patterns import PatternLike, compile_pattern, is_digit_string

if TYPE_CHECKING:
    from mp_numbering.numbering.rules import Sequence
    from mp_numbering.numbering.splitters import LocalSplitter


@dataclasses.dataclass(frozen=True, slots=True)
class NdcMatch:
    """A successful match: the NDC, the digits after it and the zero flag."""

    ndc: str
    remainder: str
    zero: bool = False


class NationalMatcher(abc.ABC):
    """Abstract base for NDC matchers – provides the ``>>`` combinator."""

    zero: bool = False

    @abc.abstractmethod
    def match(self, digits: str) -> NdcMatch | None: ...

    def then(self, splitter: "LocalSplitter") -> "Sequence":
        from mp_numbering.numbering.rules import Sequence

        return Sequence(self, splitter)

    def __rshift__(self, splitter: "LocalSplitter") -> "Sequence":
        return self.then(splitter)


@dataclasses.dataclass(frozen=True)
class FixedMatcher(NationalMatcher):
    """NDC is the first ``length`` digits.

    ``zero`` is formatting metadata only: a national rendering prefixes the
    NDC with ``0`` when the country has no trunk code of its own.
    """

    length: int
    zero: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 1:
            raise MalformedRuleDefinitionError(
                f"Fixed NDC length must be a positive int, got {self.length!r}", rule="fixed"
            )

    def match(self, digits: str) -> NdcMatch | None:
        if len(digits) < self.length:
            return None
        return NdcMatch(digits[: self.length], digits[self.length :], self.zero)


@dataclasses.dataclass(frozen=True)
class NoneMatcher(NationalMatcher):
    """Countries without NDCs: empty NDC, the whole input is the remainder."""

    def match(self, digits: str) -> NdcMatch:
        return NdcMatch("", digits, False)


@dataclasses.dataclass(frozen=True)
class VariableMatcher(NationalMatcher):
    """NDC is one of ``candidates``; longer candidates are tried first.

    ``max_length`` caps the candidate lengths considered. When unset, the
    longest candidate bounds the search.
    """

    candidates: tuple[str, ...]
    max_length: int | None = None
    zero: bool = True
    _by_length: tuple[tuple[int, frozenset[str]], ...] = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        candidates = tuple(self.candidates)
        if not candidates:
            raise MalformedRuleDefinitionError("one_of needs at least one NDC", rule="one_of")
        for candidate in candidates:
            if not isinstance(candidate, str) or not is_digit_string(candidate):
                raise MalformedRuleDefinitionError(
                    f"NDC candidate {candidate!r} is not a digit string", rule="one_of"
                )
        if self.max_length is not None and (
            isinstance(self.max_length, bool) or not isinstance(self.max_length, int) or self.max_length < 1
        ):
            raise MalformedRuleDefinitionError(
                f"max_length must be a positive int, got {self.max_length!r}", rule="one_of"
            )

        limit = self.max_length or max(map(len, candidates))
        buckets: dict[int, set[str]] = {}
        for candidate in candidates:
            if len(candidate) <= limit:
                buckets.setdefault(len(candidate), set()).add(candidate)
        object.__setattr__(self, "candidates", candidates)
        object.__setattr__(
            self,
            "_by_length",
            tuple((size, frozenset(buckets[size])) for size in sorted(buckets, reverse=True)),
        )

    def match(self, digits: str) -> NdcMatch | None:
        for size, ndcs in self._by_length:
            if size <= len(digits) and digits[:size] in ndcs:
                return NdcMatch(digits[:size], digits[size:], self.zero)
        return None


@dataclasses.dataclass(frozen=True)
class RegexMatcher(NationalMatcher):
    """NDC is the single capture group of ``pattern`` matched against the whole input.

    ``on_fail_take`` turns a miss into a match whose NDC is the first
    ``on_fail_take`` digits (``0`` yields an empty NDC). Without it a miss is
    a failure like any other matcher's.
    """

    pattern: PatternLike
    on_fail_take: int | None = None
    zero: bool = True
    _regex: re.Pattern[str] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regex = compile_pattern(self.pattern, rule="match")
        if regex.groups != 1:
            raise MalformedRuleDefinitionError(
                f"Regexp /{regex.pattern}/ needs exactly one group that defines which "
                f"digits belong to the NDC (found {regex.groups})",
                rule="match",
            )
        if self.on_fail_take is not None and (
            isinstance(self.on_fail_take, bool) or not isinstance(self.on_fail_take, int) or self.on_fail_take < 0
        ):
            raise MalformedRuleDefinitionError(
                f"on_fail_take must be a non-negative int, got {self.on_fail_take!r}", rule="match"
            )
        object.__setattr__(self, "pattern", regex.pattern)
        object.__setattr__(self, "_regex", regex)

    def match(self, digits: str) -> NdcMatch | None:
        found = self._regex.fullmatch(digits)
        if found is not None:
            start, end = found.span(1)
            if start < 0:
                return NdcMatch("", digits, self.zero)
            return NdcMatch(digits[start:end], digits[:start] + digits[end:], self.zero)
        if self.on_fail_take is not None:
            take = self.on_fail_take
            return NdcMatch(digits[:take], digits[take:], self.zero)
        return None


def candidates_from(ndcs: Iterable[str] | str) -> tuple[str, ...]:
    """Accept ``one_of('1', '2')`` and ``one_of(['1', '2'])`` alike."""
    if isinstance(ndcs, str):
        return (ndcs,)
    return tuple(ndcs)


__all__ = [
    "FixedMatcher",
    "NationalMatcher",
    "NdcMatch",
    "NoneMatcher",
    "RegexMatcher",
    "VariableMatcher",
    "candidates_from",
]
