"""Local splitters – divide the digits after the NDC into subscriber groups.

* :class:`FixedSplitter` – groups of declared sizes, in order.
* :class:`RegexSplitter` – the first pattern matching the remainder picks the
  sizes; otherwise the fallback sizes; otherwise no rule (``None``).

Splitting never drops or reorders digits: ``"".join(groups) == remainder``.
"""

from __future__ import annotations

import abc
import dataclasses
import re
from typing import Iterable, Mapping, Sequence, Union

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.patterns import PatternLike, compile_pattern

SizeSpec = Union[int, tuple[int, int], range, "GroupSize"]


@dataclasses.dataclass(frozen=True, slots=True)
class GroupSize:
    """Inclusive size bounds for one group; ``GroupSize(3, 3)`` is exactly three."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        for bound in (self.minimum, self.maximum):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise MalformedRuleDefinitionError(f"Group size bound {bound!r} is not an int", rule="split")
        if not 1 <= self.minimum <= self.maximum:
            raise MalformedRuleDefinitionError(
                f"Group size range {self.minimum}..{self.maximum} is empty or non-positive", rule="split"
            )

    @classmethod
    def parse(cls, spec: SizeSpec) -> "GroupSize":
        """Accept ``3``, ``(3, 4)``, ``range(3, 5)`` or a ``GroupSize``."""
        if isinstance(spec, GroupSize):
            return spec
        if isinstance(spec, bool):
            raise MalformedRuleDefinitionError(f"Group size {spec!r} is not an int", rule="split")
        if isinstance(spec, int):
            return cls(spec, spec)
        if isinstance(spec, range):
            if spec.step != 1 or len(spec) == 0:
                raise MalformedRuleDefinitionError(f"Group size {spec!r} must be a contiguous range", rule="split")
            return cls(spec.start, spec.stop - 1)
        if isinstance(spec, tuple) and len(spec) == 2:
            return cls(spec[0], spec[1])
        raise MalformedRuleDefinitionError(f"Unsupported group size {spec!r}", rule="split")


def parse_sizes(sizes: Iterable[SizeSpec], *, rule: str = "split") -> tuple[GroupSize, ...]:
    parsed = tuple(GroupSize.parse(size) for size in sizes)
    if not parsed:
        raise MalformedRuleDefinitionError("At least one group size is required", rule=rule)
    return parsed


def split_by_sizes(digits: str, sizes: Sequence[GroupSize]) -> tuple[str, ...]:
    """Cut ``digits`` into consecutive groups.

    Each group takes as many digits as its maximum allows. When fewer digits
    remain than a group's minimum, that group takes what is left and becomes
    the last one. Digits left over once every size is used form one extra
    trailing group.
    """
    groups: list[str] = []
    rest = digits
    for size in sizes:
        if not rest:
            break
        take = min(len(rest), size.maximum)
        groups.append(rest[:take])
        rest = rest[take:]
    if rest:
        groups.append(rest)
    return tuple(groups)


class LocalSplitter(abc.ABC):
    """Abstract base for local splitters."""

    @abc.abstractmethod
    def split(self, digits: str) -> tuple[str, ...] | None:
        """Return the groups, or ``None`` when no split rule applies."""


@dataclasses.dataclass(frozen=True)
class FixedSplitter(LocalSplitter):
    """Splits by a fixed list of group sizes."""

    sizes: tuple[GroupSize, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "sizes", parse_sizes(self.sizes))

    @classmethod
    def of(cls, *sizes: SizeSpec) -> "FixedSplitter":
        return cls(tuple(sizes))  # type: ignore[arg-type]

    def split(self, digits: str) -> tuple[str, ...]:
        return split_by_sizes(digits, self.sizes)


@dataclasses.dataclass(frozen=True)
class RegexSplitter(LocalSplitter):
    """Chooses group sizes by the first pattern that matches the remainder.

    Patterns are searched (``re.search``) so authors anchor them with ``^``
    when they mean "starts with".
    """

    rules: tuple[tuple[str, tuple[GroupSize, ...]], ...]
    fallback: tuple[GroupSize, ...] | None = None
    _compiled: tuple[tuple[re.Pattern[str], tuple[GroupSize, ...]], ...] = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        compiled = []
        for pattern, sizes in self.rules:
            regex = compile_pattern(pattern, rule="matched_split")
            compiled.append((regex, parse_sizes(sizes, rule="matched_split")))
        if not compiled and self.fallback is None:
            raise MalformedRuleDefinitionError(
                "matched_split needs at least one pattern or a fallback", rule="matched_split"
            )
        object.__setattr__(self, "_compiled", tuple(compiled))
        object.__setattr__(self, "rules", tuple((regex.pattern, sizes) for regex, sizes in compiled))
        if self.fallback is not None:
            object.__setattr__(self, "fallback", parse_sizes(self.fallback, rule="matched_split"))

    @classmethod
    def of(
        cls,
        mapping: Mapping[PatternLike, Iterable[SizeSpec]] | Iterable[tuple[PatternLike, Iterable[SizeSpec]]],
        fallback: Iterable[SizeSpec] | None = None,
    ) -> "RegexSplitter":
        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping
        return cls(
            tuple((pattern, tuple(sizes)) for pattern, sizes in pairs),  # type: ignore[misc]
            tuple(fallback) if fallback is not None else None,  # type: ignore[arg-type]
        )

    def sizes_for(self, digits: str) -> tuple[GroupSize, ...] | None:
        for regex, sizes in self._compiled:
            if regex.search(digits):
                return sizes
        return self.fallback

    def split(self, digits: str) -> tuple[str, ...] | None:
        sizes = self.sizes_for(digits)
        if sizes is None:
            return None
        return split_by_sizes(digits, sizes)


__all__ = [
    "FixedSplitter",
    "GroupSize",
    "LocalSplitter",
    "RegexSplitter",
    "SizeSpec",
    "parse_sizes",
    "split_by_sizes",
]
