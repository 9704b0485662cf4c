"""NDC validators – exclusion lists attached to a country rule."""

from __future__ import annotations

import dataclasses
import re
from typing import Iterable

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.patterns import PatternLike, compile_pattern


@dataclasses.dataclass(frozen=True)
class NdcValidator:
    """Marks NDCs as invalid.

    A string entry rejects exactly that NDC; a compiled regex rejects any NDC
    it finds a match in (``re.search``), so anchor it to mean the whole NDC::

        NdcValidator.of("911", re.compile(r"^[01]\\d\\d$"))
    """

    invalid: tuple[PatternLike, ...]

    def __post_init__(self) -> None:
        entries = tuple(self.invalid)
        if not entries:
            raise MalformedRuleDefinitionError("invalid_ndcs needs at least one entry", rule="invalid_ndcs")
        normalised: list[PatternLike] = []
        for entry in entries:
            if isinstance(entry, re.Pattern):
                normalised.append(compile_pattern(entry, rule="invalid_ndcs"))
            elif isinstance(entry, str):
                normalised.append(entry)
            else:
                raise MalformedRuleDefinitionError(
                    f"Invalid NDC entry {entry!r} is neither a string nor a regex", rule="invalid_ndcs"
                )
        object.__setattr__(self, "invalid", tuple(normalised))

    @classmethod
    def of(cls, *invalid: PatternLike | Iterable[PatternLike]) -> "NdcValidator":
        flat: list[PatternLike] = []
        for entry in invalid:
            if isinstance(entry, (str, re.Pattern)):
                flat.append(entry)
            else:
                flat.extend(entry)
        return cls(tuple(flat))

    def rejection(self, ndc: str) -> str | None:
        """Return the first entry that rejects ``ndc`` (as text), else ``None``."""
        for entry in self.invalid:
            if isinstance(entry, str):
                if entry == ndc:
                    return entry
            elif entry.search(ndc):
                return entry.pattern
        return None

    def is_valid(self, ndc: str) -> bool:
        return self.rejection(ndc) is None


__all__ = ["NdcValidator"]
