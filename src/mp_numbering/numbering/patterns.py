"""Regex compilation shared by matchers, splitters and validators.

Patterns are compiled once per distinct source at definition time; a pattern
that does not compile is a :class:`MalformedRuleDefinitionError`, never a
decomposition-time failure.
"""

from __future__ import annotations

import functools
import re

from mp_numbering.kernel.errors import MalformedRuleDefinitionError

PatternLike = str | re.Pattern[str]


@functools.lru_cache(maxsize=1024)
def _compile(source: str, flags: int) -> re.Pattern[str]:
    return re.compile(source, flags)


def compile_pattern(pattern: PatternLike, *, rule: str) -> re.Pattern[str]:
    """Return a compiled pattern, memoized by ``(source, flags)``."""
    if isinstance(pattern, re.Pattern):
        source, flags = pattern.pattern, pattern.flags
    elif isinstance(pattern, str):
        source, flags = pattern, 0
    else:
        raise MalformedRuleDefinitionError(
            f"Expected a regex or string, got {type(pattern).__name__}", rule=rule
        )
    try:
        return _compile(source, flags)
    except re.error as exc:
        raise MalformedRuleDefinitionError(
            f"Pattern /{source}/ does not compile: {exc}", rule=rule, cause=exc
        ) from exc


def is_digit_string(value: str) -> bool:
    """ASCII digits only; ``str.isdigit`` also accepts other Unicode digits."""
    return bool(value) and value.isascii() and value.isdigit()


__all__ = ["PatternLike", "compile_pattern", "is_digit_string"]
