"""Unit tests for the Hypothesis strategies."""

from __future__ import annotations

from hypothesis import given

from mp_numbering.numbering.matchers import VariableMatcher
from mp_numbering.numbering.splitters import FixedSplitter, GroupSize
from mp_numbering.testing.generators import digit_strings, group_size_lists, group_sizes, ndc_candidates


class TestStrategies:
    @given(digit_strings(min_size=2, max_size=4))
    def test_digit_strings(self, value: str) -> None:
        assert 2 <= len(value) <= 4
        assert value.isascii() and value.isdigit()

    @given(group_sizes(max_bound=4))
    def test_group_sizes_are_valid(self, size: GroupSize) -> None:
        assert 1 <= size.minimum <= size.maximum <= 4

    @given(group_size_lists(max_size=3))
    def test_size_lists_build_splitters(self, sizes: list[GroupSize]) -> None:
        assert 1 <= len(FixedSplitter(tuple(sizes)).sizes) <= 3

    @given(ndc_candidates(max_length=3))
    def test_candidates_build_matchers(self, candidates: list[str]) -> None:
        assert len(set(candidates)) == len(candidates)
        VariableMatcher(tuple(candidates))
