"""Unit tests for NDC matchers."""

from __future__ import annotations

import re

import pytest

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.matchers import (
    FixedMatcher,
    NdcMatch,
    NoneMatcher,
    RegexMatcher,
    VariableMatcher,
)
from mp_numbering.numbering.rules import Sequence
from mp_numbering.numbering.splitters import FixedSplitter


# ---------------------------------------------------------------------------
# FixedMatcher
# ---------------------------------------------------------------------------


class TestFixedMatcher:
    def test_takes_first_n_digits(self) -> None:
        assert FixedMatcher(2).match("301234") == NdcMatch("30", "1234", True)

    def test_exact_length_leaves_empty_remainder(self) -> None:
        assert FixedMatcher(3).match("212") == NdcMatch("212", "", True)

    def test_too_short_fails(self) -> None:
        assert FixedMatcher(3).match("21") is None

    def test_zero_flag_is_carried_not_applied(self) -> None:
        found = FixedMatcher(3, zero=False).match("2125551234")
        assert found == NdcMatch("212", "5551234", False)

    @pytest.mark.parametrize("length", [0, -1, 1.5, "2", True])
    def test_invalid_length_is_malformed(self, length: object) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            FixedMatcher(length)  # type: ignore[arg-type]

    def test_structurally_equal_matchers_are_equal(self) -> None:
        assert FixedMatcher(2) == FixedMatcher(2)
        assert hash(FixedMatcher(2)) == hash(FixedMatcher(2))
        assert FixedMatcher(2) != FixedMatcher(2, zero=False)

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            FixedMatcher(2).length = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# NoneMatcher
# ---------------------------------------------------------------------------


class TestNoneMatcher:
    def test_always_matches_with_empty_ndc(self) -> None:
        assert NoneMatcher().match("12345678") == NdcMatch("", "12345678", False)

    def test_single_digit(self) -> None:
        assert NoneMatcher().match("7") == NdcMatch("", "7", False)


# ---------------------------------------------------------------------------
# VariableMatcher
# ---------------------------------------------------------------------------


class TestVariableMatcher:
    def test_longest_candidate_wins(self) -> None:
        found = VariableMatcher(("1", "12")).match("123456")
        assert found is not None
        assert found.ndc == "12"
        assert found.remainder == "3456"

    def test_declaration_order_does_not_matter(self) -> None:
        found = VariableMatcher(("12", "1")).match("123456")
        assert found is not None and found.ndc == "12"

    def test_shorter_candidate_used_when_longer_absent(self) -> None:
        found = VariableMatcher(("1", "12")).match("134567")
        assert found == NdcMatch("1", "34567", True)

    def test_no_candidate_fails(self) -> None:
        assert VariableMatcher(("103", "105")).match("1041234") is None

    def test_candidate_longer_than_input_is_skipped(self) -> None:
        assert VariableMatcher(("1234",)).match("123") is None

    def test_max_length_caps_candidates(self) -> None:
        matcher = VariableMatcher(("1", "123"), max_length=2)
        assert matcher.match("123456") == NdcMatch("1", "23456", True)

    def test_max_length_excluding_all_candidates_never_matches(self) -> None:
        assert VariableMatcher(("123",), max_length=2).match("123456") is None

    def test_candidates_normalised_to_tuple(self) -> None:
        matcher = VariableMatcher(["20", "30"])  # type: ignore[arg-type]
        assert matcher.candidates == ("20", "30")

    @pytest.mark.parametrize("candidates", [(), ("",), ("1a",), (12,)])
    def test_bad_candidates_are_malformed(self, candidates: tuple) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            VariableMatcher(candidates)

    def test_bad_max_length_is_malformed(self) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            VariableMatcher(("1",), max_length=0)


# ---------------------------------------------------------------------------
# RegexMatcher
# ---------------------------------------------------------------------------


class TestRegexMatcher:
    def test_capture_group_is_ndc(self) -> None:
        found = RegexMatcher(r"^(0\d{2})\d+$").match("0123456789")
        assert found == NdcMatch("012", "3456789", True)

    def test_must_match_whole_input(self) -> None:
        assert RegexMatcher(r"(33|55|81)").match("551234") is None
        assert RegexMatcher(r"(33|55|81)\d+").match("551234") == NdcMatch("55", "1234", True)

    def test_no_match_fails(self) -> None:
        assert RegexMatcher(r"^(0\d{2})\d+$").match("1234567") is None

    def test_on_fail_take_takes_leading_digits(self) -> None:
        matcher = RegexMatcher(r"^(9\d)\d+$", on_fail_take=3)
        assert matcher.match("1234567") == NdcMatch("123", "4567", True)

    def test_on_fail_take_zero_gives_empty_ndc(self) -> None:
        matcher = RegexMatcher(r"^(9\d)\d+$", on_fail_take=0)
        assert matcher.match("1234567") == NdcMatch("", "1234567", True)

    def test_on_fail_take_unused_on_match(self) -> None:
        matcher = RegexMatcher(r"^(9\d)\d+$", on_fail_take=3)
        assert matcher.match("9912345") == NdcMatch("99", "12345", True)

    def test_group_inside_number_keeps_other_digits(self) -> None:
        found = RegexMatcher(r"^0(\d{2})\d+$").match("0451234")
        assert found == NdcMatch("45", "01234", True)

    def test_optional_group_not_taking_part(self) -> None:
        found = RegexMatcher(r"^(9)?\d+$").match("1234")
        assert found == NdcMatch("", "1234", True)

    def test_accepts_compiled_pattern(self) -> None:
        matcher = RegexMatcher(re.compile(r"^(1\d)\d+$"))
        assert matcher.match("15000") == NdcMatch("15", "000", True)

    @pytest.mark.parametrize("pattern", [r"^\d+$", r"^(\d)(\d)\d*$", r"^(\d+$"])
    def test_malformed_patterns_rejected_at_definition(self, pattern: str) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            RegexMatcher(pattern)

    def test_non_capturing_groups_do_not_count(self) -> None:
        found = RegexMatcher(r"^(8(?:00|4[0248]))\d+$").match("800123456")
        assert found is not None and found.ndc == "800"

    def test_negative_on_fail_take_is_malformed(self) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            RegexMatcher(r"^(1)\d+$", on_fail_take=-1)


# ---------------------------------------------------------------------------
# Combinator entry point
# ---------------------------------------------------------------------------


class TestThen:
    def test_rshift_builds_sequence(self) -> None:
        splitter = FixedSplitter.of(2, 2)
        seq = FixedMatcher(1) >> splitter
        assert isinstance(seq, Sequence)
        assert seq == Sequence(FixedMatcher(1), splitter)

    def test_then_is_named_form(self) -> None:
        splitter = FixedSplitter.of(3)
        assert NoneMatcher().then(splitter) == NoneMatcher() >> splitter
