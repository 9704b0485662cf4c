"""Unit tests for Sequence / Alternation / CountryRule."""

from __future__ import annotations

import pytest

from mp_numbering.kernel.errors import (
    MalformedRuleDefinitionError,
    NoMatchingRuleError,
    NoSplitRuleError,
)
from mp_numbering.kernel.types import Err
from mp_numbering.numbering.matchers import FixedMatcher, NoneMatcher, RegexMatcher, VariableMatcher
from mp_numbering.numbering.rules import (
    Alternation,
    CountryRule,
    Sequence,
    alternation,
    sequence,
)
from mp_numbering.numbering.splitters import FixedSplitter, RegexSplitter
from mp_numbering.numbering.trunk import TrunkRule
from mp_numbering.numbering.validators import NdcValidator


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestSequence:
    def test_requires_matcher_and_splitter(self) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            Sequence(FixedSplitter.of(2), FixedSplitter.of(2))  # type: ignore[arg-type]
        with pytest.raises(MalformedRuleDefinitionError):
            Sequence(FixedMatcher(1), FixedMatcher(1))  # type: ignore[arg-type]

    def test_function_form(self) -> None:
        assert sequence(NoneMatcher(), FixedSplitter.of(3)) == NoneMatcher() >> FixedSplitter.of(3)


class TestAlternationConstruction:
    def test_or_chains_in_order(self) -> None:
        a = FixedMatcher(1) >> FixedSplitter.of(2)
        b = FixedMatcher(2) >> FixedSplitter.of(2)
        c = FixedMatcher(3) >> FixedSplitter.of(2)
        alt = a | b | c
        assert isinstance(alt, Alternation)
        assert list(alt) == [a, b, c]
        assert len(alt) == 3

    def test_alternation_flattens_nested(self) -> None:
        a = FixedMatcher(1) >> FixedSplitter.of(2)
        b = FixedMatcher(2) >> FixedSplitter.of(2)
        c = NoneMatcher() >> FixedSplitter.of(2)
        assert alternation(a, alternation(b, c)).sequences == (a, b, c)
        assert alternation([a, b]).sequences == (a, b)

    def test_empty_alternation_is_malformed(self) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            alternation()

    def test_non_sequence_member_is_malformed(self) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            Alternation((FixedMatcher(1),))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# apply()
# ---------------------------------------------------------------------------


class TestApply:
    def test_first_accepting_alternative_is_used(self) -> None:
        alt = (
            VariableMatcher(("20",)) >> FixedSplitter.of(4, 4)
            | FixedMatcher(3) >> FixedSplitter.of(3, 3)
        )
        branch = alt.apply("2012345678").unwrap()
        assert branch.match.ndc == "20"
        assert branch.groups == ("1234", "5678")

    def test_falls_through_rejecting_matchers(self) -> None:
        alt = (
            VariableMatcher(("20",)) >> FixedSplitter.of(4, 4)
            | FixedMatcher(3) >> FixedSplitter.of(3, 3)
        )
        branch = alt.apply("113456789").unwrap()
        assert branch.match.ndc == "113"
        assert branch.groups == ("456", "789")

    def test_nothing_matches(self) -> None:
        alt = alternation(RegexMatcher(r"^(9\d)\d+$") >> FixedSplitter.of(3))
        result = alt.apply("123456", country_code="99")
        assert result.is_err()
        assert isinstance(result.error, NoMatchingRuleError)
        assert result.error.country_code == "99"
        assert result.error.digits == "123456"

    def test_committed_branch_without_split_rule_does_not_fall_through(self) -> None:
        alt = (
            FixedMatcher(1) >> RegexSplitter.of({r"^9": [3]})
            | NoneMatcher() >> FixedSplitter.of(3)
        )
        result = alt.apply("51234")
        assert isinstance(result, Err)
        assert isinstance(result.error, NoSplitRuleError)
        assert result.error.ndc == "5"
        assert result.error.remainder == "1234"

    def test_result_is_lossless(self) -> None:
        alt = RegexMatcher(r"^(0\d{2})\d+$") >> FixedSplitter.of(2, 2, 2, 2)
        branch = Alternation((alt,)).apply("0123456789").unwrap()
        assert branch.match.ndc + "".join(branch.groups) == "0123456789"


# ---------------------------------------------------------------------------
# CountryRule
# ---------------------------------------------------------------------------


class TestCountryRule:
    def test_bare_sequence_is_wrapped(self) -> None:
        seq = FixedMatcher(1) >> FixedSplitter.of(2, 2, 2, 2)
        rule = CountryRule("33", seq)  # type: ignore[arg-type]
        assert rule.alternation == Alternation((seq,))

    @pytest.mark.parametrize("code", ["", "+33", "3a", 33])
    def test_bad_country_code(self, code: object) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            CountryRule(code, alternation(NoneMatcher() >> FixedSplitter.of(3)))  # type: ignore[arg-type]

    def test_bad_parts(self) -> None:
        alt = alternation(NoneMatcher() >> FixedSplitter.of(3))
        with pytest.raises(MalformedRuleDefinitionError):
            CountryRule("45", FixedMatcher(1))  # type: ignore[arg-type]
        with pytest.raises(MalformedRuleDefinitionError):
            CountryRule("45", alt, trunk="0")  # type: ignore[arg-type]
        with pytest.raises(MalformedRuleDefinitionError):
            CountryRule("45", alt, validators=("911",))  # type: ignore[arg-type]

    def test_rejection_first_validator_wins(self) -> None:
        rule = CountryRule(
            "1",
            alternation(FixedMatcher(3) >> FixedSplitter.of(3, 4)),
            trunk=TrunkRule("1%s"),
            validators=(NdcValidator.of("911"), NdcValidator.of("9\\d\\d")),
        )
        assert rule.rejection("911") == "911"
        assert rule.rejection("212") is None
