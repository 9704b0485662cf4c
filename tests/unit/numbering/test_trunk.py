"""Unit tests for trunk code handling."""

from __future__ import annotations

import pytest

from mp_numbering.kernel.errors import MalformedRuleDefinitionError
from mp_numbering.numbering.trunk import TrunkRule


class TestTrunkDefinition:
    def test_template_is_stripped_for_canonical(self) -> None:
        assert TrunkRule("8%s").canonical == "8"
        assert TrunkRule("0").canonical == "0"

    @pytest.mark.parametrize("code", ["", "%s", "0%s1", "%s0", "0a", "０"])
    def test_invalid_codes(self, code: str) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            TrunkRule(code)

    def test_invalid_variant(self) -> None:
        with pytest.raises(MalformedRuleDefinitionError):
            TrunkRule("0", variants=("0x",))

    def test_single_string_variant_is_wrapped(self) -> None:
        assert TrunkRule("06%s", variants="6").variants == ("6",)


class TestStrip:
    def test_strips_present_trunk(self) -> None:
        assert TrunkRule("0").strip("0612345678") == ("0", "612345678")

    def test_absent_trunk_leaves_digits(self) -> None:
        assert TrunkRule("0").strip("612345678") == (None, "612345678")

    def test_template_trunk_strips_literal(self) -> None:
        assert TrunkRule("8%s").strip("84951234567") == ("8", "4951234567")

    def test_never_strips_everything(self) -> None:
        assert TrunkRule("0").strip("0") == (None, "0")
        assert TrunkRule("06").strip("06") == (None, "06")

    def test_longest_spelling_first(self) -> None:
        rule = TrunkRule("0", variants=("06",))
        assert rule.strip("06123") == ("06", "123")
        assert rule.strip("05123") == ("0", "5123")

    def test_spells_canonical_and_variants(self) -> None:
        rule = TrunkRule("06%s", variants=("6",))
        assert rule.spells("06")
        assert rule.spells("6")
        assert not rule.spells("06 ")
        assert not rule.spells("0")


class TestReportedText:
    def test_normalize_reports_canonical(self) -> None:
        rule = TrunkRule("06", variants=("6",))
        assert rule.text_for("6") == "06"

    def test_observed_spelling_kept_without_normalize(self) -> None:
        rule = TrunkRule("06%s", normalize=False, variants=("6",))
        assert rule.text_for("6") == "6"

    def test_no_trunk_observed(self) -> None:
        assert TrunkRule("0").text_for(None) is None


class TestRender:
    def test_literal_code(self) -> None:
        assert TrunkRule("0").render() == "0"

    def test_template_appends_separator(self) -> None:
        assert TrunkRule("8%s").render() == "8 "
        assert TrunkRule("06%s").render("-") == "06-"

    def test_observed_text_replaces_canonical(self) -> None:
        assert TrunkRule("06%s", normalize=False, variants=("6",)).render(observed="6") == "6 "

    def test_format_false_renders_nothing(self) -> None:
        assert TrunkRule("1%s", format=False).render() == ""
