"""Numbering – rule primitives, composition, decomposition and formatting.

Leaves first:

  matchers.py   – FixedMatcher, NoneMatcher, VariableMatcher, RegexMatcher
  splitters.py  – FixedSplitter, RegexSplitter, GroupSize
  trunk.py      – TrunkRule
  validators.py – NdcValidator
  rules.py      – Sequence, Alternation, CountryRule
  decompose.py  – Decomposition, decompose()
  registry.py   – CountryRegistry
  dsl.py        – authoring helpers (fixed, split, trunk, define, ...)
  formatting.py – international / national / local rendering
  service.py    – NumberingService
  countries.py  – built-in catalogue
"""

from mp_numbering.numbering.countries import load_catalogue
from mp_numbering.numbering.decompose import Decomposition, decompose
from mp_numbering.numbering.formatting import render
from mp_numbering.numbering.matchers import (
    FixedMatcher,
    NationalMatcher,
    NdcMatch,
    NoneMatcher,
    RegexMatcher,
    VariableMatcher,
)
from mp_numbering.numbering.phone import PhoneNumber
from mp_numbering.numbering.registry import CountryRegistry
from mp_numbering.numbering.rules import Alternation, CountryRule, Sequence, alternation, sequence
from mp_numbering.numbering.service import NumberingService
from mp_numbering.numbering.splitters import FixedSplitter, GroupSize, LocalSplitter, RegexSplitter
from mp_numbering.numbering.trunk import TrunkRule
from mp_numbering.numbering.validators import NdcValidator

__all__ = [
    "Alternation",
    "CountryRegistry",
    "CountryRule",
    "Decomposition",
    "FixedMatcher",
    "FixedSplitter",
    "GroupSize",
    "LocalSplitter",
    "NationalMatcher",
    "NdcMatch",
    "NdcValidator",
    "NoneMatcher",
    "NumberingService",
    "PhoneNumber",
    "RegexMatcher",
    "RegexSplitter",
    "Sequence",
    "TrunkRule",
    "VariableMatcher",
    "alternation",
    "decompose",
    "load_catalogue",
    "render",
    "sequence",
]
