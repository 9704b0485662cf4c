"""Built-in catalogue of country rule sets.

The catalogue covers a representative set of plans (fixed, variable, regex
and NDC-less countries; literal, templated and non-normalized trunk codes).
Rules describe structure only; they are not plausibility checks.
"""

from __future__ import annotations

import re

from mp_numbering.numbering.dsl import (
    define,
    fixed,
    invalid_ndcs,
    match,
    matched_split,
    none,
    one_of,
    split,
    todo,
    trunk,
)
from mp_numbering.numbering.registry import CountryRegistry
from mp_numbering.observability.logging import get_logger

log = get_logger(__name__)

_NL_AREA_CODES = (
    "10", "13", "15", "20", "23", "24", "26", "30", "33", "35", "36", "38",
    "40", "43", "45", "46", "50", "53", "55", "58",
    "70", "71", "72", "73", "74", "75", "76", "77", "78", "79",
)

RESERVED = ("289", "830", "990")


def load_catalogue(registry: CountryRegistry | None = None) -> CountryRegistry:
    """Register the built-in rules into ``registry`` (or a new one) and return it."""
    definition = define(registry)
    (
        definition
        # North American Numbering Plan
        .country(
            "1",
            trunk("1%s", format=False),
            fixed(3, zero=False) >> split(3, 4),
            invalid_ndcs(re.compile(r"^[01]\d\d$"), re.compile(r"^\d11$")),
        )
        # Russia
        .country("7", trunk("8%s"), fixed(3, zero=False) >> split(3, 2, 2))
        # South Africa
        .country("27", trunk("0"), fixed(2) >> split(3, 4))
        # Greece
        .country("30", todo())
        # Netherlands
        .country(
            "31",
            trunk("0"),
            one_of(_NL_AREA_CODES) >> split(3, 4)
            | match(r"^(6)\d{8}$") >> split(2, 2, 2, 2)
            | fixed(3) >> split(3, 3),
        )
        # France
        .country("33", trunk("0"), fixed(1) >> split(2, 2, 2, 2))
        # Hungary
        .country(
            "36",
            trunk("06%s", normalize=False),
            one_of("1") >> split(3, 4)
            | one_of("20", "30", "31", "50", "70") >> split(3, 4)
            | fixed(2) >> split(3, 3),
        )
        # Switzerland
        .country(
            "41",
            trunk("0"),
            match(r"^(8(?:00|4[0248]))\d+$") >> split(3, 3)
            | fixed(2) >> split(3, 2, 2),
        )
        # United Kingdom
        .country(
            "44",
            trunk("0"),
            one_of("20", "23", "24", "28", "29") >> split(4, 4)
            | match(r"^(7\d{3})\d{6}$") >> split(6)
            | fixed(4) >> split((5, 6)),
        )
        # Denmark
        .country("45", none() >> split(2, 2, 2, 2))
        # Norway
        .country(
            "47",
            none() >> matched_split(
                {r"^[1].*$": [3], r"^[489].*$": [3, 2, 3]},
                fallback=[2, 2, 2, 2],
            ),
        )
        # Germany
        .country(
            "49",
            trunk("0"),
            one_of("30", "40", "69", "89") >> split(4, (3, 4))
            | match(r"^(1[5-7]\d)\d+$") >> split(3, (4, 5))
            | fixed(4) >> split((3, 4), (2, 4)),
        )
        # Peru
        .country(
            "51",
            trunk("0"),
            one_of("103", "105") >> split(3, 3)
            | one_of("1") >> split(3, 4)
            | fixed(2) >> split(3, 3),
        )
        # Mexico
        .country(
            "52",
            match(r"^(0\d{2})\d+$") >> split(2, 2, 2, 2)
            | match(r"^(33|55|81)\d+$") >> split(2, 2, 2, 2)
            | match(r"^(\d{3})\d+$") >> split(3, 2, 2),
        )
        # Faroe Islands
        .country("298", none() >> split(3, 3))
        # Iceland
        .country("354", none() >> split(3, 4))
    )
    for country_code in RESERVED:
        definition.reserved(country_code)

    log.info("catalogue.loaded", countries=len(definition.registry), reserved=len(RESERVED))
    return definition.registry


__all__ = ["RESERVED", "load_catalogue"]
