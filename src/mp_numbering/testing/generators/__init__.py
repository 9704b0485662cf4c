"""Testing generators – Hypothesis strategies."""
from mp_numbering.testing.generators.strategies import (
    digit_strings,
    group_size_lists,
    group_sizes,
    ndc_candidates,
)

__all__ = ["digit_strings", "group_size_lists", "group_sizes", "ndc_candidates"]
