"""Kernel value types – public re-export surface.

Modules:
  result.py – Ok, Err, Result
  option.py – Some, Nothing, Option
"""

from mp_numbering.kernel.types.option import Nothing, Option, Some
from mp_numbering.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Nothing", "Ok", "Option", "Result", "Some"]
