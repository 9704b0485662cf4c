"""
mp_numbering – national telephone number decomposition.

Import path convention::

    from mp_numbering.numbering.dsl import fixed, split, trunk, define
    from mp_numbering.numbering import CountryRegistry, decompose
    from mp_numbering.kernel.errors import NoMatchingRuleError
    from mp_numbering.bootstrap import create_service
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
