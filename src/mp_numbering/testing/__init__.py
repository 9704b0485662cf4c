"""Testing utilities – property-based strategies for rule primitives.

Not imported by the runtime package; requires the ``test`` extra.
"""
