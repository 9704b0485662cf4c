"""Decomposition benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks/ --benchmark-sort=median

``bench_*.py`` modules are also collected by a plain ``pytest`` run; add
``--benchmark-disable`` to execute them once as functional tests.
"""
