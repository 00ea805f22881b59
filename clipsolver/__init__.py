"""Clamped value solver built around pluggable value transforms.

A Solver-style ``Accumulator`` receives scalar observations, hands them to an
owned ``ValueTransform`` strategy (square or natural log) and returns the
derived value limited to a fixed ceiling. Transforms are selected through an
abstract factory so callers can swap strategies without touching the consumer.
"""

__all__ = [
    "config",
    "core",
    "errors",
    "runtime",
    "utils",
]
