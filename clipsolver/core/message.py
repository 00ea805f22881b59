from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union


def _to_float(value: numbers.Real) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError(f"Observation value {value!r} is out of float range") from exc


@dataclass(frozen=True)
class Observation:
    """Scalar payload pushed into an accumulator.

    Any real number is stored as a plain float; integers too large for a
    float raise ``ValueError``.
    """

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_float(self.value))


ObservationLike = Union[Observation, numbers.Real]


def as_observation(data: ObservationLike) -> Observation:
    """Return ``data`` as an Observation, wrapping bare real numbers."""
    if isinstance(data, Observation):
        return data
    if isinstance(data, bool) or not isinstance(data, numbers.Real):
        raise TypeError(f"Expected an Observation or a real number, got {type(data).__name__}")
    return Observation(value=data)
