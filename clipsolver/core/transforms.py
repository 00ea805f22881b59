from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Optional

from ..errors import DomainError
from .message import Observation, ObservationLike, as_observation


class TransformKind(str, Enum):
    SQUARE = "square"
    LOG = "log"


class ValueTransform(ABC):
    """Strategy that turns the latest observation into a derived scalar.

    A transform only remembers the last observation handed to it through
    :meth:`update`; :meth:`derive` is a pure function of that state. Before
    the first update the remembered observation is ``Observation()`` (0.0).
    """

    kind: ClassVar[Optional[TransformKind]] = None
    label: ClassVar[str] = ""

    def __init__(self) -> None:
        self._current: Observation = Observation()
        self._owner: Optional[object] = None

    @property
    def current(self) -> Observation:
        return self._current

    def update(self, observation: ObservationLike) -> None:
        self._current = as_observation(observation)

    @abstractmethod
    def derive(self) -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(current={self._current.value!r})"


class SquareTransform(ValueTransform):
    kind = TransformKind.SQUARE
    label = "x^2"

    def derive(self) -> float:
        v = self._current.value
        return v * v


class LogTransform(ValueTransform):
    """Natural logarithm of the observation.

    Non-positive (and NaN) observations raise :class:`DomainError` instead of
    leaking ``-inf``/``nan`` into the accumulator.
    """

    kind = TransformKind.LOG
    label = "ln(x)"

    def derive(self) -> float:
        v = self._current.value
        if not v > 0.0:
            raise DomainError("ln", v)
        return math.log(v)
