from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, TYPE_CHECKING

from ..errors import TransformOwnershipError
from .factory import TransformFactory, make_transform
from .message import Observation, ObservationLike, as_observation
from .transforms import ValueTransform

if TYPE_CHECKING:
    from ..config import SolverConfig


logger = logging.getLogger(__name__)


class Accumulator:
    """Holds the latest observation and clamps its transform's output.

    The accumulator takes exclusive ownership of ``transform``: handing the
    same instance to a second accumulator raises
    :class:`~clipsolver.errors.TransformOwnershipError`.
    """

    def __init__(self, ceiling: float, transform: ValueTransform) -> None:
        if transform is None:
            raise ValueError("Accumulator requires a value transform")
        self._ceiling: float = float(ceiling)
        owner = getattr(transform, "_owner", None)
        if owner is not None and owner is not self:
            raise TransformOwnershipError(
                f"{type(transform).__name__} is already owned by another accumulator"
            )
        # claim last so a failed construction leaves the transform free
        transform._owner = self
        self._transform: ValueTransform = transform
        self._latest: Observation = Observation()
        logger.debug(
            "Created accumulator",
            extra={"ceiling": self._ceiling, "transform": type(transform).__name__},
        )

    @property
    def ceiling(self) -> float:
        return self._ceiling

    @property
    def latest(self) -> Observation:
        return self._latest

    @property
    def transform(self) -> ValueTransform:
        return self._transform

    def update(self, observation: ObservationLike) -> None:
        """Store ``observation`` and forward it to the owned transform.

        Called by whichever component produces new data; it is a plain
        synchronous call, not a registered callback.
        """
        self._latest = as_observation(observation)
        self._transform.update(self._latest)

    def solve(self) -> float:
        # limit the derived value to the ceiling
        return min(self._ceiling, self._transform.derive())


def build_accumulator(
    config: "SolverConfig", factory: Optional[TransformFactory] = None
) -> Accumulator:
    """Wire the configured transform into a new accumulator."""
    transform = make_transform(config.variant, factory)
    return Accumulator(config.ceiling, transform)


def solve_series(
    accumulator: Accumulator, values: Iterable[ObservationLike]
) -> List[Tuple[float, float]]:
    """Feed ``values`` one at a time and collect ``(input, output)`` pairs."""
    results: List[Tuple[float, float]] = []
    for v in values:
        accumulator.update(v)
        results.append((accumulator.latest.value, accumulator.solve()))
    return results
