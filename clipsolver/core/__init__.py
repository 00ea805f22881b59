"""Core primitives: observations, transforms, factory and accumulator."""

from .accumulator import Accumulator, build_accumulator, solve_series
from .factory import (
    DefaultTransformFactory,
    TransformFactory,
    TransformSpec,
    build_registry,
    make_transform,
)
from .message import Observation, as_observation
from .transforms import LogTransform, SquareTransform, TransformKind, ValueTransform

__all__ = [
    "Accumulator",
    "DefaultTransformFactory",
    "LogTransform",
    "Observation",
    "SquareTransform",
    "TransformFactory",
    "TransformKind",
    "TransformSpec",
    "ValueTransform",
    "as_observation",
    "build_accumulator",
    "build_registry",
    "make_transform",
    "solve_series",
]
