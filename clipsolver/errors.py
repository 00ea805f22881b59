from __future__ import annotations

from typing import Any


class ClipSolverError(Exception):
    """Base class for all errors raised by clipsolver."""


class UnsupportedVariant(ClipSolverError, ValueError):
    """Raised when a transform kind outside the known set is requested."""

    def __init__(self, variant: Any) -> None:
        self.variant = variant
        super().__init__(f"Unknown value transform encountered: {variant!r}")


class DomainError(ClipSolverError, ValueError):
    """Raised when a transform cannot be evaluated for the stored observation."""

    def __init__(self, transform: str, value: float) -> None:
        self.transform = transform
        self.value = value
        super().__init__(f"{transform} is undefined for observation value {value!r}")


class TransformOwnershipError(ClipSolverError):
    """A transform may belong to a single accumulator only."""


class ConfigError(ClipSolverError):
    """Raised when a configuration file cannot be read or validated."""
