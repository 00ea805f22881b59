from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from ..errors import UnsupportedVariant
from .transforms import LogTransform, SquareTransform, TransformKind, ValueTransform


logger = logging.getLogger(__name__)

TransformBuilder = Callable[[], ValueTransform]
KindLike = Union[TransformKind, str]


@dataclass(frozen=True)
class TransformSpec:
    key: TransformKind
    build: TransformBuilder
    label: str


def build_registry() -> Dict[TransformKind, TransformSpec]:
    return {
        TransformKind.SQUARE: TransformSpec(
            key=TransformKind.SQUARE, build=SquareTransform, label=SquareTransform.label
        ),
        TransformKind.LOG: TransformSpec(
            key=TransformKind.LOG, build=LogTransform, label=LogTransform.label
        ),
    }


def resolve_kind(kind: Any) -> TransformKind:
    """Map an enum member or its string key (any case) to a TransformKind."""
    if isinstance(kind, TransformKind):
        return kind
    if isinstance(kind, str):
        try:
            return TransformKind(kind.strip().lower())
        except ValueError:
            pass
    logger.warning("Rejected unsupported transform kind", extra={"variant": repr(kind)})
    raise UnsupportedVariant(kind)


class TransformFactory(ABC):
    """Abstract factory for value transforms.

    Consumers depend on this interface rather than on concrete transform
    classes, so a different set of strategies can be supplied in tests or
    experiments.
    """

    @abstractmethod
    def make(self, kind: KindLike) -> ValueTransform:
        ...


class DefaultTransformFactory(TransformFactory):
    """Factory backed by a registry of :class:`TransformSpec` entries."""

    def __init__(self, registry: Optional[Dict[TransformKind, TransformSpec]] = None) -> None:
        self._registry: Dict[TransformKind, TransformSpec] = (
            dict(registry) if registry is not None else build_registry()
        )

    def kinds(self) -> list[TransformKind]:
        return list(self._registry)

    def make(self, kind: KindLike) -> ValueTransform:
        key = resolve_kind(kind)
        spec = self._registry.get(key)
        if spec is None:
            logger.warning("Transform kind not registered", extra={"variant": key.value})
            raise UnsupportedVariant(kind)
        transform = spec.build()
        logger.debug("Built value transform", extra={"variant": key.value, "label": spec.label})
        return transform


def make_transform(kind: KindLike, factory: Optional[TransformFactory] = None) -> ValueTransform:
    """Create a fresh transform for ``kind`` using ``factory`` (default registry if omitted)."""
    return (factory or DefaultTransformFactory()).make(kind)
