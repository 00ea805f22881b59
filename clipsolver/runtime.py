from __future__ import annotations

from typing import Optional

from .config import AppConfig, load_config
from .core.accumulator import Accumulator, build_accumulator
from .core.factory import TransformFactory
from .utils.logging import setup_logging


def configure(cfg: Optional[AppConfig] = None, factory: Optional[TransformFactory] = None) -> Accumulator:
    """Set up logging from ``cfg`` and return the configured accumulator.

    Loads configuration from the environment and YAML when ``cfg`` is omitted.
    """
    cfg = cfg if cfg is not None else load_config()
    setup_logging(cfg.env.LOG_LEVEL)
    return build_accumulator(cfg.solver, factory)
