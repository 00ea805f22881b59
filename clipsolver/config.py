from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


DEFAULT_CONFIG_FILE = Path("clipsolver.yaml")


class SolverConfig(BaseModel):
    variant: str = Field(
        "square",
        description="Transform kind key (see clipsolver.core.TransformKind)",
    )
    ceiling: float = Field(42.0, description="Upper bound applied to every solved value")


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"
    CLIPSOLVER_CONFIG: Optional[Path] = None


class AppConfig(BaseModel):
    env: EnvSettings
    solver: SolverConfig = Field(default_factory=SolverConfig)

    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, dict):
            return EnvSettings(**v)
        return v

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        if config_path is None:
            config_path = env.CLIPSOLVER_CONFIG
        if config_path is None and DEFAULT_CONFIG_FILE.exists():
            config_path = DEFAULT_CONFIG_FILE

        solver = SolverConfig()
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            with open(path, "r", encoding="utf-8") as fh:
                try:
                    raw = yaml.safe_load(fh) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid {path.name}: {exc}") from exc
            if not isinstance(raw, dict):
                raise ConfigError(f"Invalid {path.name}: expected a mapping at top level")
            try:
                solver = SolverConfig(**(raw.get("solver") or {}))
            except (ValidationError, TypeError) as ve:
                raise ConfigError(f"Invalid {path.name}: {ve}") from ve

        return AppConfig(env=env, solver=solver)


def load_config() -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load()
