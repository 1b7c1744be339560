from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_CONFIG_NAME = "eztest.yaml"


class RunConfig(BaseModel):
    """Options for ``eztest run``, usually read from eztest.yaml."""

    model_config = ConfigDict(extra="forbid")

    suites: list[str] = []
    output: str | None = None
    debug_log: str = ".eztest/debug.log"
    verbose: bool = False
    exit_code: Literal["capped", "count"] = "capped"

    @field_validator("output", "debug_log")
    @classmethod
    def expand_env(cls, v: str | None) -> str | None:
        """Expand ${VAR} and ${VAR:-default}; unset variables without a default are an error."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"cannot expand '{v}': {e}") from e

    @field_validator("suites")
    @classmethod
    def no_duplicate_suites(cls, v: list[str]) -> list[str]:
        seen: set[str] = set()
        for name in v:
            if name in seen:
                raise ValueError(f"Suite '{name}' is listed more than once")
            seen.add(name)
        return v


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    config = RunConfig(**raw)

    # Resolve relative paths relative to config file location
    if config.output is not None and not Path(config.output).is_absolute():
        config.output = str((config_dir / config.output).resolve())
    if not Path(config.debug_log).is_absolute():
        config.debug_log = str((config_dir / config.debug_log).resolve())

    return config
