"""Configuration primitives for the project."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

ENV_PREFIX = "GRAPH_TRAVERSAL_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(slots=True)
class ProjectPaths:
    """Paths to key project directories relative to the repository root."""

    root: Path = Path(__file__).resolve().parents[2]
    figures: Path = field(init=False)

    def __post_init__(self) -> None:
        self.figures = self.root / "data" / "figures"


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


@dataclass(slots=True)
class ServiceConfig:
    """Settings for the HTTP service and explorer."""

    host: str = "0.0.0.0"
    port: int = 4000
    strict_start: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"Port out of range: {self.port}")
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        self.log_level = level

    def apply_logging(self) -> None:
        """Set the root logger to ``log_level``."""

        logging.getLogger().setLevel(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Factory helper reading ``GRAPH_TRAVERSAL_*`` variables over the defaults."""

        env = os.environ if environ is None else environ
        defaults = cls()
        port_value = env.get(f"{ENV_PREFIX}PORT")
        try:
            port = int(port_value) if port_value is not None else defaults.port
        except ValueError as exc:
            raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port_value!r}") from exc

        strict_value = env.get(f"{ENV_PREFIX}STRICT_START")
        return cls(
            host=env.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=port,
            strict_start=(
                _parse_bool(f"{ENV_PREFIX}STRICT_START", strict_value) if strict_value is not None else defaults.strict_start
            ),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
        )
