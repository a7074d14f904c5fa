"""Configuration helpers for the linear algebra utilities."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


# //1.- Define dataclass to encapsulate the tunable numeric and logging settings.
@dataclass(frozen=True)
class UtilityConfig:
    """Settings consulted by inversion and by the diagnostic channel."""

    singular_epsilon: float = 0.0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.singular_epsilon < 0.0:
            raise ValueError("singular_epsilon must not be negative")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    # //2.- Build a config from a plain mapping, falling back to defaults for missing keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, object]] = None) -> "UtilityConfig":
        if not payload:
            return cls()
        return cls(
            singular_epsilon=float(payload.get("singular_epsilon", 0.0)),  # type: ignore[arg-type]
            log_level=str(payload.get("log_level", "WARNING")).strip().upper(),
        )

    # //3.- Allow overriding settings through environment variables for integration tests.
    @classmethod
    def from_environment(cls, prefix: str = "WEBGL_UTILITIES") -> "UtilityConfig":
        epsilon = os.getenv(f"{prefix}_SINGULAR_EPSILON")
        level = os.getenv(f"{prefix}_LOG_LEVEL")
        mapping: Dict[str, object] = {}
        if epsilon is not None:
            mapping["singular_epsilon"] = float(epsilon)
        if level is not None:
            mapping["log_level"] = level
        return cls.from_mapping(mapping)

    # //4.- Numeric logging level for the standard library logger.
    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


DEFAULT_CONFIG = UtilityConfig()


# //5.- Provide canonical configuration accessor used across modules.
def load_utility_config(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    env_prefix: str = "WEBGL_UTILITIES",
) -> UtilityConfig:
    if mapping is not None:
        return UtilityConfig.from_mapping(mapping)
    return UtilityConfig.from_environment(prefix=env_prefix)


__all__ = ["UtilityConfig", "DEFAULT_CONFIG", "load_utility_config"]
