# capkit/core/schema.py
"""
Configuration schema for capkit.

Schema hierarchy:
- CapkitConfig: The root config
- LoggingConfig: Logging settings
- AggregatorConfig: Composition settings
- GatewayConfig: Capability binding settings
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from capkit.core.exclusion import EXCLUSION_SET


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "[%(levelname)s] %(name)s: %(message)s"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


class AggregatorConfig(BaseModel):
    """
    Composition settings.

    Examples:
        >>> AggregatorConfig(extra_exclusions=["close"])
    """

    extra_exclusions: list[str] = Field(
        default_factory=list,
        description="Member names never copied, on top of the built-in Exclusion Set",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("extra_exclusions")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        for name in v:
            if not name.isidentifier():
                raise ValueError(f"Not a valid member name: {name!r}")
        # keep order, drop names the built-in set already covers
        return [name for name in dict.fromkeys(v) if name not in EXCLUSION_SET]


class GatewayConfig(BaseModel):
    """Capability binding settings."""

    check_arity: bool = Field(
        default=True,
        description="Also verify each operation accepts the declared number of arguments",
    )

    model_config = ConfigDict(extra="forbid")


class CapkitConfig(BaseModel):
    """
    Root configuration.

    Every section is optional; an empty file yields the defaults.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    aggregator: AggregatorConfig = Field(default_factory=AggregatorConfig)
    gateway: GatewayConfig = Field(default_factory=GatewayConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = ["CapkitConfig", "LoggingConfig", "AggregatorConfig", "GatewayConfig"]
