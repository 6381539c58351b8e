"""
Typed configuration models using Pydantic.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OrderPolicy(str, Enum):
    """How an explicit column ordering is checked against the default keys."""

    VERBATIM = "verbatim"  # equal-length orders are used exactly as given
    STRICT = "strict"  # resolved order must be a permutation of the default keys


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure level is a known logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class CellsConfig(BaseModel):
    """Root configuration for matrix construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    order_policy: OrderPolicy = Field(
        default=OrderPolicy.VERBATIM,
        description="Handling of explicit column orderings",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
