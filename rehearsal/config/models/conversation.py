"""Retry and session lifecycle configuration models."""

from pydantic import BaseModel, Field


class RetryConfig(BaseModel):
    """Bounded exponential backoff for outbound provider calls.

    The delay before attempt n+1 is base_delay_seconds * multiplier**(n-1).
    """

    max_attempts: int = Field(default=3, ge=1, description="Attempts per call")
    base_delay_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="Delay after the first failed attempt",
    )
    multiplier: float = Field(
        default=2.0,
        ge=1.0,
        description="Backoff growth factor",
    )
    attempt_timeout_seconds: float | None = Field(
        default=30.0,
        gt=0.0,
        description="Per-attempt timeout; a timeout is retryable",
    )


class SessionConfig(BaseModel):
    """Conversation session lifecycle."""

    idle_window_seconds: float = Field(
        default=3600.0,
        gt=0.0,
        description="Sessions idle this long are evicted",
    )
    sweep_interval_seconds: float = Field(
        default=3600.0,
        gt=0.0,
        description="How often the idle sweep runs",
    )


class ScenarioConfig(BaseModel):
    """Where scenario documents are read from."""

    directory: str = Field(
        default="scenarios",
        description="Directory of *.json scenario documents",
    )
