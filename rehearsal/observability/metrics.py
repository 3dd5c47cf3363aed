"""Prometheus metrics for Rehearsal.

Turn outcomes, provider call attempts, session lifecycle, offline
deferrals and audio playback.
"""

from prometheus_client import Counter, Gauge, Histogram

# Turn metrics
TURNS = Counter(
    "rehearsal_turns_total",
    "Trainee turns processed",
    labelnames=["outcome"],
)

TURN_LATENCY = Histogram(
    "rehearsal_turn_latency_seconds",
    "End-to-end latency of a trainee turn",
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

# Provider call metrics
PROVIDER_ATTEMPTS = Counter(
    "rehearsal_provider_attempts_total",
    "Outbound provider call attempts",
    labelnames=["operation", "outcome"],
)

PROVIDER_RETRIES = Counter(
    "rehearsal_provider_retries_total",
    "Backoff retries scheduled after a retryable failure",
    labelnames=["operation"],
)

NARRATION_FAILURES = Counter(
    "rehearsal_narration_failures_total",
    "Narration requests that failed and were dropped",
)

# Session metrics
ACTIVE_SESSIONS = Gauge(
    "rehearsal_active_sessions",
    "Conversation sessions currently held in the session store",
)

SESSIONS_EVICTED = Counter(
    "rehearsal_sessions_evicted_total",
    "Sessions removed by the idle sweep",
)

# Connectivity metrics
PENDING_EXCHANGES = Gauge(
    "rehearsal_pending_exchanges",
    "Exchanges waiting for persistence after an offline failure",
)

# Playback metrics
AUDIO_SEGMENTS = Counter(
    "rehearsal_audio_segments_total",
    "Narration segments leaving the playback queue",
    labelnames=["outcome"],
)
