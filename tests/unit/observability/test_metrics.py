"""Tests for Prometheus metrics."""

from prometheus_client import REGISTRY

from rehearsal.observability.metrics import (
    ACTIVE_SESSIONS,
    AUDIO_SEGMENTS,
    NARRATION_FAILURES,
    PENDING_EXCHANGES,
    PROVIDER_ATTEMPTS,
    PROVIDER_RETRIES,
    SESSIONS_EVICTED,
    TURN_LATENCY,
    TURNS,
)


def _value(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestCounters:
    def test_turns_by_outcome(self) -> None:
        before = _value("rehearsal_turns_total", {"outcome": "completed"})
        TURNS.labels(outcome="completed").inc()
        assert _value("rehearsal_turns_total", {"outcome": "completed"}) == before + 1

    def test_provider_attempts_by_operation_and_outcome(self) -> None:
        labels = {"operation": "chat", "outcome": "retryable"}
        before = _value("rehearsal_provider_attempts_total", labels)
        PROVIDER_ATTEMPTS.labels(**labels).inc()
        assert _value("rehearsal_provider_attempts_total", labels) == before + 1

    def test_unlabelled_counters_increment(self) -> None:
        before = _value("rehearsal_narration_failures_total")
        NARRATION_FAILURES.inc()
        SESSIONS_EVICTED.inc(2)
        PROVIDER_RETRIES.labels(operation="narration").inc()
        AUDIO_SEGMENTS.labels(outcome="played").inc()
        assert _value("rehearsal_narration_failures_total") == before + 1


class TestGauges:
    def test_gauges_set(self) -> None:
        ACTIVE_SESSIONS.set(4)
        PENDING_EXCHANGES.set(2)
        assert _value("rehearsal_active_sessions") == 4
        assert _value("rehearsal_pending_exchanges") == 2


def test_turn_latency_histogram_observes() -> None:
    before = _value("rehearsal_turn_latency_seconds_count")
    TURN_LATENCY.observe(0.3)
    assert _value("rehearsal_turn_latency_seconds_count") == before + 1
