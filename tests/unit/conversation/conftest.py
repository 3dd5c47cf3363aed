"""Fixtures shared by conversation tests."""

from datetime import UTC, datetime, timedelta

import pytest

from rehearsal.conversation.models import CharacterBrief


class FakeClock:
    """Manually advanced clock for session activity tests."""

    def __init__(self, start: datetime = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class BriefBuilder:
    """Counts how often a new character brief is built."""

    def __init__(self, instruction_context: str = "You are a guest.") -> None:
        self.instruction_context = instruction_context
        self.calls = 0

    async def __call__(self) -> CharacterBrief:
        self.calls += 1
        return CharacterBrief(
            scenario_id="club-visit",
            instruction_context=f"{self.instruction_context} #{self.calls}",
            voice_id="voice-guest",
        )


@pytest.fixture
def build_brief() -> BriefBuilder:
    return BriefBuilder()
