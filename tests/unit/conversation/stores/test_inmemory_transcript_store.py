"""Tests for InMemoryTranscriptStore and InMemoryScenarioSource."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from rehearsal.conversation import PersistenceUnavailableError, ScenarioNotFoundError
from rehearsal.conversation.models import Exchange, ExchangeRole
from rehearsal.conversation.stores import InMemoryScenarioSource, InMemoryTranscriptStore


class TestInMemoryTranscriptStore:
    @pytest.fixture
    def store(self) -> InMemoryTranscriptStore:
        return InMemoryTranscriptStore()

    @pytest.mark.asyncio
    async def test_append_and_list_in_order(self, store) -> None:
        first = Exchange(role=ExchangeRole.TRAINEE, content="Hello")
        second = Exchange(role=ExchangeRole.CHARACTER, content="Hi there")

        await store.append("conv-1", first)
        await store.append("conv-1", second)

        assert await store.list("conv-1") == [first, second]

    @pytest.mark.asyncio
    async def test_conversations_are_isolated(self, store) -> None:
        await store.append("conv-1", Exchange(role=ExchangeRole.TRAINEE, content="A"))

        assert await store.list("conv-2") == []

    @pytest.mark.asyncio
    async def test_list_returns_copy(self, store) -> None:
        await store.append("conv-1", Exchange(role=ExchangeRole.TRAINEE, content="A"))

        (await store.list("conv-1")).clear()

        assert len(await store.list("conv-1")) == 1

    @pytest.mark.asyncio
    async def test_offline_raises(self, store) -> None:
        store.offline = True

        with pytest.raises(PersistenceUnavailableError):
            await store.append("conv-1", Exchange(role=ExchangeRole.TRAINEE, content="A"))
        with pytest.raises(PersistenceUnavailableError):
            await store.list("conv-1")


class TestInMemoryScenarioSource:
    @pytest.mark.asyncio
    async def test_get(self, scenario) -> None:
        source = InMemoryScenarioSource([scenario])

        assert await source.get("club-visit") is scenario

    @pytest.mark.asyncio
    async def test_missing_raises(self) -> None:
        with pytest.raises(ScenarioNotFoundError) as exc_info:
            await InMemoryScenarioSource().get("missing")

        assert exc_info.value.scenario_id == "missing"

    @pytest.mark.asyncio
    async def test_from_directory_reads_camel_case_documents(self, tmp_path: Path) -> None:
        (tmp_path / "visit.json").write_text(
            json.dumps(
                {
                    "id": "visit",
                    "title": "Weekend Visit",
                    "voiceId": "voice-1",
                    "customerProfile": {"names": ["Ana"], "visitReason": "Birthday"},
                }
            )
        )
        (tmp_path / "notes.txt").write_text("ignored")

        source = InMemoryScenarioSource.from_directory(tmp_path)
        scenario = await source.get("visit")

        assert scenario.voice_id == "voice-1"
        assert scenario.customer_profile.visit_reason == "Birthday"

    def test_from_missing_directory_is_empty(self, tmp_path: Path) -> None:
        source = InMemoryScenarioSource.from_directory(tmp_path / "missing")
        assert isinstance(source, InMemoryScenarioSource)

    def test_from_directory_rejects_invalid_document(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text(json.dumps({"title": "No id"}))

        with pytest.raises(ValidationError):
            InMemoryScenarioSource.from_directory(tmp_path)
