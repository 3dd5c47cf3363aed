"""Tests for conversation domain models."""

import pytest
from pydantic import ValidationError

from rehearsal.conversation.models import (
    CharacterBrief,
    ConversationSession,
    Exchange,
    ExchangeRole,
    Scenario,
)


class TestExchange:
    def test_defaults(self) -> None:
        exchange = Exchange(role=ExchangeRole.TRAINEE, content="Hello")

        assert exchange.id
        assert exchange.timestamp.tzinfo is not None

    def test_immutable(self) -> None:
        exchange = Exchange(role=ExchangeRole.TRAINEE, content="Hello")

        with pytest.raises(ValidationError):
            exchange.content = "Changed"

    @pytest.mark.parametrize(
        ("role", "chat_role"),
        [(ExchangeRole.TRAINEE, "user"), (ExchangeRole.CHARACTER, "assistant")],
    )
    def test_chat_role_mapping(self, role, chat_role) -> None:
        assert role.chat_role == chat_role


class TestConversationSession:
    def test_brief_is_frozen(self) -> None:
        session = ConversationSession(brief=CharacterBrief(instruction_context="Guest"))

        with pytest.raises(ValidationError):
            session.brief = CharacterBrief(instruction_context="Someone else")

    def test_activity_is_mutable(self) -> None:
        session = ConversationSession(brief=CharacterBrief(instruction_context="Guest"))
        later = session.last_activity.replace(year=session.last_activity.year + 1)

        session.last_activity = later

        assert session.last_activity == later
        assert session.instruction_context == "Guest"


class TestScenario:
    def test_accepts_camel_case(self) -> None:
        scenario = Scenario.model_validate(
            {
                "id": "s1",
                "title": "Visit",
                "clientPersonality": {
                    "knowledgeLevel": "Expert",
                    "preferences": {"favoriteWines": ["Syrah"]},
                },
            }
        )

        assert scenario.client_personality.knowledge_level == "Expert"
        assert scenario.client_personality.preferences.favorite_wines == ["Syrah"]

    def test_optional_sections_default_empty(self) -> None:
        scenario = Scenario(id="s1", title="Visit")

        assert scenario.winery_info.name == ""
        assert scenario.behavioral_instructions.general_behavior == []
