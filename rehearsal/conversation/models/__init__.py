"""Conversation domain models.

- Exchanges: individual trainee / character messages
- Sessions: per-conversation character brief and activity
- Scenarios: persona data a brief is built from
"""

from rehearsal.conversation.models.enums import ExchangeRole, ExchangeStatus, TurnState
from rehearsal.conversation.models.exchange import Exchange, utc_now
from rehearsal.conversation.models.scenario import (
    BehavioralInstructions,
    ClientPersonality,
    CustomerProfile,
    Preferences,
    Scenario,
    WineryInfo,
)
from rehearsal.conversation.models.session import CharacterBrief, ConversationSession

__all__ = [
    # Enums
    "ExchangeRole",
    "ExchangeStatus",
    "TurnState",
    # Exchanges
    "Exchange",
    "utc_now",
    # Sessions
    "CharacterBrief",
    "ConversationSession",
    # Scenarios
    "BehavioralInstructions",
    "ClientPersonality",
    "CustomerProfile",
    "Preferences",
    "Scenario",
    "WineryInfo",
]
