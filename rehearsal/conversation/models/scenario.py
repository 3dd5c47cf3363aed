"""Scenario and persona models used to build a character brief.

Scenario documents are stored with camelCase keys; both camelCase and
snake_case are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScenarioModel(BaseModel):
    """Base for scenario documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WineryInfo(ScenarioModel):
    """The venue the trainee represents."""

    name: str = ""
    location: str = ""
    specialties: list[str] = Field(default_factory=list)


class CustomerProfile(ScenarioModel):
    """Who the simulated guest is."""

    names: list[str] = Field(default_factory=list)
    home_location: str = ""
    occupation: str = ""
    visit_reason: str = ""


class Preferences(ScenarioModel):
    favorite_wines: list[str] = Field(default_factory=list)
    dislikes: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)


class ClientPersonality(ScenarioModel):
    """How the simulated guest behaves and what they can spend."""

    knowledge_level: str = "Beginner"
    budget: str = "Moderate"
    traits: list[str] = Field(default_factory=list)
    preferences: Preferences = Field(default_factory=Preferences)


class BehavioralInstructions(ScenarioModel):
    general_behavior: list[str] = Field(default_factory=list)
    tasting_behavior: list[str] = Field(default_factory=list)
    purchase_intentions: list[str] = Field(default_factory=list)


class Scenario(ScenarioModel):
    """A role-play scenario: venue, guest persona and behaviour.

    Read once per new conversation to build its character brief.
    """

    id: str = Field(..., description="Scenario identifier")
    title: str = Field(..., description="Scenario title")
    description: str = Field(default="", description="Short description")
    difficulty: str = Field(default="Beginner", description="Beginner/Intermediate/Advanced")
    voice_id: str | None = Field(default=None, description="Narration voice for the guest")
    winery_info: WineryInfo = Field(default_factory=WineryInfo)
    customer_profile: CustomerProfile = Field(default_factory=CustomerProfile)
    client_personality: ClientPersonality = Field(default_factory=ClientPersonality)
    behavioral_instructions: BehavioralInstructions = Field(
        default_factory=BehavioralInstructions
    )
    evaluation_criteria: list[str] = Field(default_factory=list)
