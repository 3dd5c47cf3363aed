"""Character brief construction.

Renders a scenario into the instruction context handed to the chat
provider as system-level guidance. Built once per conversation.
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from rehearsal.conversation.models import CharacterBrief, Scenario

TEMPLATES_DIR = Path(__file__).parent / "templates"
BRIEF_TEMPLATE = "character_brief.jinja2"


class TemplateLoader:
    """Loads and renders the Jinja2 prompt templates."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, **context) -> str:
        """Render a template with context variables.

        Raises:
            jinja2.TemplateNotFound: If template doesn't exist
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


@lru_cache(maxsize=1)
def _default_loader() -> TemplateLoader:
    return TemplateLoader()


def build_instruction_context(
    scenario: Scenario, loader: TemplateLoader | None = None
) -> str:
    """Render the character brief for ``scenario``.

    Sections with no content are left out; the closing role-lock
    instruction is always present.
    """
    behavior = scenario.behavioral_instructions
    behavior_sections = [
        (heading, items)
        for heading, items in (
            ("Behavioral Instructions", behavior.general_behavior),
            ("Tasting Behavior", behavior.tasting_behavior),
            ("Purchase Intentions", behavior.purchase_intentions),
        )
        if items
    ]

    rendered = (loader or _default_loader()).render(
        BRIEF_TEMPLATE,
        scenario=scenario,
        profile=scenario.customer_profile,
        personality=scenario.client_personality,
        prefs=scenario.client_personality.preferences,
        winery=scenario.winery_info,
        behavior_sections=behavior_sections,
    )
    return rendered.strip()


def build_character_brief(scenario: Scenario) -> CharacterBrief:
    """Capture everything a new session needs from ``scenario``."""
    return CharacterBrief(
        scenario_id=scenario.id,
        instruction_context=build_instruction_context(scenario),
        voice_id=scenario.voice_id,
    )
