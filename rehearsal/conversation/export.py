"""Transcript export to Markdown."""

from datetime import datetime

from rehearsal.conversation.models import Exchange, ExchangeRole, Scenario, utc_now

ROLE_LABELS = {
    ExchangeRole.TRAINEE: "Staff Member",
    ExchangeRole.CHARACTER: "Guest",
}

DEFAULT_TITLE = "Wine Tasting Room Visit"
DEFAULT_DESCRIPTION = "A conversation with a winery visitor"


def export_filename(exported_at: datetime | None = None) -> str:
    """Download name for an exported transcript."""
    day = (exported_at or utc_now()).date().isoformat()
    return f"wine-tasting-conversation-{day}.md"


def transcript_to_markdown(
    scenario: Scenario | None,
    exchanges: list[Exchange],
    exported_at: datetime | None = None,
) -> str:
    """Render a transcript as a Markdown document.

    Turns are numbered from 1 in transcript order and labelled from the
    venue's point of view: the trainee is the staff member, the simulated
    character is the guest.

    Args:
        scenario: Scenario the conversation was run against, if known
        exchanges: Transcript in chronological order
        exported_at: Export timestamp (defaults to now)

    Returns:
        Markdown text
    """
    if not exchanges:
        return "# Empty Conversation\n"

    exported_at = exported_at or utc_now()
    title = scenario.title if scenario and scenario.title else DEFAULT_TITLE
    description = (
        scenario.description if scenario and scenario.description else DEFAULT_DESCRIPTION
    )

    lines = [
        "# Wine Tasting Room Conversation",
        "",
        f"## Scenario: {title}",
        "",
        f"**Description:** {description}",
        "",
        f"**Date:** {exported_at.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}",
        "",
        "## Conversation",
        "",
    ]
    for index, exchange in enumerate(exchanges, start=1):
        lines.extend([f"### {ROLE_LABELS[exchange.role]} ({index})", "", exchange.content, ""])

    return "\n".join(lines)
