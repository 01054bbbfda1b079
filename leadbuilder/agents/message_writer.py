"""
Lead Builder - Message Writer
Renders the first-touch outreach message from a lead record.

The template is fixed: greeting, opener, optional pain line, CTA, sign-off.
Each piece is its own function so the lines can be tested independently.

Usage:
    from leadbuilder.agents.message_writer import build_personalized_message

    body = build_personalized_message({"contact_name": "Jane Doe", ...})
"""

import re

CTA_LINE = (
    "Would you be open to a 15-minute conversation next week to see if we "
    "can help accelerate your roadmap?"
)
DEFAULT_INITIATIVE = "some big initiatives"
SENDER_NAME = "Your Name"

_TRAILING_PERIOD = re.compile(r"\.\Z")


def build_greeting(contact_name: str) -> str:
    """'Hi Jane,' from the first name token, 'Hi there,' without a name."""
    tokens = (contact_name or "").split()
    if not tokens:
        return "Hi there,"
    return f"Hi {tokens[0]},"


def build_opener(company_name: str, job_title: str, pain_points: str) -> str:
    if company_name:
        return f"I noticed {company_name} is tackling {pain_points or DEFAULT_INITIATIVE}"
    if job_title:
        return f"I came across your work as {job_title}"
    return "I came across your work"


def build_pain_line(pain_points: str) -> str:
    """Social-proof line about the stated pains. Empty when there are none."""
    if not pain_points:
        return ""
    pains = _TRAILING_PERIOD.sub("", pain_points.lower())
    return (
        f"Teams similar to yours solved challenges around {pains} by "
        "streamlining their GTM workflows with our platform."
    )


def build_signoff(sender: str = SENDER_NAME) -> str:
    return f"Best,\n{sender}"


def build_personalized_message(record: dict) -> str:
    """Assemble the full multi-line message for a lead record.

    Missing keys and None values are treated as empty strings.
    """
    company = record.get("company_name") or ""
    contact = record.get("contact_name") or ""
    title = record.get("job_title") or ""
    pains = record.get("pain_points") or ""

    lines = [build_greeting(contact), "", build_opener(company, title, pains)]
    pain_line = build_pain_line(pains)
    if pain_line:
        lines.append(pain_line)
    lines.append(CTA_LINE)
    lines.append("")
    lines.append(build_signoff())
    return "\n".join(lines)
