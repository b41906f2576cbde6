"""Prompt templates for ticket triage.

Ticket title and description are embedded verbatim. Nothing is escaped, so a
ticket can carry instructions aimed at the model (prompt injection); callers
should treat the analysis as advisory.
"""

from __future__ import annotations

from ticket_triage.domain.entities.ticket import Ticket

SYSTEM_PROMPT = """\
You are an expert AI assistant that processes technical support tickets.

Your job is to:
1. Summarize the issue.
2. Estimate its priority.
3. Provide helpful notes and resource links for human moderators.
4. List relevant technical skills required.

IMPORTANT:
- Respond with *only* valid raw JSON.
- Do NOT include markdown, code fences, comments, or any extra formatting.
- The format must be a raw JSON object."""

USER_PROMPT_TEMPLATE = """\
Analyze the following support ticket and provide a JSON object with:

- summary: A short 1-2 sentence summary of the issue.
- priority: One of "low", "medium", or "high".
- helpfulNotes: A detailed technical explanation that a moderator can use to solve this issue. Include useful external links or resources if possible.
- relatedSkills: An array of relevant skills required to solve the issue (e.g., ["React", "MongoDB"]).

Ticket information:

- Title: {title}
- Description: {description}"""


def build_prompt(ticket: Ticket) -> str:
    """Build the user prompt for a single ticket."""
    # str.format does not re-interpret braces inside substituted values
    return USER_PROMPT_TEMPLATE.format(title=ticket.title, description=ticket.description)
