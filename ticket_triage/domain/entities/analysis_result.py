"""Analysis result: structured triage output parsed from an LLM response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ticket_triage.domain.value_objects.enums import Priority


@dataclass
class AnalysisResult:
    summary: str
    priority: Priority
    helpful_notes: str
    related_skills: list[str] = field(default_factory=list)
    provider: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase keys the model is asked to produce."""
        return {
            "summary": self.summary,
            "priority": self.priority.value,
            "helpfulNotes": self.helpful_notes,
            "relatedSkills": list(self.related_skills),
        }
