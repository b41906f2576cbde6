"""Response extractor: turn raw model text into an AnalysisResult.

Models are told to return bare JSON but often wrap it in a markdown fence
anyway. Parse failures come back as a ``ParseError`` value instead of an
exception so the fallback loop, which only reacts to provider errors, does
not mistake malformed output for a provider outage.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from ticket_triage.domain.entities.analysis_result import AnalysisResult
from ticket_triage.domain.value_objects.enums import Priority

logger = logging.getLogger(__name__)

FENCED_JSON_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

PRIORITY_MAP: dict[str, Priority] = {p.value: p for p in Priority}


@dataclass(frozen=True)
class ParseError:
    """Explicit signal that model output could not be turned into a result."""

    reason: str
    raw_text: str | None = None


def extract(raw_text: str | None) -> AnalysisResult | ParseError:
    """Parse *raw_text* into an AnalysisResult. Never raises.

    A fenced block is tried first. If it does not hold a JSON object (say a
    shell snippet fenced inside an otherwise bare JSON answer), the trimmed
    whole text is tried next.
    """
    if raw_text is None:
        return ParseError("empty response")

    candidates = []
    match = FENCED_JSON_RE.search(raw_text)
    if match:
        candidates.append(match.group(1))
    candidates.append(raw_text.strip())

    first_error: ParseError | None = None
    for json_string in candidates:
        outcome = _parse_object(json_string, raw_text)
        if not isinstance(outcome, ParseError):
            return _map_to_result(outcome)
        first_error = first_error or outcome

    return first_error


def _parse_object(json_string: str, raw_text: str) -> dict[str, Any] | ParseError:
    # ValueError covers JSONDecodeError and oversized integer literals;
    # RecursionError comes from deeply nested arrays or objects
    try:
        parsed = json.loads(json_string)
    except (ValueError, RecursionError, TypeError) as e:
        return ParseError(f"invalid JSON: {e}", raw_text)

    if not isinstance(parsed, dict):
        return ParseError(f"expected a JSON object, got {type(parsed).__name__}", raw_text)
    return parsed


def _map_to_result(parsed: dict[str, Any]) -> AnalysisResult:
    """Map raw model JSON to the domain entity, defaulting unknown values."""
    priority = PRIORITY_MAP.get(str(parsed.get("priority", "")).strip().lower())
    if priority is None:
        logger.debug("Unknown priority %r, defaulting to medium", parsed.get("priority"))
        priority = Priority.MEDIUM

    skills = parsed.get("relatedSkills")
    if not isinstance(skills, list):
        skills = []

    return AnalysisResult(
        summary=_as_text(parsed.get("summary")),
        priority=priority,
        helpful_notes=_as_text(parsed.get("helpfulNotes")),
        related_skills=[str(s) for s in skills if s is not None],
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
