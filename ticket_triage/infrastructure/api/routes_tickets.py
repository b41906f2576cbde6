"""Ticket analysis endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ticket_triage.application.use_cases.analyze_ticket import AnalyzeTicketUseCase
from ticket_triage.domain.entities.ticket import Ticket
from ticket_triage.domain.value_objects.enums import Priority
from ticket_triage.infrastructure.api.dependencies import get_analyze_ticket_uc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["tickets"])


# ── Request / Response schemas ──────────────────────────────────────

class AnalyzeRequest(BaseModel):
    title: str
    description: str


class AnalyzeResponse(BaseModel):
    summary: str
    priority: Priority
    helpfulNotes: str
    relatedSkills: list[str] = Field(default_factory=list)
    provider: str | None = None


# ── Routes ──────────────────────────────────────────────────────────

@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    body: AnalyzeRequest,
    use_case: AnalyzeTicketUseCase = Depends(get_analyze_ticket_uc),
):
    """Triage a ticket with one of the configured LLM providers."""
    result = await use_case.execute(Ticket(title=body.title, description=body.description))
    if result is None:
        raise HTTPException(status_code=502, detail="AI analysis unavailable")

    return AnalyzeResponse(**result.to_dict(), provider=result.provider)
