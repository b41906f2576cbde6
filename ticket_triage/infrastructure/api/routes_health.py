"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ticket_triage.application.provider_registry import ProviderRegistry
from ticket_triage.infrastructure.api.dependencies import get_provider_registry

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(registry: ProviderRegistry = Depends(get_provider_registry)):
    """Report the configured providers and their selection weights."""
    return {
        "status": "ok",
        "providers": {name: weight for name, weight in registry.weights()},
        "service": "Ticket Triage Router",
    }
