"""
Data Transfer Objects (DTOs) for API layer.
Separates API contracts from registry and configuration types.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..services.providers.base import Provider

PROVIDER_TYPE_CORE = "core"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    message: str
    time: datetime


class ProviderInfo(BaseModel):
    """Public description of a registered provider."""
    name: str
    type: str = PROVIDER_TYPE_CORE
    description: str


class ProvidersResponse(BaseModel):
    """Response DTO for the providers endpoint."""
    status: str = "success"
    count: int
    providers: List[ProviderInfo]


class StatusResponse(BaseModel):
    """Response DTO for the status endpoint."""
    status: str = "ok"
    version: str
    timestamp: datetime
    uptime_seconds: int = Field(default=0, ge=0)
    config: Optional[Dict[str, Any]] = None


def provider_info(provider: Provider) -> ProviderInfo:
    """Map a registered provider to its public description."""
    return ProviderInfo(name=provider.get_name(), type=PROVIDER_TYPE_CORE, description=provider.describe())


def providers_response(providers: List[Provider]) -> ProvidersResponse:
    infos = [provider_info(provider) for provider in providers]
    return ProvidersResponse(count=len(infos), providers=infos)


def encode_json(model: BaseModel) -> str:
    """Encode a response DTO the way a stream encoder does (one JSON document per line)."""
    return model.model_dump_json(exclude_none=True) + "\n"
