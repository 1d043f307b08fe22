"""Response schemas for the API."""

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness probe response."""
    status: str
    timestamp: str
    engine_version: str
    knowledge_pack_id: str
    knowledge_pack_version: str


class VersionResponse(BaseModel):
    """Version info response."""
    engine_version: str
    knowledge_pack_id: str
    knowledge_pack_version: str
    knowledge_pack_hash: str
    jurisdiction: str


class WizardProgressResponse(BaseModel):
    required: list[str]
    answered: list[str]
    nextField: Optional[str] = None
    complete: bool


class ExplainedAnswerResponse(BaseModel):
    field: str
    question: str
    value: str
    ref: str
    text: str


class ExplainResponse(BaseModel):
    status: str
    explanations: list[ExplainedAnswerResponse]


class ErrorResponse(BaseModel):
    """Structured error response."""
    error: str
    code: str
    details: Optional[dict[str, Any]] = None
    request_id: str
