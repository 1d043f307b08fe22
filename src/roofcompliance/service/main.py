"""
roofcompliance FastAPI Service

REST API over the roofing compliance engine.

Endpoints:
    GET  /health                 - Liveness probe
    GET  /version                - Engine and knowledge pack versions
    POST /evaluate               - Evaluate questionnaire answers
    POST /wizard/next            - Required questions and the next one to ask
    POST /wizard/explain         - Legislative basis for the answers
    GET  /knowledge/...          - Determinations, case studies, explanations
"""

import json
import logging
import time
import uuid
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..exceptions import (
    RoofComplianceError,
    UnknownCaseStudyError,
    UnknownDeterminationError,
    UnknownExplanationError,
    WizardInputError,
)
from ..knowledge import KNOWLEDGE_BASE
from .config import (
    KNOWLEDGE_PACK_HASH,
    RC_CORS_ORIGINS,
    RC_DOCS_ENABLED,
    RC_ENGINE_VERSION,
    RC_LOG_LEVEL,
    RC_MAX_REQUEST_SIZE,
)
from .routes import evaluate, knowledge, wizard
from .schemas.responses import HealthResponse, VersionResponse

# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("request_id", "status", "input_hash_short", "duration_ms"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        return json.dumps(log_entry)


logger = logging.getLogger("roofcompliance")
logger.setLevel(getattr(logging, RC_LOG_LEVEL.upper(), logging.INFO))
if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title="roofcompliance",
    description="NZ roofing consent and LBP compliance guidance",
    version=RC_ENGINE_VERSION,
    docs_url="/docs" if RC_DOCS_ENABLED else None,
    redoc_url="/redoc" if RC_DOCS_ENABLED else None,
    openapi_url="/openapi.json" if RC_DOCS_ENABLED else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=RC_CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(evaluate.router)
app.include_router(wizard.router)
app.include_router(knowledge.router)

# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def limit_request_size(request: Request, call_next):
    """Limit request body size."""
    if request.method == "POST":
        content_length = request.headers.get("content-length")
        if content_length and int(content_length) > RC_MAX_REQUEST_SIZE:
            return JSONResponse(
                status_code=413,
                content={
                    "error": "Request too large",
                    "code": "REQUEST_TOO_LARGE",
                    "details": {"max_size": RC_MAX_REQUEST_SIZE},
                    "request_id": getattr(request.state, "request_id", "unknown"),
                },
            )
    return await call_next(request)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id
    request.state.start_time = time.time()

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response

# =============================================================================
# Error Handling
# =============================================================================

_NOT_FOUND = (UnknownDeterminationError, UnknownCaseStudyError, UnknownExplanationError)


@app.exception_handler(RoofComplianceError)
async def domain_error_handler(request: Request, exc: RoofComplianceError):
    """Map domain errors to the structured error response."""
    if isinstance(exc, _NOT_FOUND):
        status_code = 404
    elif isinstance(exc, WizardInputError):
        status_code = 400
    else:
        status_code = 500
        logger.error("Internal error: %s", exc)

    details = dict(exc.details)
    if exc.field:
        details["field"] = exc.field
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.message,
            "code": exc.code,
            "details": details or None,
            "request_id": getattr(request.state, "request_id", "unknown"),
        },
    )

# =============================================================================
# Health / Info Endpoints
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Liveness probe. The knowledge pack is loaded at import, so alive means ready."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        engine_version=RC_ENGINE_VERSION,
        knowledge_pack_id=KNOWLEDGE_BASE.pack_id,
        knowledge_pack_version=KNOWLEDGE_BASE.version,
    )


@app.get("/version", response_model=VersionResponse, tags=["Info"])
async def version_info():
    """Return version information for all components."""
    return VersionResponse(
        engine_version=RC_ENGINE_VERSION,
        knowledge_pack_id=KNOWLEDGE_BASE.pack_id,
        knowledge_pack_version=KNOWLEDGE_BASE.version,
        knowledge_pack_hash=KNOWLEDGE_PACK_HASH,
        jurisdiction=KNOWLEDGE_BASE.jurisdiction,
    )
