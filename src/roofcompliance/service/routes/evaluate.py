"""Compliance evaluation endpoint."""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...canon import inputs_hash, result_hash
from ...engine import evaluate_compliance, get_next_required_field, is_wizard_complete
from ..config import KNOWLEDGE_PACK_HASH, RC_ENGINE_VERSION
from ..schemas.requests import WizardInputsRequest

router = APIRouter(prefix="/evaluate", tags=["Evaluation"])

logger = logging.getLogger("roofcompliance.service")


@router.post("")
async def evaluate(body: WizardInputsRequest, request: Request):
    """
    Evaluate questionnaire answers.

    Returns the compliance result (status, banner, warnings, reasons,
    required actions, legislation keys) plus wizard completeness and a
    provenance block. Same answers always give the same result hash.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    start_time = getattr(request.state, "start_time", time.time())

    inputs = body.to_inputs()
    result = evaluate_compliance(inputs)

    input_hash = inputs_hash(inputs)
    payload = result.to_dict()
    payload["complete"] = is_wizard_complete(inputs)
    payload["nextRequiredField"] = get_next_required_field(inputs)
    payload["provenance"] = {
        "inputHash": input_hash,
        "resultHash": result_hash(result),
        "knowledgePackHash": KNOWLEDGE_PACK_HASH,
        "engineVersion": RC_ENGINE_VERSION,
        "evaluatedAt": datetime.now(timezone.utc).isoformat(),
    }

    duration_ms = int((time.time() - start_time) * 1000)
    logger.info(
        "Evaluation complete",
        extra={
            "request_id": request_id,
            "status": result.status.value,
            "input_hash_short": input_hash[:16],
            "duration_ms": duration_ms,
        },
    )

    return JSONResponse(content=payload)
