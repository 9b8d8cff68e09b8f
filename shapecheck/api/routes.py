"""
FastAPI routes – a thin HTTP surface over the validation engine.

Schema bodies are parsed by the schema model, so a malformed schema is
rejected with 422 before the engine runs. A value that does not match its
schema is an ordinary 200 response carrying the error.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter

from shapecheck.config import settings
from shapecheck.schemas.api import (
    ErrorDetail,
    ExportRequest,
    HealthResponse,
    ValidationRequest,
    ValidationResponse,
)
from shapecheck.schemas.nodes import to_json_schema
from shapecheck.services.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        max_depth=settings.max_depth,
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@router.post("/validate", response_model=ValidationResponse)
def validate_value(request: ValidationRequest):
    """Check a value against a schema and report the first mismatch, if any."""
    error = validate(request.value, request.schema_node)
    if error is None:
        logger.info("Value matches %s schema", request.schema_node.kind.value)
        return ValidationResponse(valid=True)

    logger.info("Value rejected – %s", error.message)
    return ValidationResponse(valid=False, error=ErrorDetail(**error.to_dict()))


@router.post("/schemas/json-schema")
def export_json_schema(request: ExportRequest) -> dict[str, Any]:
    """Render a schema tree as a JSON Schema draft-07 document."""
    return to_json_schema(request.schema_node)
