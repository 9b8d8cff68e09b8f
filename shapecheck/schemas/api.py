"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shapecheck.schemas.nodes import SchemaNode
from shapecheck.services.errors import ErrorKind


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class ValidationRequest(BaseModel):
    """A value and the schema tree to check it against."""
    model_config = ConfigDict(populate_by_name=True)

    value: Any
    schema_node: SchemaNode = Field(..., alias="schema")


class ErrorDetail(BaseModel):
    kind: ErrorKind
    expected: str
    actual: str
    path: list[str | int]
    location: str
    message: str
    detail: str | None = None


class ValidationResponse(BaseModel):
    valid: bool
    error: ErrorDetail | None = None


# ---------------------------------------------------------------------------
# Schema export
# ---------------------------------------------------------------------------

class ExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_node: SchemaNode = Field(..., alias="schema")


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "healthy"
    environment: str
    max_depth: int | None = None
