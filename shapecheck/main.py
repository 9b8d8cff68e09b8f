"""
FastAPI application entrypoint.

Run locally:  uvicorn shapecheck.main:app --reload
"""

import logging

from fastapi import FastAPI

from shapecheck.api.routes import router
from shapecheck.config import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s | %(name)s | %(message)s")

app = FastAPI(
    title="shapecheck",
    description=(
        "Validates dynamically-typed values against declarative shape schemas: "
        "primitive types, string enums, closed objects with required fields, "
        "and homogeneous arrays."
    ),
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")
