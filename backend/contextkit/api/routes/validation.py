"""Validation Routes — run the aggregate validators over posted payloads.

Invariants:
    - POST /api/v1/validation/{subject} → 200 ValidationResult or 400 with the
      ordered errors list under error.details.errors
    - Unknown subject → 404 SCHEMA_NOT_FOUND
    - Payload values are never logged, only subject and error count

Design Decisions:
    - Body typed as Any: a non-object JSON body reaches the core and is reported
      as "<subject> must be an object" in the same envelope as field failures
"""

import logging
from typing import Any

from fastapi import APIRouter, Body

from contextkit.core.domain_types import ENUMERATIONS
from contextkit.core.validators import SCHEMAS, validate
from contextkit.schemas.validation import (
    EnumCatalog,
    SubjectDescription,
    ValidationResult,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/validation", tags=["validation"])


@router.get("/subjects", response_model=list[SubjectDescription])
async def list_subjects():
    """Describe every registered request shape and its field checks."""
    return [SubjectDescription.from_schema(s) for s in SCHEMAS.values()]


@router.get("/enums", response_model=EnumCatalog)
async def list_enums():
    """Closed value sets, for form builders and documentation."""
    return EnumCatalog(**{name: list(values) for name, values in ENUMERATIONS.items()})


@router.post("/{subject}", response_model=ValidationResult)
async def validate_payload(subject: str, payload: Any = Body(...)):
    """Validate one payload; failures are rendered by the global handler."""
    outcome = validate(subject, payload)
    if not outcome:
        logger.warning(
            f"Rejected {subject} payload",
            extra={"subject": subject, "error_count": len(outcome.error.errors)},
        )
        outcome.unwrap()
    return ValidationResult(subject=subject)
