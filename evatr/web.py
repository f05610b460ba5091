"""HTTP API — FastAPI router exposing the simple and qualified checks.

Input errors map to 422, an unreachable service to 503 and an undecodable
answer to 502. A "not valid" answer from the service is a normal 200.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from evatr.errors import (
    EvatrError,
    InvalidVatNumberError,
    ResponseDecodeError,
    ServiceUnreachableError,
)
from evatr.integrations.bzst.schemas import (
    QualifiedCheckRequest,
    QualifiedCheckResult,
    SimpleCheckRequest,
    SimpleCheckResult,
)
from evatr.integrations.bzst.service import check_qualified, check_simple

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/checks", tags=["checks"])


def _to_http_error(exc: EvatrError) -> HTTPException:
    if isinstance(exc, InvalidVatNumberError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, ServiceUnreachableError):
        return HTTPException(status_code=503, detail=str(exc))
    if isinstance(exc, ResponseDecodeError):
        logger.error("Undecodable eVatR answer: %s", exc)
        return HTTPException(status_code=502, detail="invalid answer from the eVatR service")
    return HTTPException(status_code=500, detail=str(exc))


# Sync handlers: FastAPI runs them in its threadpool, the client blocks.


@router.post("/simple", response_model=SimpleCheckResult)
def simple_check(payload: SimpleCheckRequest) -> SimpleCheckResult:
    """Confirm that a foreign VAT number is valid."""
    try:
        return check_simple(payload)
    except EvatrError as exc:
        raise _to_http_error(exc) from exc


@router.post("/qualified", response_model=QualifiedCheckResult)
def qualified_check(payload: QualifiedCheckRequest) -> QualifiedCheckResult:
    """Confirm a foreign VAT number together with company name and address."""
    try:
        return check_qualified(payload)
    except EvatrError as exc:
        raise _to_http_error(exc) from exc
