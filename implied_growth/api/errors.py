"""Request validation errors in the {"errors": {field: message}} shape"""

from typing import Dict

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from implied_growth.api.dependencies import get_request_id
from implied_growth.domain.validation import validate_field
from implied_growth.infrastructure.observability.logging import log_rejection
from implied_growth.infrastructure.observability.metrics import record_rejection


def validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """
    Collapse pydantic's error list to one message per field.

    Calculator inputs that fail to parse are treated like empty ones, so they
    get the same "<label> is required" message the domain rules produce.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        field = loc[-1] if loc and error.get("type") != "json_invalid" else "body"
        if field in errors:
            continue
        errors[field] = validate_field(field, None) or error.get("msg", "Invalid value")
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = validation_errors(exc)
    record_rejection()
    log_rejection(get_request_id(request), errors)
    return JSONResponse(status_code=422, content={"detail": {"errors": errors}})
