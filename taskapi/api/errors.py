"""Translation of request validation failures into field-to-message maps"""

import json
import logging
from typing import Any, Dict, Iterable, Mapping

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def _field_name(loc: Iterable[Any]) -> str:
    """Last named element of an error location, e.g. ("body", "name") -> "name" """
    names = [str(part) for part in loc if isinstance(part, str)]
    return names[-1] if names else "body"


def collect_field_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """Map each invalid field to the first message reported for it"""
    field_errors: Dict[str, str] = {}
    for error in errors:
        field_errors.setdefault(_field_name(error.get("loc", ())), error.get("msg", ""))
    return field_errors


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return structural validation failures as a 400 with a field-to-message object"""
    field_errors = collect_field_errors(exc.errors())
    logger.warning(f"Validation error: {json.dumps(field_errors)}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=field_errors)
