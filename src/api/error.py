"""
Error envelope shared by every failure response:
{name, message, httpResponseCode, errorMessage}
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from src.domain.errors import DomainError

ERROR_MESSAGES = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    500: "Internal Server Error",
}


def error_response(
    name: str,
    message: str,
    status_code: int,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    content = {
        "name": name,
        "message": message,
        "httpResponseCode": status_code,
        "errorMessage": ERROR_MESSAGES.get(status_code, "Error"),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def domain_error_response(exc: DomainError) -> JSONResponse:
    return error_response(exc.name, exc.message, exc.status_code)
