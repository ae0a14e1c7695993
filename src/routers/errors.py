from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": ...}`` body every endpoint uses for failures."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def validation_error_message(exc: RequestValidationError) -> str:
    """Describe the first schema error, e.g. ``Invalid tel: Input should be a valid string``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body."
    # Drop the "body"/"path"/"query" prefix FastAPI puts in front of the field name
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if not field:
        return f"Invalid request: {first.get('msg', 'malformed body')}"
    return f"Invalid {field}: {first.get('msg', 'invalid value')}"


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 ``{error}`` instead of FastAPI's 422."""
    return error_response(400, validation_error_message(exc))
