from src.routers.errors import ErrorResponse, error_response
from src.routers.healthz import router as healthz

__all__ = [
    "ErrorResponse",
    "error_response",
    "healthz",
]
