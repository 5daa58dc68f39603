# cruise_booking/errors.py
"""
Error taxonomy shared by the services and the API layer.

Services raise these; ``main.py`` turns them into JSON responses carrying
``message`` and, for validation failures, a list of field errors.
"""
from typing import Any, Dict, List, Optional

from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden: Admin access required"


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(ServiceError):
    pass


def field_errors(raw_errors) -> List[Dict[str, str]]:
    """Flatten pydantic/FastAPI error dicts into ``{"field", "message"}`` pairs."""
    flattened = []
    for error in raw_errors:
        # FastAPI prefixes request errors with "body", "path" or "query"
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body",)]
        flattened.append({"field": ".".join(loc), "message": error.get("msg", "Invalid value")})
    return flattened


def from_schema_error(exc, message: str = "Invalid request data") -> ValidationError:
    """Wrap a ``pydantic.ValidationError`` raised inside the service layer."""
    return ValidationError(message, field_errors(exc.errors()))
