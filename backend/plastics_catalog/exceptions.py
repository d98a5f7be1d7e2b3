"""
Plastics Catalog exception hierarchy

Services raise these; the handlers registered in main.py turn them into
JSON error responses of the form:

    {"error": "NOT_FOUND", "message": "Material 12 not found", "details": {...}}
"""
from typing import Any, Dict, Iterable, List, Optional

# Location segments naming where a value came from rather than which field
_LOCATION_PREFIXES = ("body", "query", "path")


def validation_error_details(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts to ``{"field", "message", "type"}``"""
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in _LOCATION_PREFIXES),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


class CatalogException(Exception):
    """Base class for all expected, client-facing errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(CatalogException):
    """Malformed or missing input (400)"""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Request validation failed", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, details={"errors": errors} if errors else None)


class InvalidFilterError(ValidationError):
    """A search filter combination that can never match, e.g. min > max"""

    error_code = "INVALID_FILTER"

    def __init__(self, field: str, message: str):
        super().__init__(message, errors=[{"field": field, "message": message, "type": "value_error"}])


class NotFoundError(CatalogException):
    """Referenced row does not exist (404)"""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            f"{resource} {identifier} not found",
            details={"resource": resource.lower(), "id": identifier},
        )


class MaterialNotFoundError(NotFoundError):
    """Raised when a material id is unknown"""

    def __init__(self, material_id: int):
        super().__init__("Material", material_id)


class VendorNotFoundError(NotFoundError):
    """Raised when a vendor id is unknown"""

    def __init__(self, vendor_id: int):
        super().__init__("Vendor", vendor_id)


class ReviewNotFoundError(NotFoundError):
    """Raised when a review id is unknown"""

    def __init__(self, review_id: int):
        super().__init__("Review", review_id)


class AuthenticationError(CatalogException):
    """Missing, invalid or expired session (401)"""

    status_code = 401
    error_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
