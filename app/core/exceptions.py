"""
Exception hierarchy for the translation core.

Handlers in app.main turn these into JSON error responses; the services
raise them and never catch them.
"""
from typing import Any, Dict, Optional


class TranslationServiceError(Exception):
    """
    Base class for all errors raised by the translation core.
    
    Attributes:
        message: Human-readable description
        error_code: Machine-readable code (e.g. "NOT_FOUND")
        status_code: HTTP status the transport should answer with
        details: Extra context for the response body
    """
    
    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dict for JSON serialization."""
        result: Dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result.update(self.details)
        return result


class ValidationError(TranslationServiceError):
    """A required field is blank/missing or exceeds its size limit."""
    
    def __init__(self, fields: Dict[str, str]):
        super().__init__(
            message="Validation failed",
            error_code="VALIDATION_FAILED",
            status_code=400,
            details={"fields": fields},
        )
        self.fields = fields


class NotFoundError(TranslationServiceError):
    """The target translation id does not exist."""
    
    def __init__(self, message: str):
        super().__init__(message=message, error_code="NOT_FOUND", status_code=404)


class StoreError(TranslationServiceError):
    """Persistence-layer failure (connectivity, constraint violation, ...)."""
    
    def __init__(self, message: str):
        super().__init__(message=message, error_code="STORE_ERROR", status_code=500)
