from typing import Dict, List, Optional

from fastapi import HTTPException, status

FieldErrors = Dict[str, List[str]]


class BaseAppError(HTTPException):
    """Base class for all application exceptions.

    Rendered by the application error handler as
    ``{"message": ..., "code": ..., "fieldErrors": ...}``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "An unexpected error occurred"
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, detail: str = None, field_errors: Optional[FieldErrors] = None):
        super().__init__(status_code=self.status_code, detail=detail or self.detail)
        self.field_errors = field_errors

    def to_body(self) -> dict:
        body = {"message": self.detail, "code": self.code}
        if self.field_errors:
            body["fieldErrors"] = self.field_errors
        return body


class NotFoundError(BaseAppError):
    """Resource not found error."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found"
    code = "RESOURCE_NOT_FOUND"


class ForbiddenError(BaseAppError):
    """Permission denied error."""

    status_code = status.HTTP_403_FORBIDDEN
    detail = "Not authorized to perform this action"
    code = "FORBIDDEN"


class BadRequestError(BaseAppError):
    """Invalid request error."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request"
    code = "BAD_REQUEST"


class ValidationFailedError(BadRequestError):
    """Request payload failed validation; carries a field-error map."""

    detail = "Validation error"
    code = "VALIDATION_ERROR"


class UnauthorizedError(BaseAppError):
    """Authentication error."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Authentication failed"
    code = "UNAUTHORIZED"

    def __init__(self, detail: str = None):
        super().__init__(detail=detail or self.detail)
        self.headers = {"WWW-Authenticate": "Bearer"}


class DuplicateError(BaseAppError):
    """Duplicate resource error (unique constraint)."""

    status_code = status.HTTP_409_CONFLICT
    detail = "Resource already exists"
    code = "DUPLICATE_RESOURCE"


class ResourceInUseError(BaseAppError):
    """Delete rejected because other rows still reference the resource."""

    status_code = status.HTTP_409_CONFLICT
    detail = "Resource is still referenced by other records"
    code = "RESOURCE_IN_USE"
