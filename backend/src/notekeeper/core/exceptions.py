"""API errors carrying a field -> message mapping.

Every failure is rendered as ``{"success": false, "errors": {field: message}}``
by the handlers registered in ``main``.
"""

from typing import Dict, Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """HTTPException whose detail is a mapping of field name to message."""

    def __init__(
        self,
        status_code: int,
        errors: Dict[str, str],
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=errors, headers=headers)
        self.errors = errors


class ValidationFailed(ApiError):
    def __init__(self, field: str, message: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, {field: message})


class AuthenticationFailed(ApiError):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, {"auth": message})


class PermissionDenied(ApiError):
    def __init__(self, field: str, message: str):
        super().__init__(status.HTTP_403_FORBIDDEN, {field: message})


class ResourceNotFound(ApiError):
    """404 keyed by resource name, e.g. ``{"note": "Note not found"}``."""

    def __init__(self, resource: str, message: Optional[str] = None):
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            {resource: message or f"{resource.capitalize()} not found"},
        )


def errors_from_detail(status_code: int, detail) -> Dict[str, str]:
    """Coerce any HTTPException detail into the field -> message shape."""
    if isinstance(detail, dict):
        return {str(key): str(value) for key, value in detail.items()}
    if status_code == status.HTTP_404_NOT_FOUND and detail in (None, "Not Found"):
        return {"route": "Route not found"}
    if status_code >= 500:
        return {"server": "Something went wrong!"}
    return {"request": str(detail)}
