"""
Medsite Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for every failure a request can hit.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers (registered in main.py) map them to HTTP status
       codes; context is logged server-side and never returned.
Who:   Raised by services, the auth gate, the token service and the database
       gateway.

Exception Hierarchy:
    MedsiteError (base)
    ├── ValidationError              → 400 Bad Request
    ├── ConflictError                → 400 Bad Request
    ├── NotFoundError                → 404 Not Found
    ├── AuthError                    → 401 / 403
    │   ├── MissingTokenError        → 401 Unauthorized
    │   ├── InvalidCredentialsError  → 401 Unauthorized
    │   └── InvalidTokenError        → 403 Forbidden
    │       └── ExpiredTokenError    → 403 Forbidden
    └── DatabaseError                → 500 Internal Server Error
        ├── DatabaseConnectionError
        └── QueryError
            └── ConstraintViolationError
"""

from typing import Any, Dict, Optional


class MedsiteError(Exception):
    """
    Base exception for all Medsite application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MedsiteError):
    """
    Raised when client input fails validation.

    When:    Required field missing or empty, password or phone number too short.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Name and phone number are required",
            "details": {"fields": ["name", "phone_number"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(MedsiteError):
    """
    Raised when a write would break a uniqueness or reference rule.

    When:    Duplicate admin username, country name or (college, country) pair;
             college pointing at an unknown country; deleting a country that
             colleges still reference.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "The request conflicts with existing data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(MedsiteError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE on an id with no matching row.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class AuthError(MedsiteError):
    """Base for authentication failures. Subclasses pin the HTTP status."""

    status_code: int = 401
    error_code: str = "unauthorized"


class MissingTokenError(AuthError):
    """No bearer token on a protected route (401)."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Access token required", context=context)


class InvalidCredentialsError(AuthError):
    """Signin with an unknown username or a wrong password (401)."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid credentials", context=context)


class InvalidTokenError(AuthError):
    """
    Bearer token failed verification (403).

    The client always sees the same message for tampered, malformed and
    expired tokens; `reason` in the context tells them apart in the logs.
    """

    status_code = 403
    error_code = "forbidden"

    def __init__(
        self,
        reason: str = "invalid",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["reason"] = reason
        super().__init__(message="Invalid or expired token", context=ctx)
        self.reason = reason


class ExpiredTokenError(InvalidTokenError):
    """Bearer token signature is valid but past its expiry (403)."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(reason="expired", context=context)


class DatabaseError(MedsiteError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Driver errors,
        statement text and constraint names are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseConnectionError(DatabaseError):
    """The pool could not hand out a connection."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Could not connect to the database", context=context)


class QueryError(DatabaseError):
    """A statement failed: malformed SQL, type mismatch, driver error."""

    def __init__(
        self,
        message: str = "A database query failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConstraintViolationError(QueryError):
    """
    A write violated a database constraint (unique index, NOT NULL).

    Services translate this into ConflictError where the constraint
    mirrors a pre-check; anywhere else it surfaces as a 500.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="A database constraint was violated", context=context)
