class ApiError(Exception):
    """Base class for errors that are reported to the API caller."""

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message=None, payload=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.payload = payload or {}

    def to_dict(self):
        return {"error": self.message, **self.payload}


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request data"

    def __init__(self, message=None, fields=None):
        self.fields = fields or {}
        super().__init__(message, {"fields": self.fields} if self.fields else None)


class MissingFieldsError(ValidationError):
    def __init__(self, fields):
        super().__init__(
            "Missing required fields",
            {field: "This field is required" for field in fields},
        )
        self.missing_fields = list(fields)
        self.payload["missing_fields"] = self.missing_fields


class UnauthenticatedError(ApiError):
    status_code = 401
    default_message = "Authentication required"


class AccountPendingError(ApiError):
    status_code = 403
    default_message = "Account pending approval"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Insufficient permissions"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Resource conflict"


class InternalError(ApiError):
    status_code = 500
