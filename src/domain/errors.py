"""
Domain Errors

Typed failures raised by use cases and mapped to HTTP responses at the API
boundary. `error_message` is the short category shown to clients and
`message` the human-readable detail.
"""


class DomainError(Exception):
    status_code: int = 500
    error_message: str = "Internal Server Error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def name(self) -> str:
        return type(self).__name__


class BadRequestError(DomainError):
    status_code = 400
    error_message = "Bad Request"


class UnauthorizedError(DomainError):
    status_code = 401
    error_message = "Unauthorized"


class ForbiddenError(DomainError):
    status_code = 403
    error_message = "Forbidden"


class NotFoundError(DomainError):
    status_code = 404
    error_message = "Not Found"


class ConflictError(DomainError):
    status_code = 409
    error_message = "Conflict"
