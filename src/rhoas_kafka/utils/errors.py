"""Error types raised by the rhoas-kafka CLI."""


class RHOASError(Exception):
    """Base error for all rhoas-kafka failures."""

    pass


class ValidationError(RHOASError):
    """Invalid user input, rejected before any request is made."""

    pass


class ConfigurationError(RHOASError):
    """Invalid or incomplete configuration."""

    pass


class AuthenticationError(RHOASError):
    """Missing, invalid or rejected credentials."""

    pass


class ContextError(RHOASError):
    """The persisted service context could not be read."""

    pass


class APIError(RHOASError):
    """A request to a management API failed.

    ``status_code`` is None when the request never produced a response
    (connection refused, DNS failure, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(APIError):
    """The requested resource does not exist."""

    def __init__(self, resource_type: str, name: str | None = None) -> None:
        self.resource_type = resource_type
        self.name = name
        if name:
            message = f"{resource_type} '{name}' not found"
        else:
            message = f"{resource_type} not found"
        super().__init__(message, status_code=404)
