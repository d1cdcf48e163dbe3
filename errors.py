"""Exceptions raised by request handlers and mapped to JSON error envelopes."""


class ApiError(Exception):
    """Error carrying the HTTP status returned to the client."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(ApiError):
    """Missing required field, unparseable value or missing id parameter."""

    status_code = 400


class NotFoundError(ApiError):
    status_code = 404
