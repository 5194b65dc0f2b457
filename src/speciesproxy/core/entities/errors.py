"""Application error taxonomy."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classes of failure surfaced by the proxy core."""

    MANDATORY_PARAM = "mandatory_param"
    NOT_FOUND = "not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GENERIC = "generic"


_HTTP_STATUS = {
    ErrorKind.MANDATORY_PARAM: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.SERVICE_UNAVAILABLE: 503,
    ErrorKind.GENERIC: 500,
}


class AppError(Exception):
    """Classified failure of a core operation.

    ``http_status`` and ``message`` are what the routing layer renders;
    ``cause`` keeps the original exception for operator logs only.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.kind]

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.name}, http_status={self.http_status}, message={self.message!r})"

    @classmethod
    def mandatory(cls, parameter: str | None = None) -> "AppError":
        """Missing or blank input parameter (400)."""
        if parameter:
            return cls(ErrorKind.MANDATORY_PARAM, f"The parameter {parameter} is mandatory")
        return cls(ErrorKind.MANDATORY_PARAM, "The input object parameter is mandatory")

    @classmethod
    def not_found(cls, object_name: str) -> "AppError":
        """Authoritative negative answer from an upstream (404)."""
        return cls(ErrorKind.NOT_FOUND, f"The {object_name} was not found")

    @classmethod
    def service_unavailable(cls, cause: BaseException | None = None) -> "AppError":
        """Upstream unreachable or answering 503 after retries (503)."""
        return cls(ErrorKind.SERVICE_UNAVAILABLE, "Upstream service unavailable", cause)

    @classmethod
    def generic(
        cls,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> "AppError":
        """Any other failure (500)."""
        return cls(ErrorKind.GENERIC, message or "Generic error", cause)
