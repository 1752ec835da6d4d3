"""Errors raised by the PayRex client."""
from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(str, Enum):
    """Category of an error response returned by the PayRex API."""

    INVALID_REQUEST = "invalid_request"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IDEMPOTENCY = "idempotency"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, code: Optional[str]) -> "ErrorKind":
        """Map an API error code, including its long aliases, to a kind."""
        if not code:
            return cls.UNKNOWN
        return _KIND_ALIASES.get(code.strip().lower(), cls.UNKNOWN)

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        """Best-effort kind for a response whose body names no error code."""
        if status_code >= 500:
            return cls.SERVER_ERROR
        return _STATUS_KINDS.get(status_code, cls.UNKNOWN)

    @property
    def is_retryable(self) -> bool:
        return self in (ErrorKind.RATE_LIMIT, ErrorKind.SERVER_ERROR)


_KIND_ALIASES: Dict[str, ErrorKind] = {
    "invalid_request": ErrorKind.INVALID_REQUEST,
    "invalid_request_error": ErrorKind.INVALID_REQUEST,
    "authentication": ErrorKind.AUTHENTICATION,
    "authentication_error": ErrorKind.AUTHENTICATION,
    "rate_limit": ErrorKind.RATE_LIMIT,
    "rate_limit_error": ErrorKind.RATE_LIMIT,
    "not_found": ErrorKind.NOT_FOUND,
    "resource_not_found": ErrorKind.NOT_FOUND,
    "permission_denied": ErrorKind.PERMISSION_DENIED,
    "forbidden": ErrorKind.PERMISSION_DENIED,
    "idempotency": ErrorKind.IDEMPOTENCY,
    "idempotency_error": ErrorKind.IDEMPOTENCY,
    "server_error": ErrorKind.SERVER_ERROR,
    "internal_server_error": ErrorKind.SERVER_ERROR,
}

_STATUS_KINDS: Dict[int, ErrorKind] = {
    400: ErrorKind.INVALID_REQUEST,
    401: ErrorKind.AUTHENTICATION,
    403: ErrorKind.PERMISSION_DENIED,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.IDEMPOTENCY,
    429: ErrorKind.RATE_LIMIT,
}


class PayrexError(Exception):
    """Base class for every error raised by the client."""

    @property
    def is_retryable(self) -> bool:
        return False


class ConfigError(PayrexError):
    """The client is misconfigured."""


class InvalidApiKeyError(ConfigError):
    """The API key is missing or is not a secret key."""


class HttpError(PayrexError):
    """The request never produced an HTTP response."""


class RequestTimeoutError(HttpError):
    """The request timed out."""

    @property
    def is_retryable(self) -> bool:
        return True


class ConnectionFailedError(HttpError):
    """The connection to the API could not be established."""

    @property
    def is_retryable(self) -> bool:
        return True


class DecodeError(PayrexError):
    """The response body could not be decoded into the expected type."""


class ApiError(PayrexError):
    """The API answered with an error response."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int,
        request_id: Optional[str] = None,
    ):
        super().__init__(f"{kind.value}: {message} (status {status_code})")
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.request_id = request_id

    @property
    def is_retryable(self) -> bool:
        return self.kind.is_retryable


class InvalidRequestError(ApiError):
    pass


class AuthenticationError(ApiError):
    pass


class PermissionDeniedError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class IdempotencyError(ApiError):
    pass


class ServerError(ApiError):
    pass


class RateLimitError(ApiError):
    """Too many requests; ``retry_after`` is in seconds when the API says."""

    def __init__(
        self,
        message: str,
        status_code: int = 429,
        request_id: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(ErrorKind.RATE_LIMIT, message, status_code, request_id)
        self.retry_after = retry_after


_KIND_ERRORS: Dict[ErrorKind, Type[ApiError]] = {
    ErrorKind.INVALID_REQUEST: InvalidRequestError,
    ErrorKind.AUTHENTICATION: AuthenticationError,
    ErrorKind.PERMISSION_DENIED: PermissionDeniedError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.IDEMPOTENCY: IdempotencyError,
    ErrorKind.SERVER_ERROR: ServerError,
}


def api_error(
    kind: ErrorKind,
    message: str,
    status_code: int,
    request_id: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> ApiError:
    """Build the ApiError subclass matching `kind`."""
    if kind is ErrorKind.RATE_LIMIT:
        return RateLimitError(message, status_code, request_id, retry_after)
    error_cls = _KIND_ERRORS.get(kind, ApiError)
    return error_cls(kind, message, status_code, request_id)


def missing_api_key() -> str:
    """Return message for a client created without an API key."""
    return "No API key provided; pass api_key or set PAYREX_API_KEY"


def public_api_key() -> str:
    """Return message for a client created with a public key."""
    return "Public keys (pk_...) cannot be used with the API client; use a secret key"


def live_key_in_test_mode() -> str:
    """Return message for a live secret key used while test mode is on."""
    return "Live keys (sk_live_...) cannot be used while test_mode is enabled"
