"""Tests for error kinds and the error hierarchy."""
import pytest

from payrex.core.errors import (
    ApiError,
    ConfigError,
    ConnectionFailedError,
    ErrorKind,
    HttpError,
    IdempotencyError,
    InvalidApiKeyError,
    PayrexError,
    PermissionDeniedError,
    RateLimitError,
    RequestTimeoutError,
    api_error,
)


@pytest.mark.parametrize("code,kind", [
    ("invalid_request", ErrorKind.INVALID_REQUEST),
    ("invalid_request_error", ErrorKind.INVALID_REQUEST),
    ("authentication_error", ErrorKind.AUTHENTICATION),
    ("rate_limit_error", ErrorKind.RATE_LIMIT),
    ("resource_not_found", ErrorKind.NOT_FOUND),
    ("forbidden", ErrorKind.PERMISSION_DENIED),
    ("idempotency_error", ErrorKind.IDEMPOTENCY),
    ("internal_server_error", ErrorKind.SERVER_ERROR),
    ("  Server_Error ", ErrorKind.SERVER_ERROR),
    ("something_else", ErrorKind.UNKNOWN),
    (None, ErrorKind.UNKNOWN),
])
def test_parse_error_codes(code, kind):
    assert ErrorKind.parse(code) is kind


def test_kind_from_status():
    assert ErrorKind.from_status(401) is ErrorKind.AUTHENTICATION
    assert ErrorKind.from_status(409) is ErrorKind.IDEMPOTENCY
    assert ErrorKind.from_status(503) is ErrorKind.SERVER_ERROR
    assert ErrorKind.from_status(418) is ErrorKind.UNKNOWN


def test_only_rate_limit_and_server_errors_are_retryable_kinds():
    retryable = {kind for kind in ErrorKind if kind.is_retryable}
    assert retryable == {ErrorKind.RATE_LIMIT, ErrorKind.SERVER_ERROR}


def test_api_error_factory():
    error = api_error(ErrorKind.PERMISSION_DENIED, "Nope", 403, request_id="req_1")
    assert isinstance(error, PermissionDeniedError)
    assert str(error) == "permission_denied: Nope (status 403)"

    limited = api_error(ErrorKind.RATE_LIMIT, "Slow down", 429, retry_after=3)
    assert isinstance(limited, RateLimitError)
    assert limited.retry_after == 3

    assert isinstance(api_error(ErrorKind.IDEMPOTENCY, "Replayed", 409), IdempotencyError)
    assert type(api_error(ErrorKind.UNKNOWN, "?", 418)) is ApiError


def test_hierarchy_and_retryability():
    assert issubclass(InvalidApiKeyError, ConfigError)
    assert issubclass(RequestTimeoutError, HttpError)
    assert issubclass(ConnectionFailedError, HttpError)
    for error_cls in (ConfigError, HttpError, ApiError):
        assert issubclass(error_cls, PayrexError)

    assert not InvalidApiKeyError("bad").is_retryable
    assert not HttpError("down").is_retryable
    assert ConnectionFailedError("refused").is_retryable
    assert RequestTimeoutError("slow").is_retryable
