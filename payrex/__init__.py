"""Typed async client for the PayRex payments API."""
from payrex.client import Client
from payrex.core.config import Settings
from payrex.core.errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    ConnectionFailedError,
    DecodeError,
    ErrorKind,
    HttpError,
    IdempotencyError,
    InvalidApiKeyError,
    InvalidRequestError,
    NotFoundError,
    PayrexError,
    PermissionDeniedError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthenticationError",
    "Client",
    "ConfigError",
    "ConnectionFailedError",
    "DecodeError",
    "ErrorKind",
    "HttpError",
    "IdempotencyError",
    "InvalidApiKeyError",
    "InvalidRequestError",
    "NotFoundError",
    "PayrexError",
    "PermissionDeniedError",
    "RateLimitError",
    "RequestTimeoutError",
    "ServerError",
    "Settings",
]
