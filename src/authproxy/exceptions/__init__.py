"""
authproxy exception hierarchy.

Exception Hierarchy:
    AuthProxyError (base)
    └── ConfigurationError
        ├── MissingTokenError
        ├── CACertificateNotFoundError
        ├── CACertificateError
        └── InvalidConfigurationError

Transport failures are not wrapped: they surface as the usual
``requests.RequestException`` subclasses (see ``is_request_error``).
"""

import requests

from .base import AuthProxyError, ExceptionContext
from .config import (
    CACertificateError,
    CACertificateNotFoundError,
    ConfigurationError,
    ErrorCodes,
    InvalidConfigurationError,
    MissingTokenError,
)


def is_request_error(exc: BaseException) -> bool:
    """Return True if ``exc`` was raised by the HTTP transport."""
    return isinstance(exc, requests.RequestException)


__all__ = [
    "AuthProxyError",
    "ExceptionContext",
    "ConfigurationError",
    "MissingTokenError",
    "CACertificateNotFoundError",
    "CACertificateError",
    "InvalidConfigurationError",
    "ErrorCodes",
    "is_request_error",
]
