"""
Configuration-related exceptions.

Raised while resolving the proxy token, proxy URL and CA certificate.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from .base import AuthProxyError, ExceptionContext

if TYPE_CHECKING:
    from authproxy.core.config.models import ProxyProduct


class ErrorCodes:
    """Error codes for programmatic handling."""

    TOKEN_MISSING = "TOKEN_MISSING"
    CA_CERT_MISSING = "CA_CERT_MISSING"
    CA_CERT_INVALID = "CA_CERT_INVALID"
    CONFIG_INVALID = "CONFIG_INVALID"


def _install_hint(product: "ProxyProduct") -> str:
    return f"If {product.display_name} is not installed, visit {product.install_url}"


class ConfigurationError(AuthProxyError):
    """Base class for configuration-related errors."""
    pass


class MissingTokenError(ConfigurationError):
    """Raised when no proxy token is configured anywhere."""

    def __init__(self, product: "ProxyProduct"):
        self.product = product
        env_var = product.token_env_var
        example = product.token_example
        message = f"{env_var} is required but not found."
        help_text = (
            f"To configure your {product.display_name} token:\n"
            f"  1. Generate a token: {product.value} token create\n"
            f"  2. Set it via one of these methods:\n"
            f"     - Environment variable: export {env_var}={example}\n"
            f"     - .env file in working directory: {env_var}={example}\n"
            f"     - Explicit argument: create(token=\"{example}\")"
        )
        context = ExceptionContext(
            help_text=help_text,
            error_code=ErrorCodes.TOKEN_MISSING,
            user_action=_install_hint(product),
            context={"product": product.value},
        )
        super().__init__(message, context)


class CACertificateNotFoundError(ConfigurationError):
    """Raised when the proxy CA certificate file does not exist."""

    def __init__(self, product: "ProxyProduct", path: Union[str, Path]):
        self.product = product
        self.path = Path(path)
        message = f"{product.display_name} CA certificate not found at {self.path}."
        context = ExceptionContext(
            error_code=ErrorCodes.CA_CERT_MISSING,
            user_action=_install_hint(product),
            context={"product": product.value},
        )
        super().__init__(message, context)


class CACertificateError(ConfigurationError):
    """Raised when the proxy CA certificate exists but cannot be loaded."""

    def __init__(self, product: "ProxyProduct", path: Union[str, Path, None], details: str):
        self.product = product
        self.path = Path(path) if path is not None else None
        location = f" at {self.path}" if self.path is not None else ""
        message = f"{product.display_name} CA certificate{location} could not be loaded."
        context = ExceptionContext(
            help_text="The file must contain a PEM encoded certificate.",
            error_code=ErrorCodes.CA_CERT_INVALID,
            user_action=_install_hint(product),
            technical_details=details,
            context={"product": product.value},
        )
        super().__init__(message, context)


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        context = ExceptionContext(
            help_text=f"Check '{field}' in your environment or .env file",
            error_code=ErrorCodes.CONFIG_INVALID,
        )
        super().__init__(message, context)
