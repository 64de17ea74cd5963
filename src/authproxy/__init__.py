"""
authproxy: HTTP clients routed through a local authenticating proxy.

Two drop-in client factories are provided, one per proxy product:

- ``authproxy.acp``: routes through the ACP proxy (``ACP_TOKEN``)
- ``authproxy.gap``: routes through the GAP proxy (``GAP_TOKEN``)

Each resolves a bearer token, trusts the proxy's CA certificate and returns
a client whose requests all go through the proxy.
"""

__version__ = "0.1.0"

from . import acp, gap
from .core.config import ProxyProduct
from .exceptions import (
    AuthProxyError,
    CACertificateError,
    CACertificateNotFoundError,
    ConfigurationError,
    InvalidConfigurationError,
    MissingTokenError,
    is_request_error,
)
from .infrastructure.http import HttpClient, ProxyAdapter, ProxyClientFactory

__all__ = [
    "acp",
    "gap",
    "ProxyProduct",
    "ProxyClientFactory",
    "ProxyAdapter",
    "HttpClient",
    "AuthProxyError",
    "ConfigurationError",
    "MissingTokenError",
    "CACertificateNotFoundError",
    "CACertificateError",
    "InvalidConfigurationError",
    "is_request_error",
]
