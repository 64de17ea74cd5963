"""HTTP infrastructure components."""

from .adapter import ProxyAdapter
from .client import HttpClient
from .factory import ProxyClientFactory
from .trust import build_ssl_context, load_trust_context, read_ca_certificate

__all__ = [
    "HttpClient",
    "ProxyAdapter",
    "ProxyClientFactory",
    "build_ssl_context",
    "load_trust_context",
    "read_ca_certificate",
]
