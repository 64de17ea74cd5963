"""
TLS trust store for proxy-intercepted connections.

The proxy terminates TLS with certificates issued by its own CA. Connections
through it must trust that CA in addition to the usual public roots.
"""

import logging
import ssl
from pathlib import Path
from typing import Optional, Union

import certifi
from urllib3.util.ssl_ import create_urllib3_context

from authproxy.core.config import ProxyProduct
from authproxy.exceptions import CACertificateError, CACertificateNotFoundError

logger = logging.getLogger(__name__)


def read_ca_certificate(product: ProxyProduct, path: Union[str, Path]) -> str:
    """Read the proxy CA certificate as PEM text.

    Raises:
        CACertificateNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise CACertificateNotFoundError(product, path)

    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_ssl_context(
    product: ProxyProduct,
    ca_pem: str,
    path: Optional[Union[str, Path]] = None,
) -> ssl.SSLContext:
    """Create an SSL context trusting the public roots plus ``ca_pem``.

    Raises:
        CACertificateError: If ``ca_pem`` holds no usable certificate
    """
    context = create_urllib3_context(cert_reqs=ssl.CERT_REQUIRED)
    context.load_verify_locations(cafile=certifi.where())

    try:
        context.load_verify_locations(cadata=ca_pem)
    except (ssl.SSLError, ValueError) as e:
        raise CACertificateError(product, path, str(e)) from e

    return context


def load_trust_context(product: ProxyProduct, path: Union[str, Path]) -> ssl.SSLContext:
    """Read the CA certificate at ``path`` and build the SSL context for it."""
    context = build_ssl_context(product, read_ca_certificate(product, path), path)
    logger.debug(f"Loaded {product.display_name} CA certificate from {path}")
    return context
