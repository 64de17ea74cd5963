"""
Factory for proxy-routed HTTP clients.

One factory exists per proxy product. It resolves the token, builds a
``ProxyAdapter`` for it on first use and hands out sessions and clients that
share the cached adapter.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union

import requests

from authproxy.constants import DEFAULT_ENV_FILE, DEFAULT_TIMEOUT_SECONDS
from authproxy.core.config import ProxyProduct, load_settings, resolve_token
from authproxy.core.security import mask_token
from authproxy.exceptions import MissingTokenError

from .adapter import ProxyAdapter
from .client import HttpClient
from .trust import load_trust_context

logger = logging.getLogger(__name__)


class ProxyClientFactory:
    """Creates HTTP clients that route through a product's local proxy."""

    def __init__(
        self,
        product: Union[ProxyProduct, str],
        ca_cert_path: Optional[Union[str, Path]] = None,
        env_file: Optional[Union[str, Path]] = DEFAULT_ENV_FILE,
    ):
        """Initialize the factory.

        Args:
            product: Proxy product (acp or gap)
            ca_cert_path: CA certificate location; defaults to ~/.config/<product>/ca.crt
            env_file: Dotenv file consulted for settings, None to skip it
        """
        self.product = ProxyProduct(product)
        self.env_file = env_file
        self._ca_cert_path = Path(ca_cert_path) if ca_cert_path else None
        self._adapters: Dict[str, ProxyAdapter] = {}
        self._lock = threading.Lock()

    @property
    def ca_cert_path(self) -> Path:
        if self._ca_cert_path is not None:
            return self._ca_cert_path
        return self.product.default_ca_cert_path()

    def resolve_token(self, token: Optional[str] = None) -> str:
        """Return the token to authenticate with.

        Raises:
            MissingTokenError: If no token is passed or configured
        """
        resolution = resolve_token(self.product, token, env_file=self.env_file)
        if resolution is None:
            raise MissingTokenError(self.product)

        logger.debug(
            f"Using {self.product.display_name} token {resolution.masked} "
            f"from {resolution.source.value}"
        )
        return resolution.token

    def get_adapter(self, token: str) -> ProxyAdapter:
        """Return the cached adapter for ``token``, creating it on first use.

        Raises:
            CACertificateNotFoundError: If the CA certificate is missing
            CACertificateError: If the CA certificate cannot be loaded
            InvalidConfigurationError: If the proxy URL is invalid
        """
        with self._lock:
            adapter = self._adapters.get(token)
            if adapter is not None:
                logger.debug(
                    f"Reusing {self.product.display_name} proxy adapter for token {mask_token(token)}"
                )
                return adapter

            settings = load_settings(self.product, self.env_file)
            ssl_context = load_trust_context(self.product, self.ca_cert_path)
            adapter = ProxyAdapter(settings.proxy_url, token, ssl_context)
            self._adapters[token] = adapter

        logger.info(
            f"Created {self.product.display_name} proxy adapter via {settings.proxy_url} "
            f"for token {mask_token(token)}"
        )
        return adapter

    def create_session(self, token: Optional[str] = None) -> requests.Session:
        """Create a session whose only route is the proxy."""
        adapter = self.get_adapter(self.resolve_token(token))

        session = requests.Session()
        # HTTP(S)_PROXY from the environment must not reroute traffic
        session.trust_env = False
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def create(
        self,
        base_url: str = "",
        token: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpClient:
        """Create an HTTP client routed through the proxy.

        Args:
            base_url: Base URL for relative endpoints
            token: Proxy token; falls back to <PRODUCT>_TOKEN from the
                environment, then from the .env file
            timeout: Default request timeout in seconds
            headers: Default request headers

        Returns:
            HttpClient using the cached proxy adapter
        """
        return HttpClient(
            base_url=base_url,
            session=self.create_session(token),
            timeout=timeout,
            headers=headers,
        )

    def cached_tokens(self) -> int:
        """Number of tokens with a cached adapter."""
        with self._lock:
            return len(self._adapters)

    def clear_cache(self) -> None:
        """Close and drop all cached adapters."""
        with self._lock:
            adapters = list(self._adapters.values())
            self._adapters.clear()

        for adapter in adapters:
            adapter.close()
