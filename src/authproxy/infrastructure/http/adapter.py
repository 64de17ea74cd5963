"""
Transport adapter that routes every request through an authenticating proxy.

``ProxyAdapter`` is mounted on a ``requests.Session`` in place of the default
adapter. It pins the proxy, authenticates to it with a bearer token and
verifies TLS against a trust store that includes the proxy's CA.
"""

import ssl
from typing import Dict, Optional
from urllib.parse import urlparse

from requests.adapters import HTTPAdapter

from authproxy.constants import PROXY_AUTHORIZATION_HEADER
from authproxy.core.security import mask_token


class ProxyAdapter(HTTPAdapter):
    """HTTP adapter forwarding all traffic to ``proxy_url``."""

    def __init__(
        self,
        proxy_url: str,
        token: str,
        ssl_context: ssl.SSLContext,
        **kwargs,
    ):
        """Initialize the proxy adapter.

        Args:
            proxy_url: URL of the local proxy, http:// or https://
            token: Bearer token sent in ``Proxy-Authorization``
            ssl_context: Trust store used for TLS through the proxy
            **kwargs: Additional arguments for HTTPAdapter
        """
        self.proxy_url = proxy_url
        self.ssl_context = ssl_context
        self._token = token
        # HTTPAdapter.__init__ builds the pool manager, which needs ssl_context
        super().__init__(**kwargs)

    @property
    def proxies(self) -> Dict[str, str]:
        return {"http": self.proxy_url, "https": self.proxy_url}

    @property
    def proxy_is_tls(self) -> bool:
        return urlparse(self.proxy_url).scheme == "https"

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        pool_kwargs.setdefault("ssl_context", self.ssl_context)
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)

    def proxy_manager_for(self, proxy, **proxy_kwargs):
        """Return the urllib3 ProxyManager for ``proxy``, trusting the proxy CA."""
        proxy_kwargs.setdefault("ssl_context", self.ssl_context)
        if self.proxy_is_tls:
            proxy_kwargs.setdefault("proxy_ssl_context", self.ssl_context)
        return super().proxy_manager_for(proxy, **proxy_kwargs)

    def proxy_headers(self, proxy) -> Dict[str, str]:
        """Headers sent to the proxy, on CONNECT and on forwarded plain-HTTP requests."""
        headers = super().proxy_headers(proxy)
        headers[PROXY_AUTHORIZATION_HEADER] = f"Bearer {self._token}"
        return headers

    def send(
        self,
        request,
        stream: bool = False,
        timeout=None,
        verify=True,
        cert=None,
        proxies: Optional[Dict[str, str]] = None,
    ):
        """Send ``request`` through the configured proxy.

        Caller- or environment-supplied ``proxies`` are ignored.
        """
        return super().send(
            request,
            stream=stream,
            timeout=timeout,
            verify=verify,
            cert=cert,
            proxies=self.proxies,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(proxy_url={self.proxy_url!r}, "
            f"token={mask_token(self._token)!r})"
        )
