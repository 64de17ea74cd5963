"""
HTTP client returned by the proxy client factories.

A thin layer over ``requests.Session`` that carries a base URL, default
headers and a default timeout, the way an axios-style instance would.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from authproxy.constants import DEFAULT_TIMEOUT_SECONDS


class HttpClient:
    """Session-backed HTTP client with base URL and default timeout."""

    def __init__(
        self,
        base_url: str = "",
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        headers: Optional[Dict[str, str]] = None,
    ):
        """Initialize HTTP client with configuration.

        Args:
            base_url: Base URL for relative endpoints (may be empty)
            session: Session to send requests with; a plain one is created if omitted
            timeout: Default request timeout in seconds, None for no timeout
            headers: Default headers added to every request
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)

    def request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Perform a request.

        Args:
            method: HTTP method
            endpoint: Endpoint relative to base_url, or an absolute URL
            **kwargs: Additional arguments passed to requests

        Returns:
            Response object
        """
        url = self._build_url(endpoint)
        kwargs.setdefault('timeout', self.timeout)

        self.logger.debug(f"{method.upper()} {url}")

        response = self.session.request(method.upper(), url, **kwargs)

        self._log_response(response)
        return response

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> requests.Response:
        return self.request('GET', endpoint, params=params, **kwargs)

    def post(
        self,
        endpoint: str,
        data: Optional[Any] = None,
        json: Optional[Any] = None,
        **kwargs
    ) -> requests.Response:
        return self.request('POST', endpoint, data=data, json=json, **kwargs)

    def put(self, endpoint: str, data: Optional[Any] = None, json: Optional[Any] = None, **kwargs) -> requests.Response:
        return self.request('PUT', endpoint, data=data, json=json, **kwargs)

    def patch(self, endpoint: str, data: Optional[Any] = None, json: Optional[Any] = None, **kwargs) -> requests.Response:
        return self.request('PATCH', endpoint, data=data, json=json, **kwargs)

    def delete(self, endpoint: str, **kwargs) -> requests.Response:
        return self.request('DELETE', endpoint, **kwargs)

    def head(self, endpoint: str, **kwargs) -> requests.Response:
        return self.request('HEAD', endpoint, **kwargs)

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        if endpoint.startswith(('http://', 'https://')) or not self.base_url:
            return endpoint
        return urljoin(self.base_url + '/', endpoint.lstrip('/'))

    def _log_response(self, response: requests.Response) -> None:
        """Log response details without consuming streamed bodies."""
        self.logger.debug(
            f"Response: {response.status_code} - "
            f"content-length {response.headers.get('Content-Length', 'unknown')}"
        )

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
