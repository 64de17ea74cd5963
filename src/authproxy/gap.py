"""
Drop-in HTTP client factory that routes requests through the GAP proxy.

Usage:
    from authproxy import gap

    # Uses GAP_TOKEN from the environment or the .env file
    client = gap.create(base_url="https://api.example.com")

    # Or pass the token explicitly
    client = gap.create(base_url="https://api.example.com", token="gap_xxx")
"""

import requests

from authproxy.core.config import ProxyProduct
from authproxy.exceptions import is_request_error
from authproxy.infrastructure.http import ProxyClientFactory

factory = ProxyClientFactory(ProxyProduct.GAP)

create = factory.create
create_session = factory.create_session

__all__ = ["create", "create_session", "factory", "is_request_error", "requests"]
