"""
Unit tests for the acp and gap drop-in modules.
"""

import pytest
import requests

import authproxy
from authproxy import acp, gap
from authproxy.core.config import ProxyProduct
from authproxy.exceptions import CACertificateNotFoundError, MissingTokenError


@pytest.mark.unit
class TestProductModules:

    def test_bound_to_products(self):
        assert acp.factory.product is ProxyProduct.ACP
        assert gap.factory.product is ProxyProduct.GAP
        assert acp.factory is not gap.factory

    def test_reexports(self):
        assert acp.requests is requests
        assert gap.requests is requests
        assert acp.is_request_error(requests.ConnectionError())
        assert authproxy.acp is acp

    def test_acp_create_uses_acp_token(self, install_ca, monkeypatch):
        install_ca("acp")
        monkeypatch.setenv("ACP_TOKEN", "acp_env")
        monkeypatch.setenv("GAP_TOKEN", "gap_env")

        client = acp.create(base_url="https://api.example.com")

        adapter = client.session.get_adapter("https://api.example.com/")
        assert adapter.proxy_headers(adapter.proxy_url)["Proxy-Authorization"] == "Bearer acp_env"

    def test_gap_create_uses_gap_token_and_ca(self, install_ca, write_env_file):
        install_ca("gap")
        write_env_file(GAP_TOKEN="gap_file", GAP_PROXY_URL="http://localhost:9555")

        client = gap.create(base_url="https://api.example.com")

        adapter = client.session.get_adapter("https://api.example.com/")
        assert adapter.proxy_url == "http://localhost:9555"
        assert adapter.proxy_headers(adapter.proxy_url)["Proxy-Authorization"] == "Bearer gap_file"

    def test_gap_missing_token_message(self, install_ca, monkeypatch):
        install_ca("gap")
        monkeypatch.setenv("ACP_TOKEN", "acp_env")

        with pytest.raises(MissingTokenError) as exc_info:
            gap.create()

        assert exc_info.value.message == "GAP_TOKEN is required but not found."

    def test_acp_missing_ca(self, install_ca):
        install_ca("gap")

        with pytest.raises(CACertificateNotFoundError) as exc_info:
            acp.create(token="acp_explicit")

        assert "ACP CA certificate not found" in exc_info.value.message

    def test_caches_are_per_product(self, install_ca):
        install_ca("acp")
        install_ca("gap")

        acp_session = acp.create_session("shared_token")
        gap_session = gap.create_session("shared_token")

        assert acp_session.get_adapter("https://x.test/") is not gap_session.get_adapter("https://x.test/")
        assert acp.factory.cached_tokens() == 1
        assert gap.factory.cached_tokens() == 1
