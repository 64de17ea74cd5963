"""
Configuration for authproxy.

Usage:
    from authproxy.core.config import ProxyProduct, load_settings, resolve_token

    settings = load_settings(ProxyProduct.ACP)
    resolution = resolve_token(ProxyProduct.ACP, settings=settings)
"""

from .models import (
    AcpSettings,
    GapSettings,
    ProxyProduct,
    ProxySettings,
    TokenResolution,
    TokenSource,
    load_settings,
    resolve_token,
)

__all__ = [
    "AcpSettings",
    "GapSettings",
    "ProxyProduct",
    "ProxySettings",
    "TokenResolution",
    "TokenSource",
    "load_settings",
    "resolve_token",
]
