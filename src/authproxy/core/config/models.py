"""
Configuration models for authproxy.

Defines the supported proxy products and the pydantic-settings model that
reads each product's token and proxy URL from the environment and from the
``.env`` file in the working directory.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authproxy.constants import (
    CA_CERT_CONFIG_DIR,
    CA_CERT_FILENAME,
    DEFAULT_ENV_FILE,
    DEFAULT_PROXY_URL,
    INSTALL_URL_TEMPLATE,
    PROXY_URL_SCHEMES,
)
from authproxy.core.security import mask_token
from authproxy.exceptions.config import InvalidConfigurationError


class ProxyProduct(str, Enum):
    """Supported authenticating proxies."""

    ACP = "acp"
    GAP = "gap"

    @property
    def display_name(self) -> str:
        return self.value.upper()

    @property
    def env_prefix(self) -> str:
        return f"{self.display_name}_"

    @property
    def token_env_var(self) -> str:
        return f"{self.env_prefix}TOKEN"

    @property
    def proxy_url_env_var(self) -> str:
        return f"{self.env_prefix}PROXY_URL"

    @property
    def token_example(self) -> str:
        return f"{self.value}_xxx"

    @property
    def install_url(self) -> str:
        return INSTALL_URL_TEMPLATE.format(product=self.value)

    def default_ca_cert_path(self) -> Path:
        """CA certificate installed by the proxy, under the current home directory."""
        return Path.home() / CA_CERT_CONFIG_DIR / self.value / CA_CERT_FILENAME


class TokenSource(str, Enum):
    """Where a proxy token was found."""

    ARGUMENT = "argument"
    ENVIRONMENT = "environment"
    DOTENV = ".env"


@dataclass(frozen=True)
class TokenResolution:
    """A resolved proxy token and its origin."""

    token: str = field(repr=False)
    source: TokenSource

    @property
    def masked(self) -> str:
        return mask_token(self.token)


class ProxySettings(BaseSettings):
    """Token and proxy URL for one product.

    Subclasses bind the fields to the product's exact variable names.
    Environment variables take precedence over the ``.env`` file.
    """

    token: Optional[str] = Field(None, description="Bearer token for the proxy")
    proxy_url: str = Field(DEFAULT_PROXY_URL, description="Proxy URL")

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("token", mode="before")
    @classmethod
    def validate_token(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(str(v).strip()) == 0:
            return None
        return v

    @field_validator("proxy_url", mode="before")
    @classmethod
    def default_blank_proxy_url(cls, v: Optional[str]) -> str:
        if v is None or len(str(v).strip()) == 0:
            return DEFAULT_PROXY_URL
        return str(v).strip()

    @field_validator("proxy_url")
    @classmethod
    def validate_proxy_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in PROXY_URL_SCHEMES or not parsed.netloc:
            raise ValueError("proxy_url must be an http:// or https:// URL")
        return v


class AcpSettings(ProxySettings):
    """Settings read from ``ACP_TOKEN`` and ``ACP_PROXY_URL``."""

    token: Optional[str] = Field(None, validation_alias="ACP_TOKEN")
    proxy_url: str = Field(DEFAULT_PROXY_URL, validation_alias="ACP_PROXY_URL")


class GapSettings(ProxySettings):
    """Settings read from ``GAP_TOKEN`` and ``GAP_PROXY_URL``."""

    token: Optional[str] = Field(None, validation_alias="GAP_TOKEN")
    proxy_url: str = Field(DEFAULT_PROXY_URL, validation_alias="GAP_PROXY_URL")


SETTINGS_CLASSES = {
    ProxyProduct.ACP: AcpSettings,
    ProxyProduct.GAP: GapSettings,
}


def load_settings(
    product: Union[ProxyProduct, str],
    env_file: Optional[Union[str, Path]] = DEFAULT_ENV_FILE,
) -> ProxySettings:
    """Load settings for ``product`` from the environment and ``env_file``.

    Variable names are matched exactly. A relative ``env_file`` is resolved
    against the current working directory at call time. Pass ``None`` to
    ignore dotenv files entirely.
    """
    product = ProxyProduct(product)
    try:
        return SETTINGS_CLASSES[product](_env_file=env_file)
    except ValidationError as e:
        error = e.errors()[0]
        loc = str(error["loc"][0]) if error.get("loc") else "proxy_url"
        env_var = {
            "token": product.token_env_var,
            "proxy_url": product.proxy_url_env_var,
        }.get(loc, loc)
        raise InvalidConfigurationError(
            env_var, error.get("input"), "an http:// or https:// URL"
        ) from e


def resolve_token(
    product: Union[ProxyProduct, str],
    explicit: Optional[str] = None,
    settings: Optional[ProxySettings] = None,
    env_file: Optional[Union[str, Path]] = DEFAULT_ENV_FILE,
) -> Optional[TokenResolution]:
    """Find the proxy token for ``product``.

    Order: explicit argument, environment variable, ``.env`` file. Blank
    values count as unset. Returns None when no token is configured.
    """
    product = ProxyProduct(product)

    if explicit is not None and explicit.strip():
        return TokenResolution(explicit, TokenSource.ARGUMENT)

    env_value = os.environ.get(product.token_env_var)
    if env_value is not None and env_value.strip():
        return TokenResolution(env_value, TokenSource.ENVIRONMENT)

    if settings is None:
        settings = load_settings(product, env_file)
    if settings.token:
        return TokenResolution(settings.token, TokenSource.DOTENV)

    return None
