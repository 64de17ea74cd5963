"""Command-line interface for checking and exercising the proxy setup."""

from .main import cli

__all__ = ["cli"]
