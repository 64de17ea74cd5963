"""Security helpers for credential handling."""

from .validation import mask_token

__all__ = ["mask_token"]
