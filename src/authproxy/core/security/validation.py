"""
Credential display helpers.

Tokens must never reach logs or terminal output in clear text.
"""

from authproxy.constants import MASKED_TOKEN_VISIBLE_CHARS


def mask_token(token: str, visible_chars: int = MASKED_TOKEN_VISIBLE_CHARS) -> str:
    """
    Mask a token for display/logging purposes.

    Args:
        token: Token to mask
        visible_chars: Number of characters to show at the end

    Returns:
        Masked token string
    """
    if not token:
        return "[empty]"

    if len(token) <= visible_chars:
        return "*" * len(token)

    return "*" * (len(token) - visible_chars) + token[-visible_chars:]
