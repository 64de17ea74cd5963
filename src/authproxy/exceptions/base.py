"""
Base exception classes for authproxy.

Every error raised by authproxy derives from AuthProxyError and renders as
a message followed by setup guidance and an error ID for log correlation.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


def _new_correlation_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class ExceptionContext:
    """Guidance and metadata attached to an AuthProxyError."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    user_action: Optional[str] = None
    technical_details: Optional[str] = None
    correlation_id: Optional[str] = None


class AuthProxyError(Exception):
    """Base exception for all authproxy errors.

    Attributes:
        message: Short description of what went wrong
        help_text: Setup instructions shown below the message
        error_code: Stable code for programmatic handling
        context: Key/value details such as the product or file path
        user_action: Final hint, typically where to install the proxy
        technical_details: Underlying library error, if any
        correlation_id: Short ID repeated in logs and CLI output
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        details = context or ExceptionContext()

        self.message = message
        self.help_text = details.help_text
        self.error_code = details.error_code
        self.context = dict(details.context)
        self.user_action = details.user_action
        self.technical_details = details.technical_details
        self.correlation_id = details.correlation_id or _new_correlation_id()
        self.timestamp = datetime.now()
        super().__init__(message)

    def _sections(self) -> List[str]:
        sections = [self.message]
        sections.extend(s for s in (self.help_text, self.user_action) if s)

        shown = ", ".join(f"{k}: {v}" for k, v in self.context.items() if v is not None)
        if shown:
            sections.append(f"Context: {shown}")

        sections.append(f"Error ID: {self.correlation_id}")
        return sections

    def __str__(self) -> str:
        return "\n\n".join(self._sections())

    def to_dict(self) -> Dict[str, Any]:
        """Structured form for JSON logs."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "context": dict(self.context),
            "help_text": self.help_text,
            "user_action": self.user_action,
            "technical_details": self.technical_details,
        }

    def add_context(self, **kwargs) -> "AuthProxyError":
        """Merge ``kwargs`` into the context and return the same error."""
        self.context.update(kwargs)
        return self
