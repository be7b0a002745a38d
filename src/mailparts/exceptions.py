"""
Exceptions raised by mailparts.

Parsing itself is best-effort and never raises on message text; these cover
caller misuse and undecodable payloads.
"""

from typing import Any, Dict, Optional


class MailPartsError(Exception):
    """Base exception for all mailparts errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} (Details: {details_str})"
        return self.message


class InvalidInputError(MailPartsError, TypeError):
    """Raised when parse() is given something other than str or bytes."""


class InvalidDocumentError(MailPartsError, ValueError):
    """Raised when a lookup is run on a structure parse() did not produce."""


class PayloadDecodeError(MailPartsError, ValueError):
    """Raised when a base64 or quoted-printable payload cannot be decoded."""
