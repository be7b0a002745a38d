"""
Content-Transfer-Encoding decoding for part bodies.
"""

import base64
import binascii
import quopri
import re
from typing import Optional

import charset_normalizer
import structlog

from ..exceptions import PayloadDecodeError

logger = structlog.get_logger(__name__)

QUOTED_PRINTABLE = "quoted-printable"
BASE64 = "base64"

_NON_BASE64_RE = re.compile(r"[^A-Za-z0-9+/]")


def bytes_to_text(payload: bytes) -> str:
    """
    Convert decoded payload bytes to text.

    Args:
        payload: Decoded bytes

    Returns:
        UTF-8 text, else charset-normalizer's best guess, else UTF-8 with
        replacement characters
    """
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError:
        pass

    detected = charset_normalizer.from_bytes(payload).best()
    if detected is not None:
        return str(detected)
    return payload.decode("utf-8", errors="replace")


def decode_base64(content: str) -> bytes:
    """
    Decode a base64 body that may contain line breaks or lost padding.

    Raises:
        PayloadDecodeError: If the payload length cannot be valid base64
    """
    cleaned = _NON_BASE64_RE.sub("", content)
    if len(cleaned) % 4 == 1:
        raise PayloadDecodeError(
            "Invalid base64 payload length", {"length": len(cleaned)}
        )
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as e:
        raise PayloadDecodeError("Invalid base64 payload", {"error": str(e)}) from e


def decode_quoted_printable(content: str) -> bytes:
    return quopri.decodestring(content.encode("utf-8", errors="surrogatepass"))


def decode(content: str, encoding: Optional[str], strict: bool = False) -> str:
    """
    Decode a part body according to its transfer encoding.

    Only ``quoted-printable`` and ``base64`` are decoded (compared
    case-insensitively, surrounding whitespace ignored); any other value
    returns the content unchanged.

    Args:
        content: Raw part body
        encoding: Content-Transfer-Encoding header value
        strict: Raise on undecodable payloads instead of returning them raw

    Returns:
        Decoded text, or the raw content when decoding does not apply or fails

    Raises:
        PayloadDecodeError: If strict is True and the payload is invalid
    """
    scheme = (encoding or "").strip().lower()

    if scheme == QUOTED_PRINTABLE:
        decoder = decode_quoted_printable
    elif scheme == BASE64:
        decoder = decode_base64
    else:
        return content

    try:
        return bytes_to_text(decoder(content))
    except PayloadDecodeError as e:
        if strict:
            raise
        logger.warning("payload_decode_failed", encoding=scheme, error=str(e))
        return content
