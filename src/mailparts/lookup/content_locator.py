"""
Content lookup over a parsed document.

Walks the tree depth-first in document order and returns the decoded body of
the first part whose parsed Content-Type contains the requested MIME type.
"""

from typing import Any, Iterable, Mapping, Optional

import structlog
from pydantic import ValidationError

from ..exceptions import InvalidDocumentError
from ..models.document import BodyPart, MultipartPart, ParsedDocument, Part
from .decoder import decode

logger = structlog.get_logger(__name__)

HTML = "text/html"
PLAIN_TEXT = "text/plain"
MULTIPART = "multipart"


def as_document(document: Any) -> ParsedDocument:
    """
    Accept a ParsedDocument or its dumped dict form.

    Args:
        document: Result of parse_message(), or its model_dump()

    Returns:
        ParsedDocument instance

    Raises:
        InvalidDocumentError: If document was not produced by the parser
    """
    if isinstance(document, ParsedDocument):
        return document

    if isinstance(document, Mapping):
        try:
            return ParsedDocument.model_validate(document)
        except ValidationError as e:
            raise InvalidDocumentError(
                "Not a parsed message document", {"errors": e.error_count()}
            ) from e

    raise InvalidDocumentError(
        "Not a parsed message document", {"type": type(document).__name__}
    )


def _decoded_body(body: str, encoding: Optional[str], strict: bool) -> str:
    if encoding is None:
        return body
    return decode(body, encoding, strict=strict)


def _first_match(parts: Iterable[Part], mime_type: str, strict: bool) -> str:
    for part in parts:
        found = _find_in_part(part, mime_type, strict)
        if found != "":
            return found
    return ""


def _find_in_part(part: Part, mime_type: str, strict: bool) -> str:
    content_type = part.content_type
    if content_type is None:
        return ""

    if mime_type in content_type:
        if isinstance(part, BodyPart):
            return _decoded_body(part.body, part.transfer_encoding, strict)
        return ""

    if MULTIPART in content_type and isinstance(part, MultipartPart):
        return _first_match(part.part.parts, mime_type, strict)

    return ""


def find(document: Any, mime_type: str, strict: bool = False) -> str:
    """
    Find the body of the first part matching a MIME type.

    The match is a case-sensitive substring test against
    ``X-Parsed-Content-Type``. For the message itself a match returns the
    first part's body (the content after the header block); a multipart type
    searches every part in document order.

    Args:
        document: ParsedDocument or its dumped dict form
        mime_type: MIME type to look for, e.g. "text/html"
        strict: Raise on undecodable payloads instead of returning them raw

    Returns:
        Decoded body, or "" when nothing matches

    Raises:
        InvalidDocumentError: If document was not produced by the parser
    """
    message = as_document(document).message
    content_type = message.content_type
    if content_type is None:
        return ""

    if mime_type in content_type:
        first = message.parts[0] if message.parts else None
        body = first.body if isinstance(first, BodyPart) else ""
        return _decoded_body(body, message.transfer_encoding, strict)

    if MULTIPART in content_type:
        return _first_match(message.parts, mime_type, strict)

    logger.debug("content_type_not_found", mime_type=mime_type)
    return ""


def find_html(document: Any) -> str:
    """Find the HTML body of the message, "" if there is none."""
    return find(document, HTML)


def find_plain_text(document: Any) -> str:
    """Find the plain text body of the message, "" if there is none."""
    return find(document, PLAIN_TEXT)


def get_header(document: Any, header: str) -> str:
    """
    Return a top-level header value (case-sensitive name), "" if absent.

    Raises:
        InvalidDocumentError: If document was not produced by the parser
    """
    return as_document(document).message.headers.get(header, "")
