"""
mailparts - parse raw RFC-822/MIME messages into an addressable part tree.
"""

from .config import Settings, settings
from .exceptions import (
    InvalidDocumentError,
    InvalidInputError,
    MailPartsError,
    PayloadDecodeError,
)
from .logging_config import get_logger, setup_logging
from .lookup import decode, find, find_html, find_plain_text, get_header
from .models import (
    BodyPart,
    Message,
    MessageResource,
    MultipartPart,
    ParsedDocument,
    Section,
)
from .parsing import (
    extract_boundary,
    parse,
    parse_message,
    parse_section,
    scan_headers,
    split_sections,
)

__version__ = "1.0.0"

__all__ = [
    "parse",
    "parse_message",
    "parse_section",
    "scan_headers",
    "extract_boundary",
    "split_sections",
    "find",
    "find_html",
    "find_plain_text",
    "get_header",
    "decode",
    "BodyPart",
    "MultipartPart",
    "Section",
    "Message",
    "MessageResource",
    "ParsedDocument",
    "MailPartsError",
    "InvalidInputError",
    "InvalidDocumentError",
    "PayloadDecodeError",
    "Settings",
    "settings",
    "setup_logging",
    "get_logger",
]
