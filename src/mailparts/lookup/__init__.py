# Content lookup and transfer decoding

from .content_locator import as_document, find, find_html, find_plain_text, get_header
from .decoder import BASE64, QUOTED_PRINTABLE, bytes_to_text, decode

__all__ = [
    "find",
    "find_html",
    "find_plain_text",
    "get_header",
    "as_document",
    "decode",
    "bytes_to_text",
    "BASE64",
    "QUOTED_PRINTABLE",
]
