# MIME parsing module

from .header_scanner import is_blank, scan_headers, split_lines
from .message_parser import (
    compute_fingerprint,
    decode_raw_message,
    parse,
    parse_message,
    parse_section,
)
from .multipart_splitter import extract_boundary, has_boundary, split_sections

__all__ = [
    "parse",
    "parse_message",
    "parse_section",
    "scan_headers",
    "split_lines",
    "is_blank",
    "extract_boundary",
    "has_boundary",
    "split_sections",
    "compute_fingerprint",
    "decode_raw_message",
]
