"""
RFC-822 header block scanner.

Consumes lines until the first blank line, folding continuation lines into the
previous header. Used for the top-level headers and for every body section.
"""

import re
from typing import List, Optional, Sequence, Tuple

import structlog

from ..models.document import PARSED_CONTENT_TYPE, HeaderMap

logger = structlog.get_logger(__name__)

# Characters considered blank when testing for the header/body separator
TRIM_CHARS = " \t\r\n\0\x0b"

# A line starting with one of these continues the previous header
FOLD_CHARS = " \t"

_CONTENT_TYPE_RE = re.compile(r"content-type", re.IGNORECASE)


def is_blank(line: str) -> bool:
    """Return True if the line holds nothing but blank characters."""
    return not line.strip(TRIM_CHARS)


def scan_headers(
    lines: Sequence[str],
    start: int = 0,
    headers: Optional[HeaderMap] = None,
) -> Tuple[HeaderMap, int]:
    """
    Scan a header block starting at ``lines[start]``.

    Header names keep their case. The value starts two characters after the
    first colon (skipping ``": "``) and is not trimmed further. A name that
    contains ``content-type`` (any case) is mirrored under
    ``X-Parsed-Content-Type``, continuation lines included.

    Args:
        lines: Message lines without their newline characters
        start: Index of the first header line
        headers: Optional pre-seeded header map (copied, never mutated)

    Returns:
        Tuple of (header map, index of the first body line). The index equals
        ``len(lines)`` when no blank separator is found, meaning no body.
    """
    scanned: HeaderMap = dict(headers) if headers else {}
    last_header: Optional[str] = None
    mirror = False

    index = start
    while index < len(lines):
        line = lines[index]
        index += 1

        if is_blank(line):
            return scanned, index

        if line[0] in FOLD_CHARS:
            if last_header is None:
                logger.debug("orphan_continuation_skipped", line_number=index)
                continue
            folded = "\n" + line.rstrip()
            scanned[last_header] += folded
            if mirror:
                scanned[PARSED_CONTENT_TYPE] += folded
            continue

        colon = line.find(":")
        if colon == -1:
            logger.debug("header_line_without_colon_skipped", line_number=index)
            continue

        last_header = line[:colon]
        value = line[colon + 2:]
        scanned[last_header] = value
        mirror = (
            last_header != PARSED_CONTENT_TYPE
            and _CONTENT_TYPE_RE.search(last_header) is not None
        )
        if mirror:
            scanned[PARSED_CONTENT_TYPE] = value

    return scanned, index


def split_lines(text: str) -> List[str]:
    """Split raw text on LF; a trailing CR stays part of its line."""
    return text.split("\n")
