"""
Boundary extraction and multipart section splitting.
"""

from typing import List, Sequence, Tuple

import structlog

from ..models.document import PARSED_CONTENT_TYPE, HeaderMap
from .header_scanner import TRIM_CHARS, is_blank

logger = structlog.get_logger(__name__)

BOUNDARY_PARAM = "boundary="

_QUOTE_CHARS = "\"'"


def has_boundary(headers: HeaderMap) -> bool:
    """Return True if the parsed Content-Type carries a boundary parameter."""
    return BOUNDARY_PARAM in headers.get(PARSED_CONTENT_TYPE, "")


def extract_boundary(headers: HeaderMap) -> str:
    """
    Extract the boundary token from ``X-Parsed-Content-Type``.

    Takes the text after ``boundary=`` up to the next ``;`` and strips quotes
    and blank characters around it.

    Args:
        headers: Header map of the part being split

    Returns:
        Boundary token, or "" when there is no content type or no boundary
    """
    content_type = headers.get(PARSED_CONTENT_TYPE)
    if not content_type:
        return ""

    position = content_type.find(BOUNDARY_PARAM)
    if position == -1:
        return ""

    raw = content_type[position + len(BOUNDARY_PARAM):].split(";", 1)[0]
    return raw.strip(TRIM_CHARS + _QUOTE_CHARS)


def split_sections(
    lines: Sequence[str], boundary: str
) -> Tuple[List[List[str]], List[str]]:
    """
    Split body lines into boundary-delimited sections.

    ``--boundary`` opens a new section and ``--boundary--`` closes the body;
    delimiter lines belong to no section. Section 0 holds whatever precedes the
    first delimiter. An empty boundary means no splitting at all.

    Args:
        lines: Body lines without their newline characters
        boundary: Boundary token from extract_boundary()

    Returns:
        Tuple of (sections as lists of lines, epilogue lines after the close)
    """
    if not boundary:
        return [list(lines)], []

    opener = "--" + boundary
    closer = opener + "--"

    sections: List[List[str]] = [[]]
    epilogue: List[str] = []
    closed = False

    for line in lines:
        marker = line.rstrip(TRIM_CHARS)
        if marker == opener:
            sections.append([])
            closed = False
        elif marker == closer:
            closed = True
        elif closed:
            epilogue.append(line)
        else:
            sections[-1].append(line)

    if any(not is_blank(line) for line in epilogue):
        logger.debug("epilogue_found", boundary=boundary, lines=len(epilogue))

    return sections, epilogue
