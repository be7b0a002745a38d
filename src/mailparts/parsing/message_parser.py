"""
Recursive MIME message parser.

Builds the document tree from a raw message: top-level envelope and headers,
boundary-delimited sections, and nested sections for every part that declares
its own boundary. Parsing is best-effort and never raises on message text.
"""

import hashlib
from typing import List, Optional, Sequence, Tuple, Union

import charset_normalizer
import structlog

from ..config import Settings, settings as default_settings
from ..exceptions import InvalidInputError
from ..models.document import (
    BodyPart,
    HeaderMap,
    Message,
    MessageResource,
    MultipartPart,
    ParsedDocument,
    Part,
    Section,
)
from .header_scanner import TRIM_CHARS, scan_headers, split_lines
from .multipart_splitter import extract_boundary, has_boundary, split_sections

logger = structlog.get_logger(__name__)

RawMessage = Union[str, bytes]


def decode_raw_message(raw: bytes) -> str:
    """
    Turn raw message bytes into text.

    UTF-8 first, then the best guess of charset-normalizer, finally UTF-8
    with replacement characters.

    Args:
        raw: Message bytes as delivered

    Returns:
        Decoded message text
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    detected = charset_normalizer.from_bytes(raw).best()
    if detected is not None:
        logger.debug("raw_message_charset_detected", encoding=detected.encoding)
        return str(detected)
    return raw.decode("utf-8", errors="replace")


def compute_fingerprint(raw: bytes, algorithm: str = "sha1") -> str:
    """
    Compute the hex content fingerprint of a raw message.

    Args:
        raw: Message bytes
        algorithm: hashlib algorithm name

    Returns:
        Hex digest
    """
    return hashlib.new(algorithm, raw).hexdigest()


def _join_body(lines: Sequence[str]) -> str:
    return "".join(line + "\n" for line in lines)


def _build_parts(
    headers: HeaderMap,
    lines: Sequence[str],
    depth: int,
    config: Settings,
) -> Tuple[str, List[Part]]:
    boundary = extract_boundary(headers)
    sections, _ = split_sections(lines, boundary)

    # Section 0 is raw content: its headers were consumed by the caller.
    parts: List[Part] = [BodyPart(headers={}, body=_join_body(sections[0]))]

    for section in sections[1:]:
        part_headers, body_start = scan_headers(section)
        body = _join_body(section[body_start:])

        if not has_boundary(part_headers):
            parts.append(BodyPart(headers=part_headers, body=body))
        elif depth >= config.max_nesting_depth:
            logger.warning(
                "nesting_depth_exceeded",
                depth=depth,
                max_nesting_depth=config.max_nesting_depth,
            )
            parts.append(BodyPart(headers=part_headers, body=body))
        else:
            nested = _parse_section(body, part_headers, depth + 1, config)
            parts.append(MultipartPart(headers=part_headers, part=nested))

    return boundary, parts


def _parse_section(
    text: str,
    seeded_headers: Optional[HeaderMap],
    depth: int,
    config: Settings,
) -> Section:
    if not isinstance(text, str):
        raise InvalidInputError(
            "Section text must be str", {"type": type(text).__name__}
        )

    lines = split_lines(text)
    if seeded_headers:
        headers = dict(seeded_headers)
        body_lines: Sequence[str] = lines
    else:
        headers, body_start = scan_headers(lines)
        body_lines = lines[body_start:]

    boundary, parts = _build_parts(headers, body_lines, depth, config)
    return Section(boundary=boundary, headers=headers, parts=parts)


def parse_section(
    text: str,
    seeded_headers: Optional[HeaderMap] = None,
    config: Optional[Settings] = None,
) -> Section:
    """
    Parse a sub-section of a message.

    When ``seeded_headers`` is non-empty the text is treated as pure body and
    the seeded map is used verbatim; otherwise the leading header block is
    scanned first.

    Args:
        text: Section text (a part body)
        seeded_headers: Headers already parsed by the parent, if any
        config: Settings override (defaults to global settings)

    Returns:
        Section with boundary, headers and ordered parts

    Raises:
        InvalidInputError: If text is not a str
    """
    return _parse_section(text, seeded_headers, 1, config or default_settings)


def parse_message(raw: RawMessage, config: Optional[Settings] = None) -> ParsedDocument:
    """
    Parse a complete raw message.

    The first line is the envelope and is excluded from header scanning.

    Args:
        raw: Whole message as str or bytes
        config: Settings override (defaults to global settings)

    Returns:
        ParsedDocument wrapping the Message attributes

    Raises:
        InvalidInputError: If raw is neither str nor bytes
    """
    config = config or default_settings

    if isinstance(raw, bytes):
        raw_bytes = raw
        text = decode_raw_message(raw)
    elif isinstance(raw, str):
        raw_bytes = raw.encode("utf-8", errors="surrogatepass")
        text = raw
    else:
        raise InvalidInputError(
            "Message must be str or bytes", {"type": type(raw).__name__}
        )

    lines = split_lines(text)
    headers, body_start = scan_headers(lines, start=1)
    boundary, parts = _build_parts(headers, lines[body_start:], 0, config)

    message = Message(
        envelope=lines[0].strip(TRIM_CHARS),
        hash=compute_fingerprint(raw_bytes, config.hash_algorithm),
        original=text,
        boundary=boundary,
        headers=headers,
        parts=parts,
    )

    logger.debug(
        "message_parsed",
        hash=message.hash,
        boundary=boundary,
        parts_count=len(parts),
    )

    return ParsedDocument(data=MessageResource(attributes=message))


def parse(
    raw: RawMessage,
    is_section: bool = False,
    seeded_headers: Optional[HeaderMap] = None,
    config: Optional[Settings] = None,
) -> Union[ParsedDocument, Section]:
    """
    Parse a message, or a section of one when ``is_section`` is True.

    Args:
        raw: Message or section text
        is_section: Whether raw is a sub-section (no envelope, hash or original)
        seeded_headers: Headers already parsed for this section
        config: Settings override

    Returns:
        ParsedDocument for a message, Section for a sub-section
    """
    if is_section:
        if isinstance(raw, bytes):
            raw = decode_raw_message(raw)
        return parse_section(raw, seeded_headers, config)
    return parse_message(raw, config)
