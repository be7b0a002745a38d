# Data models for the parsed message tree

from .document import (
    PARSED_CONTENT_TYPE,
    TRANSFER_ENCODING,
    BodyPart,
    HeaderMap,
    Message,
    MessageResource,
    MultipartPart,
    ParsedDocument,
    Part,
    Section,
)

__all__ = [
    "PARSED_CONTENT_TYPE",
    "TRANSFER_ENCODING",
    "HeaderMap",
    "BodyPart",
    "MultipartPart",
    "Part",
    "Section",
    "Message",
    "MessageResource",
    "ParsedDocument",
]
