"""
Parsed document model - the tree produced by the MIME parser.

A top-level parse yields a ParsedDocument wrapping a Message; a sub-section
parse yields a bare Section. Each entry of ``parts`` is either a BodyPart
(headers plus raw body) or a MultipartPart (headers plus a nested Section).
All models are frozen once built.
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

PARSED_CONTENT_TYPE = "X-Parsed-Content-Type"
TRANSFER_ENCODING = "Content-Transfer-Encoding"

# Header name (case preserved) -> value, in first-seen order
HeaderMap = Dict[str, str]


class _PartBase(BaseModel):
    headers: HeaderMap = Field(
        default_factory=dict, description="Section headers in first-seen order"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def content_type(self) -> Optional[str]:
        """Value of the synthesized X-Parsed-Content-Type header, if any."""
        return self.headers.get(PARSED_CONTENT_TYPE)

    @property
    def transfer_encoding(self) -> Optional[str]:
        return self.headers.get(TRANSFER_ENCODING)


class BodyPart(_PartBase):
    """Leaf part holding raw, un-decoded content."""

    body: str = Field(description="Raw body text, empty string when there is none")


class MultipartPart(_PartBase):
    """Part whose Content-Type declares a boundary; nested parts replace the body."""

    part: "Section" = Field(description="Nested section parsed from this part's body")


Part = Union[BodyPart, MultipartPart]


class Section(BaseModel):
    """Result of parsing a sub-section: boundary, headers and ordered parts."""

    boundary: str = Field(default="", description="Boundary token, empty if none")
    headers: HeaderMap = Field(default_factory=dict)
    parts: List[Part] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get(PARSED_CONTENT_TYPE)

    @property
    def transfer_encoding(self) -> Optional[str]:
        return self.headers.get(TRANSFER_ENCODING)


class Message(Section):
    """Top-level message attributes."""

    envelope: str = Field(description="First line of the raw text, trimmed")
    hash: str = Field(description="Hex content fingerprint of the raw input")
    original: str = Field(description="Verbatim raw input")


class MessageResource(BaseModel):
    """jsonapi-style resource object wrapping the message."""

    type: Literal["message"] = "message"
    id: Literal["0"] = "0"
    attributes: Message

    model_config = {"frozen": True, "extra": "forbid"}


class ParsedDocument(BaseModel):
    """
    Top-level parse result.

    ``model_dump()`` yields ``{"data": {"type": "message", "id": "0",
    "attributes": {...}}}``.
    """

    data: MessageResource

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "data": {
                    "type": "message",
                    "id": "0",
                    "attributes": {
                        "boundary": "",
                        "headers": {"To": "c@d.com", "Subject": "hi"},
                        "parts": [{"headers": {}, "body": "Hello world\n"}],
                        "envelope": "From: a@b.com",
                        "hash": "5d2c5f0c3e1b...",
                        "original": "From: a@b.com\nTo: c@d.com\nSubject: hi\n\nHello world",
                    },
                }
            }
        },
    }

    @property
    def message(self) -> Message:
        return self.data.attributes


MultipartPart.model_rebuild()
Section.model_rebuild()
Message.model_rebuild()
MessageResource.model_rebuild()
ParsedDocument.model_rebuild()
