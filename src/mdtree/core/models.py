"""Document tree models: blocks, inline spans, and the parsed document"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TextStyle(str, Enum):
    plain = "plain"
    italic = "italic"
    strong = "strong"
    code = "code"


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- inline spans ---

class TextRun(_Node):
    """A maximal run of characters sharing one inline style."""
    type: Literal["text"] = "text"
    style: TextStyle = TextStyle.plain
    value: str


class Link(_Node):
    """An inline hyperlink; its label is styled text but never another link."""
    type: Literal["link"] = "link"
    body: list[TextRun]
    url: str


Span = Annotated[Union[TextRun, Link], Field(discriminator="type")]


# --- blocks ---

class Heading(_Node):
    type: Literal["heading"] = "heading"
    level: int = Field(ge=1, le=6)
    body: list[Span]


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    body: list[Span]


class Quote(_Node):
    type: Literal["quote"] = "quote"
    body: list[Span]       # quoted lines keep their newline separators


class ListItem(_Node):
    type: Literal["list_item"] = "list_item"
    body: list[Span]


class List(_Node):
    type: Literal["list"] = "list"
    ordered: bool
    items: list[ListItem]


class Image(_Node):
    type: Literal["image"] = "image"
    url: str
    alt_text: str
    caption: str = ""


class Code(_Node):
    """Fenced code block; body is verbatim and never tokenized."""
    type: Literal["code"] = "code"
    language: Optional[str] = None
    body: str


class ThematicBreak(_Node):
    type: Literal["thematic_break"] = "thematic_break"


Block = Annotated[
    Union[Heading, Paragraph, Quote, List, Image, Code, ThematicBreak],
    Field(discriminator="type"),
]


class Document(_Node):
    """Parse result: flat metadata header plus the ordered block sequence."""
    metadata: dict[str, str] = {}
    blocks: list[Block] = []
