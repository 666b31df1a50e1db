"""Link extraction and the link-aware inline body builder"""

import re
from typing import Union

from mdtree.core.inline import tokenize
from mdtree.core.models import Link, Span


LINK_RE = re.compile(r'\[([^\]]+?)\]\(([^)]+?)\)')


def extract_links(text: str) -> list[Union[str, Link]]:
    """Split text into raw strings (still to be tokenized) and Link spans.

    Returns [text] unchanged when it holds no link; otherwise empty strings
    between adjacent links are dropped.
    """
    parts: list[Union[str, Link]] = []
    pos = 0
    for m in LINK_RE.finditer(text):
        if m.start() > pos:
            parts.append(text[pos:m.start()])
        parts.append(Link(body=tokenize(m.group(1)), url=m.group(2)))
        pos = m.end()
    if not parts:
        return [text]
    if pos < len(text):
        parts.append(text[pos:])
    return parts


def parse_text_body(text: str) -> list[Span]:
    """Build a block body: links first, then styles within the link-free gaps."""
    body: list[Span] = []
    for part in extract_links(text):
        if isinstance(part, str):
            body.extend(tokenize(part))
        else:
            body.append(part)
    return body
