"""Block matcher: segment a document body into typed blocks by ordered rules"""

import re
from typing import Callable, NamedTuple

import structlog

from mdtree.core.errors import MalformedBlockLiteralError, UnmatchedBlockError
from mdtree.core.links import parse_text_body
from mdtree.core.models import (
    Block,
    Code,
    Heading,
    Image,
    List,
    ListItem,
    Paragraph,
    Quote,
    ThematicBreak,
)


log = structlog.get_logger()

HEADING_RE        = re.compile(r'(#{1,6}) ([^\n]+)')
QUOTE_RE          = re.compile(r'(?:>[^\n]*(?:\n|\Z))+')
LIST_RE           = re.compile(r'(?:(?:-|\d+\.) [^\n]*(?:\n|\Z))+')
LIST_ITEM_RE      = re.compile(r'(-|\d+\.) (.*)')
IMAGE_RE          = re.compile(r'!\[([^\]\n]*)\]\([ \t]*([^)\s][^)\n]*)\)([^\n]*)')
CAPTION_RE        = re.compile(r'\((.+)\)')
CODE_RE           = re.compile(r'```([\w+#.-]+)?[ \t]*\n(?:(.*?)\n)??```[ \t]*(?=\n|\Z)', re.DOTALL)
THEMATIC_BREAK_RE = re.compile(r'-{3,}')
PARAGRAPH_RE      = re.compile(r'[^\n]+')
QUOTE_MARKER_RE   = re.compile(r'> ?')


class BlockRule(NamedTuple):
    name:    str
    pattern: re.Pattern
    build:   Callable[[re.Match], Block]


def _heading(m: re.Match) -> Heading:
    return Heading(level=len(m.group(1)), body=parse_text_body(m.group(2).strip()))


def _quote(m: re.Match) -> Quote:
    lines = m.group(0).rstrip('\n').split('\n')
    text = '\n'.join(QUOTE_MARKER_RE.sub('', line, count=1) for line in lines)
    return Quote(body=parse_text_body(text.strip()))


def _list(m: re.Match) -> List:
    """Build a list; it is ordered only if every line uses a numeric marker."""
    items, ordered = [], True
    for line in m.group(0).rstrip('\n').split('\n'):
        item = LIST_ITEM_RE.match(line)
        if item is None:
            raise MalformedBlockLiteralError('list', m.group(0), f"bad item line {line!r}")
        ordered = ordered and item.group(1) != '-'
        items.append(ListItem(body=parse_text_body(item.group(2).strip())))
    return List(ordered=ordered, items=items)


def _image(m: re.Match) -> Image:
    alt_text, url, trailing = m.group(1), m.group(2).rstrip(), m.group(3).strip()
    caption = CAPTION_RE.fullmatch(trailing)
    return Image(url=url, alt_text=alt_text, caption=caption.group(1) if caption else trailing)


def _code(m: re.Match) -> Code:
    return Code(language=m.group(1) or None, body=m.group(2) or '')


def _thematic_break(m: re.Match) -> ThematicBreak:
    return ThematicBreak()


def _paragraph(m: re.Match) -> Paragraph:
    return Paragraph(body=parse_text_body(m.group(0).strip()))


# Evaluated strictly in order; the first rule matching at the cursor wins.
BLOCK_RULES: tuple[BlockRule, ...] = (
    BlockRule('heading',        HEADING_RE,        _heading),
    BlockRule('quote',          QUOTE_RE,          _quote),
    BlockRule('list',           LIST_RE,           _list),
    BlockRule('image',          IMAGE_RE,          _image),
    BlockRule('code',           CODE_RE,           _code),
    BlockRule('thematic_break', THEMATIC_BREAK_RE, _thematic_break),
    BlockRule('paragraph',      PARAGRAPH_RE,      _paragraph),
)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def match_block(body: str, pos: int = 0) -> tuple[Block, int]:
    """Match one block at pos; return (block, end offset of the matched literal)."""
    for rule in BLOCK_RULES:
        m = rule.pattern.match(body, pos)
        if m and m.end() > pos:
            return rule.build(m), m.end()
    raise UnmatchedBlockError(body[pos:])


def parse_blocks(body: str) -> list[Block]:
    """Segment body into blocks; whitespace-only input yields []."""
    blocks: list[Block] = []
    pos = _skip_whitespace(body, 0)
    while pos < len(body):
        block, pos = match_block(body, pos)
        blocks.append(block)
        pos = _skip_whitespace(body, pos)
    log.debug("blocks_parsed", count=len(blocks), chars=len(body))
    return blocks
