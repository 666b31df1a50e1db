"""Document entry point: split the header, load metadata, and parse blocks"""

import structlog

from mdtree.core.blocks import parse_blocks
from mdtree.core.models import Document
from mdtree.core.split import parse_frontmatter, split


log = structlog.get_logger()


def parse(text: str, frontmatter: str = 'simple') -> Document:
    """Parse a markdown document into metadata and an ordered block list.

    frontmatter selects the header loader ('simple' key: value lines or 'yaml').
    Raises a ParseError subclass on unmatched body text or a bad header.
    """
    header, body = split(text)
    metadata = parse_frontmatter(header, frontmatter)
    blocks = parse_blocks(body)
    log.debug("document_parsed", metadata_keys=len(metadata), blocks=len(blocks))
    return Document(metadata=metadata, blocks=blocks)
