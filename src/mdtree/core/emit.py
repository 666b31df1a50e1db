"""Markdown emitter: serialize a Document back to the source dialect"""

from mdtree.core.models import (
    Block,
    Code,
    Document,
    Heading,
    Image,
    Link,
    List,
    Paragraph,
    Quote,
    Span,
    TextRun,
    TextStyle,
    ThematicBreak,
)


STYLE_MARKERS: dict[TextStyle, str] = {
    TextStyle.plain:  '',
    TextStyle.italic: '*',
    TextStyle.strong: '**',
    TextStyle.code:   '`',
}


def _marker(run: TextRun) -> str:
    """Pick the run's marker; italics with an edge '*' are wrapped in '_' instead."""
    value = run.value
    if run.style == TextStyle.italic and (value.startswith('*') or value.endswith('*')) and '_' not in value:
        return '_'
    return STYLE_MARKERS[run.style]


def _emit_run(run: TextRun) -> str:
    marker = _marker(run)
    return f"{marker}{run.value}{marker}"


def emit_spans(spans: list[Span]) -> str:
    """Render inline spans, wrapping styled runs in their markers."""
    parts = []
    for span in spans:
        if isinstance(span, Link):
            parts.append(f"[{''.join(_emit_run(r) for r in span.body)}]({span.url})")
        else:
            parts.append(_emit_run(span))
    return ''.join(parts)


def emit_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"{'#' * block.level} {emit_spans(block.body)}"
    if isinstance(block, Paragraph):
        return emit_spans(block.body)
    if isinstance(block, Quote):
        return '\n'.join(f"> {line}" for line in emit_spans(block.body).split('\n'))
    if isinstance(block, List):
        return '\n'.join(
            f"{f'{i}.' if block.ordered else '-'} {emit_spans(item.body)}"
            for i, item in enumerate(block.items, start=1)
        )
    if isinstance(block, Image):
        caption = f"({block.caption})" if block.caption else ''
        return f"![{block.alt_text}]({block.url}){caption}"
    if isinstance(block, Code):
        body = f"{block.body}\n" if block.body else ''
        return f"```{block.language or ''}\n{body}```"
    if isinstance(block, ThematicBreak):
        return '---'
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def emit_frontmatter(metadata: dict[str, str], leading_break: bool = False) -> str:
    """Render the header; an empty one is still written before a leading break."""
    if not metadata:
        # a bare leading '---' would be read back as the opening header delimiter
        return "---\n---\n\n" if leading_break else ''
    lines = '\n'.join(f"{key}: {value}" for key, value in metadata.items())
    return f"---\n{lines}\n---\n\n"


def emit_markdown(document: Document) -> str:
    """Return the document as markdown; blocks are separated by blank lines."""
    blocks = document.blocks
    header = emit_frontmatter(document.metadata, bool(blocks) and isinstance(blocks[0], ThematicBreak))
    body = '\n\n'.join(emit_block(b) for b in blocks)
    return f"{header}{body}\n"
