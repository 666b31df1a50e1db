"""Inline tokenizer: split link-free text into styled text runs"""

from dataclasses import dataclass, field

from mdtree.core.models import TextRun, TextStyle


# Precedence matters: '**' must be tried before '*'.
MARKERS: tuple[tuple[str, TextStyle], ...] = (
    ('**', TextStyle.strong),
    ('*',  TextStyle.italic),
    ('_',  TextStyle.italic),
    ('`',  TextStyle.code),
)


@dataclass
class _OpenRun:
    style:  TextStyle
    marker: str                     # literal opening marker; '' for plain runs
    buffer: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return ''.join(self.buffer)


def _head(text: str, pos: int) -> tuple[TextStyle, str]:
    """Classify the marker at pos, returning (style, marker) with marker '' for plain."""
    for marker, style in MARKERS:
        if text.startswith(marker, pos):
            return style, marker
    return TextStyle.plain, ''


def _emit(finished: list[TextRun], style: TextStyle, value: str) -> None:
    """Append a run, merging it into the previous run when the styles match."""
    if finished and finished[-1].style == style:
        finished[-1] = TextRun(style=style, value=finished[-1].value + value)
    else:
        finished.append(TextRun(style=style, value=value))


def _close_unterminated(finished: list[TextRun], run: _OpenRun) -> None:
    """Flush a styled run still open at end of input.

    The literal opening marker is put back when the run can fold into a
    preceding plain run. Without one the run keeps its style, unless it is
    empty, in which case the bare marker becomes plain text.
    """
    if finished and finished[-1].style == TextStyle.plain:
        _emit(finished, TextStyle.plain, run.marker + run.text)
    elif run.buffer:
        _emit(finished, run.style, run.text)
    else:
        _emit(finished, TextStyle.plain, run.marker)


def tokenize(text: str) -> list[TextRun]:
    """Convert raw inline text into an ordered list of styled TextRuns.

    Never raises: unterminated markers degrade to literal text.
    """
    finished: list[TextRun] = []
    current: _OpenRun | None = None
    pos, end = 0, len(text)

    while pos < end:
        style, marker = _head(text, pos)

        if current is None or (current.style == TextStyle.plain and style != TextStyle.plain):
            if current is not None:
                _emit(finished, current.style, current.text)
            start = pos + len(marker)
            current = _OpenRun(style, marker, list(text[start:start + 1]))
            pos = start + 1
        elif current.style == TextStyle.plain or style == TextStyle.plain:
            current.buffer.append(text[pos])
            pos += 1
        elif style == current.style:
            _emit(finished, current.style, current.text)
            current = None
            pos += len(marker)
        else:
            # a different marker inside an open styled run is literal text
            current.buffer.append(marker)
            pos += len(marker)

    if current is not None:
        if current.style == TextStyle.plain:
            _emit(finished, TextStyle.plain, current.text)
        else:
            _close_unterminated(finished, current)
    return finished
