"""Header/body splitting and frontmatter loading"""

import re
from typing import NamedTuple

import yaml

from mdtree.core.errors import FrontmatterError


FRONTMATTER_RE = re.compile(r'---[ \t]*\n(?:(.*?)\n)??---[ \t]*(?=\n|\Z)', re.DOTALL)
FIELD_RE = re.compile(r'(.+?):\s(.+)')
LOADERS = ('simple', 'yaml')


class Split(NamedTuple):
    header: str     # delimiter-bounded region including both '---' lines, or ''
    body:   str


def split(text: str) -> Split:
    """Separate a leading '---' delimited header from the document body."""
    text = text.replace('\r\n', '\n').replace('\r', '\n').strip()
    m = FRONTMATTER_RE.match(text)
    if m is None:
        return Split('', text)
    return Split(m.group(0), text[m.end():].strip())


def _header_content(header: str) -> str:
    m = FRONTMATTER_RE.match(header.strip())
    return (m.group(1) or '') if m else ''


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
        return value[1:-1]
    return value


def _load_simple(content: str) -> dict[str, str]:
    meta: dict[str, str] = {}
    for line in content.split('\n'):
        m = FIELD_RE.match(line)
        if m is None:
            continue
        key, value = m.group(1).strip(), m.group(2).strip()
        if key and value:
            meta[key] = _unquote(value)
    return meta


def _load_yaml(content: str) -> dict[str, str]:
    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(data, dict):
        raise FrontmatterError(f"Invalid YAML frontmatter: expected a mapping, got {type(data).__name__}")
    meta: dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise FrontmatterError(f"Invalid YAML frontmatter: value for {key!r} is not a scalar")
        meta[str(key)] = '' if value is None else str(value)
    return meta


def parse_frontmatter(header: str, loader: str = 'simple') -> dict[str, str]:
    """Load a header region into a flat str -> str mapping; later keys win."""
    if loader not in LOADERS:
        raise ValueError(f"Unknown frontmatter loader: {loader!r}")
    content = _header_content(header)
    if not content.strip():
        return {}
    return _load_yaml(content) if loader == 'yaml' else _load_simple(content)
