"""File pipeline: discover markdown files, parse them, and write JSON trees"""

from pathlib import Path

import structlog
from pydantic import BaseModel

from mdtree.core.models import Document
from mdtree.core.parse import parse
from mdtree.core.utils.hashing import content_hash
from mdtree.core.utils.slug import slugify


log = structlog.get_logger()

MD_EXTENSIONS = {'.md', '.mdx'}


class ParsedFile(BaseModel):
    """Output envelope for one source file."""
    slug:     str
    path:     str
    hash:     str           # sha256 of the raw file text, header included
    document: Document


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path, frontmatter: str = 'simple') -> ParsedFile:
    raw = path.read_text(encoding='utf-8')
    document = parse(raw, frontmatter)
    return ParsedFile(
        slug=document.metadata.get('slug') or slugify(path.stem),
        path=str(path),
        hash=content_hash(raw),
        document=document,
    )


def run_parse(
    path: str,
    output_dir: Path,
    frontmatter: str = 'simple',
    indent: int = 2,
    ) -> list[tuple[Path, Path]]:
    """Parse path and write one <slug>.json per document. Returns (source, json_file) pairs."""
    files = discover_files(Path(path))
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in files:
        try:
            parsed = parse_file(p, frontmatter)
            out_file = output_dir / f"{parsed.slug}.json"
            out_file.write_text(parsed.model_dump_json(indent=indent or None), encoding='utf-8')
        except Exception as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
        log.info("file_parsed", source=str(p), output=str(out_file), blocks=len(parsed.document.blocks))
        results.append((p, out_file))
    return results
